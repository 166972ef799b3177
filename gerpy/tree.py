"""In-memory tree of a directory hierarchy and traversal over its files."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass
class DirNode:
    """A directory: its name, the file names it holds and its subdirectories."""

    name: str = ""
    files: list[str] = field(default_factory=list)
    subdirs: list[DirNode] = field(default_factory=list)
    parent: Optional[DirNode] = field(default=None, repr=False, compare=False)

    def add_file(self, name: str) -> None:
        """Record a file name in this directory."""
        self.files.append(name)

    def add_subdirectory(self, node: DirNode) -> None:
        """Attach ``node`` as a subdirectory of this directory."""
        node.parent = self
        self.subdirs.append(node)

    def has_subdirs(self) -> bool:
        return bool(self.subdirs)

    def has_files(self) -> bool:
        return bool(self.files)

    def is_empty(self) -> bool:
        """True when the directory holds neither files nor subdirectories."""
        return not self.files and not self.subdirs

    def copy(self) -> DirNode:
        """Return a deep copy of this subtree; the copy has no parent."""
        clone = DirNode(self.name, list(self.files))
        for sub in self.subdirs:
            clone.add_subdirectory(sub.copy())
        return clone


def _base_name(path: str) -> str:
    trimmed = path.rstrip("/" + os.sep) or path
    return os.path.basename(trimmed) or trimmed


def _fill(node: DirNode, path: str) -> None:
    with os.scandir(path) as entries:
        for entry in sorted(entries, key=lambda e: e.name):
            if entry.is_dir():
                child = DirNode(entry.name)
                node.add_subdirectory(child)
                _fill(child, entry.path)
            elif entry.is_file():
                node.add_file(entry.name)


def build_tree(root_name: str | os.PathLike[str]) -> DirNode:
    """Build a tree mirroring the directory at ``root_name``.

    The root node is named after the last component of the path; entries
    are visited in name order.
    """
    path = os.fspath(root_name)
    if not os.path.isdir(path):
        raise NotADirectoryError(f"not a directory: {path}")
    root = DirNode(_base_name(path))
    _fill(root, path)
    return root


def iter_paths(node: DirNode, dir_name: str) -> Iterator[str]:
    """Yield the path of every file under ``node``, prefixed by ``dir_name``.

    Subdirectories come before the files of a directory. An empty
    directory yields its own path.
    """
    if node.is_empty():
        yield dir_name
        return
    for sub in node.subdirs:
        yield from iter_paths(sub, f"{dir_name}/{sub.name}")
    for name in node.files:
        yield f"{dir_name}/{name}"


def main(argv: list[str] | None = None) -> int:
    """Print every file path under the directory named on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        return 1
    directory = args[0]
    try:
        root = build_tree(directory)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    for path in iter_paths(root, directory):
        print(path)
    return 0