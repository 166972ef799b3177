"""Search engine that indexes every line of a directory tree and answers queries."""

from __future__ import annotations

import bisect
import sys
from dataclasses import dataclass
from typing import IO, Iterable, Iterator

from .index import WordIndex
from .text import ascii_lower, strip_non_alpha_num
from .tree import DirNode, build_tree

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"
DEFAULT_PROMPT = "Query? "
GOODBYE = "Goodbye! Thank you and have a nice day."
USAGE = "Usage: ./gerp inputDirectory outputFile"


@dataclass(frozen=True)
class IndexedFile:
    """A file that has been indexed and the global index of its first line."""

    path: str
    start_index: int


def _open_output(path: str) -> IO[str]:
    return open(path, "w", encoding=_ENCODING, errors=_ERRORS)


def _read_lines(path: str) -> list[str]:
    with open(path, encoding=_ENCODING, errors=_ERRORS, newline="") as fh:
        data = fh.read()
    lines = data.split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines


class Gerp:
    """Indexes the lines of files and looks up the lines holding a word.

    Every line of every indexed file gets a global index; a case-sensitive
    and a case-insensitive word index map words to those indices.
    """

    def __init__(self) -> None:
        self.files: list[IndexedFile] = []
        self.lines: list[str] = []
        self.sensitive = WordIndex(case_sensitive=True)
        self.insensitive = WordIndex(case_sensitive=False)
        self._starts: list[int] = []

    def index_tree(self, root: DirNode, dir_name: str) -> None:
        """Index every file under ``root``, naming paths from ``dir_name``.

        An empty directory is reported by printing its path.
        """
        if root.is_empty():
            print(dir_name)
            return
        for sub in root.subdirs:
            self.index_tree(sub, f"{dir_name}/{sub.name}")
        for name in root.files:
            self.add_file(f"{dir_name}/{name}")

    def add_file(self, path: str) -> IndexedFile:
        """Read the file at ``path`` and index each of its lines."""
        lines = _read_lines(path)
        indexed = IndexedFile(path, len(self.lines))
        self.files.append(indexed)
        self._starts.append(indexed.start_index)
        for number, line in enumerate(lines, indexed.start_index):
            self.lines.append(line)
            self.sensitive.add_line(line, number)
            self.insensitive.add_line(line, number)
        return indexed

    def file_for_line(self, line_index: int) -> IndexedFile:
        """Return the file that the global line ``line_index`` belongs to."""
        if not self.files:
            raise LookupError("no files have been indexed")
        position = bisect.bisect_right(self._starts, line_index) - 1
        if position < 0:
            raise IndexError(f"line index out of range: {line_index}")
        return self.files[position]

    def _format(self, line_index: int) -> str:
        indexed = self.file_for_line(line_index)
        number = line_index - indexed.start_index + 1
        return f"{indexed.path}:{number}: {self.lines[line_index]}"

    def search(self, query: str) -> list[str]:
        """Return result lines for an exact, case-sensitive word match."""
        key = strip_non_alpha_num(query)
        if key not in self.sensitive:
            return [f"{key} Not Found. Try with @insensitive or @i."]
        return [self._format(n) for n in self.sensitive.lines_for(key)]

    def search_insensitive(self, query: str) -> list[str]:
        """Return result lines for a word match that ignores ASCII case."""
        key = ascii_lower(strip_non_alpha_num(query))
        if key not in self.insensitive:
            return [f"{key} Not Found."]
        return [self._format(n) for n in self.insensitive.lines_for(key)]

    def query_loop(
        self,
        tokens: Iterable[str],
        output_path: str,
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        """Answer queries read from ``tokens``, writing results to a file.

        ``@i``/``@insensitive`` searches ignoring case, ``@f`` switches the
        output file, and any ``@q...`` command ends the loop, as does running
        out of tokens.
        """
        words = iter(tokens)
        out = _open_output(output_path)
        try:
            while True:
                print(prompt, end="", flush=True)
                command = next(words, None)
                if command is None:
                    break
                if not command.startswith("@"):
                    out.writelines(f"{line}\n" for line in self.search(command))
                elif command in ("@i", "@insensitive"):
                    query = next(words, None)
                    if query is None:
                        break
                    out.writelines(
                        f"{line}\n" for line in self.search_insensitive(query)
                    )
                elif command == "@f":
                    target = next(words, None)
                    if target is None:
                        break
                    out.close()
                    out = _open_output(target)
                elif command[1:2] == "q":
                    break
        finally:
            out.close()
        print(GOODBYE)


def _stdin_tokens() -> Iterator[str]:
    for line in sys.stdin:
        yield from line.split()


def main(argv: list[str] | None = None) -> int:
    """Index a directory and answer queries from standard input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        print(USAGE, file=sys.stderr)
        return 1
    input_dir, output_file = args
    try:
        root = build_tree(input_dir)
        engine = Gerp()
        engine.index_tree(root, input_dir)
        engine.query_loop(_stdin_tokens(), output_file)
    except OSError as exc:
        name = exc.filename if exc.filename is not None else exc
        print(f"Cannot open file: {name}", file=sys.stderr)
        return 1
    return 0