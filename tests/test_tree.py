import pytest

from gerpy.tree import DirNode, build_tree, iter_paths, main


def _sample_tree():
    bar = DirNode("Bar")
    empty = DirNode("empty")
    for name in ("x.cpp", "y.cpp", "z.cpp"):
        bar.add_file(name)
    foo = DirNode("Foo")
    foo.add_subdirectory(bar)
    foo.add_subdirectory(empty)
    for name in ("a.cpp", "b.cpp", "c.cpp"):
        foo.add_file(name)
    return foo


def test_iter_paths_sample_order():
    assert list(iter_paths(_sample_tree(), "dir")) == [
        "dir/Bar/x.cpp",
        "dir/Bar/y.cpp",
        "dir/Bar/z.cpp",
        "dir/empty",
        "dir/a.cpp",
        "dir/b.cpp",
        "dir/c.cpp",
    ]


def test_empty_node_yields_itself():
    assert list(iter_paths(DirNode("empty"), "root")) == ["root"]


def test_node_predicates():
    foo = _sample_tree()
    assert foo.has_files() and foo.has_subdirs() and not foo.is_empty()
    empty = foo.subdirs[1]
    assert not empty.has_files() and not empty.has_subdirs() and empty.is_empty()
    assert len(foo.subdirs) == 2
    assert len(foo.files) == 3


def test_add_subdirectory_sets_parent():
    foo = _sample_tree()
    assert all(sub.parent is foo for sub in foo.subdirs)


def test_copy_is_deep_and_equal():
    foo = _sample_tree()
    clone = foo.copy()
    assert clone == foo
    assert clone.parent is None
    assert clone.subdirs[0].parent is clone
    assert clone.subdirs[0] is not foo.subdirs[0]
    clone.subdirs[0].add_file("w.cpp")
    assert "w.cpp" not in foo.subdirs[0].files
    assert list(iter_paths(foo, "d")) != list(iter_paths(clone, "d"))


def test_build_tree_from_disk(tmp_path):
    top = tmp_path / "top"
    (top / "sub").mkdir(parents=True)
    (top / "hollow").mkdir()
    (top / "sub" / "inner.txt").write_text("x")
    (top / "outer.txt").write_text("y")
    root = build_tree(top)
    assert root.name == "top"
    assert root.files == ["outer.txt"]
    assert [d.name for d in root.subdirs] == ["hollow", "sub"]
    assert list(iter_paths(root, "top")) == [
        "top/hollow",
        "top/sub/inner.txt",
        "top/outer.txt",
    ]


def test_build_tree_trailing_slash_name(tmp_path):
    top = tmp_path / "named"
    top.mkdir()
    assert build_tree(str(top) + "/").name == "named"


def test_build_tree_rejects_missing(tmp_path):
    with pytest.raises(NotADirectoryError):
        build_tree(tmp_path / "missing")


def test_main_prints_paths(tmp_path, capsys):
    top = tmp_path / "t"
    top.mkdir()
    (top / "f.txt").write_text("hi")
    assert main([str(top)]) == 0
    assert capsys.readouterr().out.splitlines() == [f"{top}/f.txt"]


def test_main_wrong_argument_count():
    assert main([]) == 1
    assert main(["a", "b"]) == 1