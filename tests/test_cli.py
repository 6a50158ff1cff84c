import io

import pytest

from bstlab.bst import delete, insert
from bstlab.cli import demo_binary_search_tree, demo_binary_tree, main
from bstlab.dot import dot_text_bst


def _expected_bst():
    root = None
    for key in (15, 10, 20, 8, 12):
        root = insert(root, key)
    return delete(root, root)


def test_bst_demo_writes_tree_and_stops_at_parentless_successor(tmp_path):
    path = tmp_path / "bst.dot"
    out = io.StringIO()
    with pytest.raises(ValueError):
        demo_binary_search_tree(path, out)
    assert path.read_text(encoding="utf-8") == dot_text_bst(_expected_bst())
    lines = out.getvalue().split("\n")
    assert lines[0] == "Tree structure has been modified after insertions."
    assert lines[1] == "Tree structure has been modified after deletion."
    assert lines[-1] == "successor of node (20) is "


def test_bst_demo_search_lines(tmp_path):
    out = io.StringIO()
    with pytest.raises(ValueError):
        demo_binary_search_tree(tmp_path / "bst.dot", out)
    text = out.getvalue()
    for key in (15, 9, 22):
        assert f"tree search result of key {key} is not found\n" in text
    assert "node with key of 2 does not exist, failed to get successor\n" in text


def test_bst_demo_extremes_match_tree(tmp_path):
    out = io.StringIO()
    with pytest.raises(ValueError):
        demo_binary_search_tree(tmp_path / "bst.dot", out)
    tree = _expected_bst()
    text = out.getvalue()
    assert f"minimum result Some({tree.minimum().key})\n" in text
    assert f"maximum result Some({tree.maximum().key})\n" in text
    assert f"root node Some({tree.key})\n" in text


def test_binary_tree_demo_files(tmp_path):
    out = io.StringIO()
    demo_binary_tree(tmp_path, out)
    names = sorted(p.name for p in tmp_path.iterdir())
    assert names == ["prime.dot", "prime_t2.dot", "prime_t3.dot", "prime_t4.dot"]
    t2 = (tmp_path / "prime_t2.dot").read_text(encoding="utf-8")
    t4 = (tmp_path / "prime_t4.dot").read_text(encoding="utf-8")
    assert t2 == t4
    assert (tmp_path / "prime.dot").read_text(encoding="utf-8") == (
        "graph tree{\n\t5--3;\n\t5--7;\n}"
    )


def test_binary_tree_demo_counts(tmp_path):
    out = io.StringIO()
    demo_binary_tree(tmp_path, out)
    text = out.getvalue()
    assert "Current tree depth: 2\n" in text
    assert "Amount of nodes in current tree: 6\n" in text
    assert "status of node deletion: true\n" in text


def test_binary_tree_demo_discard_consistency(tmp_path):
    out = io.StringIO()
    demo_binary_tree(tmp_path, out)
    t3 = (tmp_path / "prime_t3.dot").read_text(encoding="utf-8")
    edges = t3.splitlines()[1:-1]
    lines = out.getvalue().splitlines()
    count_line = next(line for line in lines if line.startswith("Count nodes after discard"))
    assert int(count_line.rsplit(" ", 1)[1]) == len(edges) + 1
    assert "\t5--3;" not in edges


def test_main_bst_reports_error(tmp_path, capsys):
    path = tmp_path / "out.dot"
    assert main(["--output", str(path)]) == 1
    captured = capsys.readouterr()
    assert "error:" in captured.err
    assert path.read_text(encoding="utf-8") == dot_text_bst(_expected_bst())


def test_main_binary_tree_succeeds(tmp_path, capsys):
    assert main(["--binary-tree", "--directory", str(tmp_path)]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("Current tree depth:")
    assert (tmp_path / "prime_t3.dot").exists()


def test_main_missing_directory_fails(tmp_path, capsys):
    missing = tmp_path / "nope"
    assert main(["--binary-tree", "--directory", str(missing)]) == 1
    assert "error:" in capsys.readouterr().err