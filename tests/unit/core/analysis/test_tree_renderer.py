from __future__ import annotations

"""
Unit tests for the ASCII Tree Renderer.
"""

from shelltree.core.analysis.tree_renderer import render_tree
from shelltree.core.interpreter.session import build_tree


def test_render_sample_tree(sample_transcript):
    lines = render_tree(build_tree(sample_transcript))

    assert lines == [
        "/ (48381165)",
        "├── a/ (94853)",
        "│   ├── e/ (584)",
        "│   │   └── i (584)",
        "│   ├── f (29116)",
        "│   ├── g (2557)",
        "│   └── h.lst (62596)",
        "├── d/ (24933642)",
        "│   ├── j (4060174)",
        "│   ├── d.log (8033020)",
        "│   ├── d.ext (5626152)",
        "│   └── k (7214296)",
        "├── b.txt (14848514)",
        "└── c.dat (8504156)",
    ]


def test_render_without_sizes():
    root = build_tree(["$ cd home", "$ ls", "dir docs", "1 a.txt"])
    assert render_tree(root, show_sizes=False) == [
        "home/",
        "├── docs/",
        "└── a.txt",
    ]


def test_render_empty_root():
    root = build_tree(["$ cd /"])
    assert render_tree(root) == ["/ (0)"]


def test_render_deep_chain_from_transcript():
    depth = 2000
    transcript = ["$ cd /"]
    for i in range(depth):
        transcript += ["$ ls", f"dir d{i}", f"$ cd d{i}"]
    transcript += ["$ ls", "7 leaf"]

    lines = render_tree(build_tree(transcript))

    assert len(lines) == depth + 2
    assert lines[0] == "/ (7)"
    assert lines[1] == "└── d0/ (7)"
    assert lines[2] == "    └── d1/ (7)"
    assert lines[-1] == "    " * depth + "└── leaf (7)"


def test_render_nested_entries_keep_connectors():
    root = build_tree([
        "$ cd /", "$ ls", "dir a", "1 z",
        "$ cd a", "$ ls", "dir b", "2 y",
        "$ cd b", "$ ls", "3 x",
    ])
    assert render_tree(root, show_sizes=False) == [
        "/",
        "├── a/",
        "│   ├── b/",
        "│   │   └── x",
        "│   └── y",
        "└── z",
    ]
