#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
test_rb_render.py
-----------------

Checks the text renderings and the demo driver built on top of them.
"""

import contextlib
import io
import unittest

from rb_demo import DEFAULT_VALUES, main
from rb_render import format_pairs, render
from red_black_tree import BLACK, RED, RedBlackTree, TreeConfig


class TestRender(unittest.TestCase):
    def test_three_nodes(self):
        self.assertEqual(
            render(RedBlackTree(items=[2, 1, 3])),
            "└── 2 (B)\n"
            "    ├── 1 (R)\n"
            "    └── 3 (R)",
        )

    def test_nested_prefixes(self):
        self.assertEqual(
            render(RedBlackTree(items=[1, 2, 3, 4, 5, 6])),
            "└── 2 (B)\n"
            "    ├── 1 (B)\n"
            "    └── 4 (R)\n"
            "        ├── 3 (B)\n"
            "        └── 5 (B)\n"
            "            └── 6 (R)",
        )

    def test_lone_left_child_is_drawn_as_tail(self):
        self.assertEqual(
            render(RedBlackTree(items=[2, 1])),
            "└── 2 (B)\n"
            "    └── 1 (R)",
        )

    def test_empty_tree_uses_label(self):
        self.assertEqual(render(RedBlackTree()), "Empty Red-Black Tree")
        tree = RedBlackTree(config=TreeConfig(empty_label="nothing here"))
        self.assertEqual(render(tree), "nothing here")

    def test_format_pairs(self):
        self.assertEqual(format_pairs([(2, BLACK), (1, RED)]), "  2.B  1.R")
        self.assertEqual(format_pairs([]), "")
        tree = RedBlackTree(items=[1, 2, 3])
        self.assertEqual(format_pairs(tree.pre_order()), str(tree))


class TestDemo(unittest.TestCase):
    def run_main(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = main(argv)
        return status, out.getvalue()

    def test_default_sequence(self):
        status, output = self.run_main([])
        self.assertEqual(status, 0)
        for value in DEFAULT_VALUES:
            self.assertIn(f"insert {value}\n", output)
        last = output.strip().splitlines()[-1]
        values = sorted(int(token.split(".")[0]) for token in last.split())
        self.assertEqual(values, list(range(1, 12)))

    def test_deletions(self):
        status, output = self.run_main(
            ["1", "2", "3", "--delete", "2", "--delete", "99", "--check"]
        )
        self.assertEqual(status, 0)
        self.assertIn("delete 2: removed", output)
        self.assertIn("delete 99: not found", output)
        self.assertEqual(output.strip().splitlines()[-1].strip(), "3.B  1.R")


if __name__ == "__main__":
    unittest.main(verbosity=2)
