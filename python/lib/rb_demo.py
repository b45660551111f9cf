#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
rb_demo.py
----------

Feed integers into a red‑black tree and print the tree after every step.

    $ rb-demo                       # 3 5 10 11 2 4 8 7 1 6 9
    $ rb-demo 1 2 3 --delete 2 -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from rb_render import format_pairs, render
from red_black_tree import RedBlackTree, TreeConfig

DEFAULT_VALUES = [3, 5, 10, 11, 2, 4, 8, 7, 1, 6, 9]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rb-demo",
        description="Insert integers into a red-black tree, printing it after each step.",
    )
    parser.add_argument(
        "values", nargs="*", type=int, default=DEFAULT_VALUES,
        help="values to insert, in order (default: %(default)s)",
    )
    parser.add_argument(
        "--delete", action="append", type=int, default=[], metavar="V",
        help="value to delete after inserting (repeatable)",
    )
    parser.add_argument(
        "--check", action="store_true",
        help="validate the red-black invariants after every mutation",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log rotations and fix-up cases",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    tree: RedBlackTree[int] = RedBlackTree(config=TreeConfig(check_invariants=args.check))
    for value in args.values:
        tree.insert(value)
        print(f"insert {value}")
        print(render(tree))
        print()

    for value in args.delete:
        found = tree.delete(value)
        print(f"delete {value}: {'removed' if found else 'not found'}")
        print(render(tree))
        print()

    print(format_pairs(tree.pre_order()) or tree.config.empty_label)
    return 0


if __name__ == "__main__":
    sys.exit(main())
