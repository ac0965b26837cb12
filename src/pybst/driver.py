"""
Interactive command session over an OrderedTree.

Usage:
    pybst keys.txt [--type i|d|s]

The tree is seeded from the input file, then single-letter commands are read
from standard input until 'q' or end of input.
"""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, TextIO

from .bst import DeleteStatus, InsertStatus, OrderedTree
from .values import Key, KeyKind, MalformedInputError, build_tree, parse_value

MENU = (
    ("i", "Insert Item"),
    ("d", "Delete Item"),
    ("p", "Print Tree"),
    ("r", "Retrieve Item"),
    ("l", "Count Leaf Nodes"),
    ("s", "Find Single Parents"),
    ("c", "Find Cousins"),
    ("q", "Quit program"),
)


def _join(keys: list[Key]) -> str:
    return "".join(f"{key} " for key in keys)


class Session:
    """
    Command loop reading from stdin and writing to stdout.

    End of input behaves like the quit command.
    """

    def __init__(
        self,
        tree: OrderedTree[Key],
        kind: KeyKind,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ):
        self.tree = tree
        self.kind = kind
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._handlers: dict[str, Callable[[], None]] = {
            "i": self.insert,
            "d": self.delete,
            "p": self.print_tree,
            "r": self.retrieve,
            "l": self.count_leaves,
            "s": self.single_parents,
            "c": self.cousins,
        }

    def _write(self, text: str) -> None:
        self.stdout.write(text)

    def _read(self, prompt: str) -> str:
        self._write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.strip()

    def _read_key(self, action: Optional[str] = None) -> Key:
        noun = "number" if self.kind.is_numeric else "string"
        prompt = f"Enter a {noun} to {action}: " if action else f"Enter a {noun}: "
        return parse_value(self._read(prompt), self.kind)

    def run(self) -> None:
        """Print the menu and process commands until quit."""
        self._write("Commands:\n")
        for code, label in MENU:
            self._write(f"({code}) - {label}\n")

        while True:
            try:
                command = self._read("Enter a command: ").lower()
            except EOFError:
                break
            if command == "q":
                break
            handler = self._handlers.get(command)
            if handler is None:
                self._write("Invalid command. Please try again.\n")
                continue
            try:
                handler()
            except MalformedInputError as err:
                self._write(f"Error processing command: {err}\n")
            except EOFError:
                break

    def print_tree(self) -> None:
        self._write(f"In-order: {_join(self.tree.in_order())}\n")

    def insert(self) -> None:
        self.print_tree()
        key = self._read_key("insert")
        if self.tree.insert(key) is InsertStatus.DUPLICATE:
            self._write("The item already exists in the tree.\n")
        self.print_tree()

    def delete(self) -> None:
        self.print_tree()
        key = self._read_key("delete")
        if self.tree.delete(key) is DeleteStatus.NOT_FOUND:
            self._write("The number is not present in the tree\n")
        self.print_tree()

    def retrieve(self) -> None:
        self.print_tree()
        key = self._read_key("search")
        if self.tree.contains(key):
            self._write("Item is present in the tree\n")
        else:
            self._write("Item is not present in the tree\n")

    def count_leaves(self) -> None:
        self._write(f"The number of leaf nodes are {self.tree.count_leaves()}\n")

    def single_parents(self) -> None:
        self._write(f"Single Parents: {_join(self.tree.single_child_nodes())}\n")

    def cousins(self) -> None:
        self.print_tree()
        key = self._read_key()
        self._write(f"{key} cousins: {_join(self.tree.cousins_of(key))}\n")


def main(
    argv: Optional[list[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """
    Console entry point.

    Returns:
        Process exit status
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    parser = argparse.ArgumentParser(
        prog="pybst", description="Interactive binary search tree session."
    )
    parser.add_argument("input", help="file with one key per line")
    parser.add_argument(
        "--type", dest="kind", default=None,
        help="key type: i - int, d - double, s - string (prompted if omitted)",
    )
    args = parser.parse_args(argv)

    code = args.kind
    if code is None:
        stdout.write("Enter list type (i - int, d - double, s - string): ")
        stdout.flush()
        code = stdin.readline()
    try:
        kind = KeyKind.from_code(code)
    except ValueError:
        stdout.write("Invalid type. Exiting.\n")
        return 1

    def report(err: MalformedInputError) -> None:
        stdout.write(f"{err}\n")

    try:
        # Undecodable bytes become U+FFFD and fail parsing like any bad line.
        with open(args.input, encoding="utf-8", errors="replace") as f:
            tree = build_tree(f, kind, on_error=report)
    except OSError:
        stdout.write(f"Error: File not found: {args.input}\n")
        return 1

    Session(tree, kind, stdin, stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
