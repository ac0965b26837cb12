"""
Key kinds, value parsing, and dataset loading.

Datasets are line oriented: one key per line, blank lines skipped. A line
that cannot be parsed is reported and skipped without aborting the load.
"""

from __future__ import annotations

import math
import warnings
from enum import Enum
from typing import Callable, Iterable, Optional, Union

from .bst import OrderedTree

Key = Union[int, float, str]


class MalformedInputError(ValueError):
    """A value could not be parsed as the requested key kind."""

    def __init__(self, text: str, kind: KeyKind):
        super().__init__(f"Error parsing value: {text}")
        self.text = text
        self.kind = kind


class MalformedInputWarning(UserWarning):
    """A dataset line was skipped because it could not be parsed."""
    pass


class KeyKind(Enum):
    """Concrete key type selected by a single-letter code."""
    INT = "i"
    DOUBLE = "d"
    STRING = "s"

    @classmethod
    def from_code(cls, code: str) -> KeyKind:
        """
        Look up a kind by its code ('i', 'd' or 's', any case).

        Raises:
            ValueError: If the code names no kind
        """
        try:
            return cls(code.strip().lower())
        except ValueError:
            raise ValueError(f"Invalid key type: {code!r}") from None

    @property
    def is_numeric(self) -> bool:
        return self is not KeyKind.STRING


def parse_value(text: str, kind: KeyKind) -> Key:
    """
    Parse text as a key of the given kind.

    Args:
        text: Raw input; surrounding whitespace is ignored
        kind: Key kind to produce

    Returns:
        int, float or str key

    Raises:
        MalformedInputError: If text is not a valid value of that kind
    """
    value = text.strip()
    if kind is KeyKind.STRING:
        return value
    # int() and float() allow digit grouping; plain numerals only
    if "_" in value:
        raise MalformedInputError(value, kind)
    try:
        if kind is KeyKind.INT:
            return int(value)
        number = float(value)
    except ValueError:
        raise MalformedInputError(value, kind) from None
    # NaN has no place in a total order
    if math.isnan(number):
        raise MalformedInputError(value, kind)
    return number


def load_keys(
    lines: Iterable[str],
    kind: KeyKind,
    on_error: Optional[Callable[[MalformedInputError], None]] = None,
) -> list[Key]:
    """
    Parse a line-oriented dataset.

    Args:
        lines: Input lines, e.g. an open text file
        kind: Key kind to parse
        on_error: Called for each malformed line. If None, a
            MalformedInputWarning is issued instead.

    Returns:
        Parsed keys in file order
    """
    keys: list[Key] = []
    for line in lines:
        if not line.strip():
            continue
        try:
            keys.append(parse_value(line, kind))
        except MalformedInputError as err:
            if on_error is not None:
                on_error(err)
            else:
                warnings.warn(str(err), MalformedInputWarning, stacklevel=2)
    return keys


def build_tree(
    lines: Iterable[str],
    kind: KeyKind,
    on_error: Optional[Callable[[MalformedInputError], None]] = None,
) -> OrderedTree[Key]:
    """
    Build a tree from a line-oriented dataset.

    Duplicate keys in the dataset are absorbed by the tree.
    """
    tree: OrderedTree[Key] = OrderedTree()
    for key in load_keys(lines, kind, on_error):
        tree.insert(key)
    return tree
