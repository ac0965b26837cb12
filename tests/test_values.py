"""Tests for key parsing and dataset loading."""

import math
import pytest
from pybst.bst import OrderedTree
from pybst.values import (
    KeyKind,
    MalformedInputError,
    MalformedInputWarning,
    parse_value,
    load_keys,
    build_tree,
)


class TestKeyKind:
    """Test KeyKind lookup."""

    def test_from_code(self):
        """Test each single-letter code."""
        assert KeyKind.from_code("i") is KeyKind.INT
        assert KeyKind.from_code("d") is KeyKind.DOUBLE
        assert KeyKind.from_code("s") is KeyKind.STRING

    def test_from_code_case_and_whitespace(self):
        """Test codes are trimmed and case-insensitive."""
        assert KeyKind.from_code("  I\n") is KeyKind.INT
        assert KeyKind.from_code("S") is KeyKind.STRING

    def test_invalid_code(self):
        """Test unknown codes are rejected."""
        with pytest.raises(ValueError):
            KeyKind.from_code("x")
        with pytest.raises(ValueError):
            KeyKind.from_code("")

    def test_is_numeric(self):
        """Test numeric flag."""
        assert KeyKind.INT.is_numeric
        assert KeyKind.DOUBLE.is_numeric
        assert not KeyKind.STRING.is_numeric


class TestParseValue:
    """Test parse_value."""

    def test_parse_int(self):
        """Test integer parsing."""
        assert parse_value(" 42 ", KeyKind.INT) == 42
        assert parse_value("-7", KeyKind.INT) == -7

    def test_parse_double(self):
        """Test floating-point parsing."""
        value = parse_value("3.5", KeyKind.DOUBLE)
        assert isinstance(value, float)
        assert value == 3.5
        assert parse_value("2", KeyKind.DOUBLE) == 2.0
        assert math.isinf(parse_value("inf", KeyKind.DOUBLE))

    def test_parse_string(self):
        """Test text is stripped but otherwise kept."""
        assert parse_value("  hello world \n", KeyKind.STRING) == "hello world"

    def test_malformed_int(self):
        """Test non-integers raise MalformedInputError."""
        with pytest.raises(MalformedInputError) as excinfo:
            parse_value("3.5", KeyKind.INT)
        assert excinfo.value.text == "3.5"
        assert excinfo.value.kind is KeyKind.INT
        assert str(excinfo.value) == "Error parsing value: 3.5"

    def test_malformed_double(self):
        """Test non-numbers raise MalformedInputError."""
        with pytest.raises(MalformedInputError):
            parse_value("abc", KeyKind.DOUBLE)

    def test_digit_grouping_rejected(self):
        """Test underscores are not accepted inside numbers."""
        with pytest.raises(MalformedInputError):
            parse_value("1_000", KeyKind.INT)
        with pytest.raises(MalformedInputError):
            parse_value("1_0.5", KeyKind.DOUBLE)
        assert parse_value("a_b", KeyKind.STRING) == "a_b"

    def test_nan_rejected(self):
        """Test NaN cannot enter a totally ordered tree."""
        with pytest.raises(MalformedInputError):
            parse_value("nan", KeyKind.DOUBLE)

    def test_error_is_value_error(self):
        """Test MalformedInputError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_value("x", KeyKind.INT)


class TestLoadKeys:
    """Test line-oriented dataset loading."""

    def test_skips_blank_lines(self):
        """Test blank and whitespace-only lines are ignored."""
        lines = ["5\n", "\n", "   \n", "3\n", "8"]
        assert load_keys(lines, KeyKind.INT) == [5, 3, 8]

    def test_malformed_lines_reported(self):
        """Test bad lines go to the callback and are skipped."""
        errors = []
        lines = ["1\n", "two\n", "3\n", "4.5\n"]
        keys = load_keys(lines, KeyKind.INT, on_error=errors.append)

        assert keys == [1, 3]
        assert [e.text for e in errors] == ["two", "4.5"]

    def test_malformed_lines_warn(self):
        """Test bad lines issue a warning without a callback."""
        with pytest.warns(MalformedInputWarning, match="Error parsing value: x"):
            keys = load_keys(["1.5\n", "x\n", "2\n"], KeyKind.DOUBLE)
        assert keys == [1.5, 2.0]

    def test_strings_never_malformed(self):
        """Test any non-blank line is a valid text key."""
        keys = load_keys(["pear\n", "apple pie\n", "42\n"], KeyKind.STRING)
        assert keys == ["pear", "apple pie", "42"]


class TestBuildTree:
    """Test building a tree from a dataset."""

    def test_build_tree(self):
        """Test keys are inserted in file order."""
        tree = build_tree(["20\n", "10\n", "30\n"], KeyKind.INT)
        assert isinstance(tree, OrderedTree)
        assert tree.root.info == 20
        assert tree.in_order() == [10, 20, 30]

    def test_duplicates_absorbed(self):
        """Test repeated keys appear once."""
        tree = build_tree(["b\n", "a\n", "b\n", "c\n"], KeyKind.STRING)
        assert tree.in_order() == ["a", "b", "c"]
        assert tree.size == 3

    def test_build_tree_from_file(self, tmp_path):
        """Test loading from an open text file."""
        path = tmp_path / "keys.txt"
        path.write_text("2.5\n\n-1\nbad\n10\n")
        errors = []
        with open(path) as f:
            tree = build_tree(f, KeyKind.DOUBLE, on_error=errors.append)
        assert tree.in_order() == [-1.0, 2.5, 10.0]
        assert len(errors) == 1
