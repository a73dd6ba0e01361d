# tests/unit/core/domain/test_coercion.py

"""Tests for coercion between value variants"""

# Standard library imports
from math import inf

# Third party imports
import pytest

# Local imports
from dynamic_value.core.domain.coercion import parse_number_prefix
from dynamic_value.core.domain.coercion import to_boolean
from dynamic_value.core.domain.coercion import to_integer
from dynamic_value.core.domain.coercion import to_number
from dynamic_value.core.domain.coercion import to_text
from dynamic_value.core.domain.exceptions import TypeMismatch
from dynamic_value.core.domain.value import Array
from dynamic_value.core.domain.value import Boolean
from dynamic_value.core.domain.value import NULL
from dynamic_value.core.domain.value import Number
from dynamic_value.core.domain.value import Object
from dynamic_value.core.domain.value import Text


class TestToNumber:
    """Test to_number"""

    def test_number_is_itself(self):
        assert to_number(Number(2.5)) == 2.5

    def test_null_is_zero(self):
        assert to_number(NULL) == 0.0

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("123", 123.0),
            ("-1.5", -1.5),
            ("+7", 7.0),
            ("1e3", 1000.0),
            ("12abc", 12.0),
            ("-1.5e2x", -150.0),
            ("1.", 1.0),
        ],
    )
    def test_text_numeric_prefix(self, text, expected):
        """The leading number is parsed and the rest ignored"""
        assert to_number(Text(text)) == expected

    @pytest.mark.parametrize("text", ["ok", "", ".5", "abc123", "nan", "inf"])
    def test_text_without_number_fails(self, text):
        with pytest.raises(TypeMismatch):
            to_number(Text(text))

    def test_failure_message_names_text(self):
        with pytest.raises(TypeMismatch, match="string as number: ok"):
            to_number(Text("ok"))

    def test_boolean_fails(self):
        with pytest.raises(TypeMismatch, match="bool as number"):
            to_number(Boolean(True))

    def test_containers_fail(self):
        with pytest.raises(TypeMismatch):
            to_number(Object())
        with pytest.raises(TypeMismatch):
            to_number(Array([Number(1)]))

    def test_type_mismatch_is_type_error(self):
        """Callers can catch the builtin exception"""
        with pytest.raises(TypeError):
            to_number(Boolean(False))

    def test_parse_number_prefix_none(self):
        assert parse_number_prefix("x1") is None
        assert parse_number_prefix("٣") is None  # Non-ASCII digits are not numbers


class TestToInteger:
    """Test to_integer"""

    def test_floors(self):
        assert to_integer(Number(2.7)) == 2
        assert to_integer(Number(-2.5)) == -3
        assert to_integer(Text("9.99")) == 9
        assert to_integer(NULL) == 0

    def test_non_finite_fails(self):
        with pytest.raises(TypeMismatch):
            to_integer(Number(inf))


class TestToText:
    """Test to_text"""

    def test_text_is_raw(self):
        """Text is not quoted"""
        assert to_text(Text('say "hi"')) == 'say "hi"'

    def test_scalars_render_as_json(self):
        assert to_text(Number(2)) == "2"
        assert to_text(Number(1.5)) == "1.5"
        assert to_text(Boolean(True)) == "true"
        assert to_text(NULL) == "null"

    def test_containers_pretty_printed(self):
        """Containers use four-space indentation"""
        assert to_text(Array([Number(1), Text("a")])) == '[\n    1,\n    "a"\n]'
        assert to_text(Object({"k": Boolean(False)})) == '{\n    "k": false\n}'
        assert to_text(Array()) == "[]"
        assert to_text(Object()) == "{}"

    def test_non_ascii_kept(self):
        assert to_text(Array([Text("é")])) == '[\n    "é"\n]'


class TestToBoolean:
    """Test to_boolean"""

    def test_containers(self):
        assert to_boolean(Object()) is False
        assert to_boolean(Object({"a": NULL})) is True
        assert to_boolean(Array([])) is False
        assert to_boolean(Array([NULL])) is True

    def test_numbers(self):
        assert to_boolean(Number(0)) is False
        assert to_boolean(Number(-0.0)) is False
        assert to_boolean(Number(0.1)) is True

    def test_boolean_and_null(self):
        assert to_boolean(Boolean(True)) is True
        assert to_boolean(Boolean(False)) is False
        assert to_boolean(NULL) is False

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("true", True),
            (" TRUE ", True),
            ("False", False),
            ("  false\n", False),
            ("", False),
            ("   ", False),
            ("no", True),
            ("0", True),
        ],
    )
    def test_text(self, text, expected):
        assert to_boolean(Text(text)) is expected
