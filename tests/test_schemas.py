"""
==============================================================================
Schema and Parsing Unit Tests
==============================================================================
"""

import pytest

from product_api.core import ValidationError
from product_api.schemas import FIELD_MESSAGES, ProductPayload, truthy
from product_api.utils import parse_or_default


VALID = {"name": "Mouse", "price": 25, "category": "Electronics"}


class TestProductPayload:
    """Tests for body validation."""

    def test_valid_payload(self):
        payload = ProductPayload.from_body(VALID)
        assert payload.name == "Mouse"
        assert payload.normalized_category == "electronics"
        assert payload.has_description is False
        assert payload.has_in_stock is False
        assert payload.in_stock_flag is True

    def test_tracks_present_optional_fields(self):
        """Test present-but-falsy optional fields count as provided."""
        payload = ProductPayload.from_body({**VALID, "description": "", "inStock": False})
        assert payload.has_description is True
        assert payload.has_in_stock is True
        assert payload.in_stock_flag is False

    def test_zero_price_is_valid(self):
        assert ProductPayload.from_body({**VALID, "price": 0}).price == 0

    def test_snake_case_in_stock_is_ignored(self):
        """Test only the camelCase inStock key sets the stock flag."""
        payload = ProductPayload.from_body({**VALID, "in_stock": False})
        assert payload.has_in_stock is False
        assert payload.in_stock_flag is True

    @pytest.mark.parametrize("body,field", [
        ({"price": 1, "category": "c"}, "name"),
        ({**VALID, "name": 5}, "name"),
        ({**VALID, "name": " "}, "name"),
        ({**VALID, "price": -0.01}, "price"),
        ({**VALID, "price": "25"}, "price"),
        ({**VALID, "price": False}, "price"),
        ({**VALID, "price": float("inf")}, "price"),
        ({**VALID, "price": float("-inf")}, "price"),
        ({**VALID, "price": float("nan")}, "price"),
        ({**VALID, "price": 10 ** 400}, "price"),
        ({"name": "n", "price": 1}, "category"),
        ({**VALID, "category": ["x"]}, "category"),
    ])
    def test_single_violation(self, body, field):
        """Test each rule reports its own message."""
        with pytest.raises(ValidationError) as exc_info:
            ProductPayload.from_body(body)
        error = exc_info.value
        assert error.status_code == 400
        assert error.message == FIELD_MESSAGES[field]
        assert [v["field"] for v in error.details["fields"]] == [field]

    def test_first_rule_wins(self):
        """Test the message follows name, price, category order."""
        with pytest.raises(ValidationError) as exc_info:
            ProductPayload.from_body({"category": "", "price": -1})
        error = exc_info.value
        assert error.message == FIELD_MESSAGES["name"]
        assert len(error.details["fields"]) == 3

    def test_non_object_body(self):
        with pytest.raises(ValidationError):
            ProductPayload.from_body("just a string")

    @pytest.mark.parametrize("description,expected", [
        ("  padded  ", "padded"),
        (None, ""),
        (42, ""),
    ])
    def test_normalized_description(self, description, expected):
        payload = ProductPayload.from_body({**VALID, "description": description})
        assert payload.normalized_description == expected


@pytest.mark.parametrize("value,expected", [
    (None, False),
    (False, False),
    (0, False),
    (0.0, False),
    (float("nan"), False),
    ("", False),
    (True, True),
    (-1, True),
    ("false", True),
    ([], True),
    ({}, True),
])
def test_truthy(value, expected):
    assert truthy(value) is expected


@pytest.mark.parametrize("raw,expected", [
    (None, 7),
    ("", 7),
    ("abc", 7),
    ("3", 3),
    ("  3  ", 3),
    ("3.9", 3),
    ("12px", 12),
    ("+4", 4),
    ("0", 7),
    ("-2", 7),
])
def test_parse_or_default(raw, expected):
    """Test lenient integer parsing with fallback."""
    assert parse_or_default(raw, 7) == expected


def test_parse_or_default_zero_always_falls_back():
    assert parse_or_default("0", 5, minimum=None) == 5


def test_parse_or_default_without_minimum_keeps_negatives():
    """Test page numbers below 1 survive parsing when no minimum applies."""
    assert parse_or_default("-1", 1, minimum=None) == -1
    assert parse_or_default(" -3x", 1, minimum=None) == -3
