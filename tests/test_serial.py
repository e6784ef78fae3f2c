"""
Tests for src/serial.py dataclass mapping.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import pytest

from src.serial import from_dict_generic, to_snake_case


@dataclass
class Inner:
    size: int = 0


@dataclass
class Row:
    name: str
    enabled: bool = False
    scale: Optional[float] = None
    tags: List[str] = field(default_factory=list)
    inner: Inner = field(default_factory=Inner)


class TestSnakeCase:
    def test_conversions(self):
        assert to_snake_case("textColor") == "text_color"
        assert to_snake_case("ID") == "id"
        assert to_snake_case(" Name ") == "name"
        assert to_snake_case("PNG Filename") == "png_filename"


class TestFromDictGeneric:
    """Tests for from_dict_generic."""

    def test_coerces_strings(self):
        """String cells are converted to the annotated field types."""
        row = from_dict_generic(
            {"Name": "a", "Enabled": "yes", "Scale": "1.5"}, Row
        )
        assert row == Row(name="a", enabled=True, scale=1.5)

    def test_blank_cells_use_defaults(self):
        """Empty strings fall back to defaults and factories."""
        row = from_dict_generic({"name": "b", "enabled": " ", "scale": ""}, Row)
        assert row.enabled is False
        assert row.scale is None
        assert row.tags == []

    def test_nested_values(self):
        """Nested dataclasses and lists are mapped."""
        row = from_dict_generic(
            {"name": "c", "tags": ["x", "y"], "inner": {"size": "4"}}, Row
        )
        assert row.inner == Inner(size=4)
        assert row.tags == ["x", "y"]

    def test_integer_cells_exported_as_floats(self):
        """'12.0' is accepted for integer fields."""
        assert from_dict_generic({"size": "12.0"}, Inner).size == 12

    def test_fractional_integer_rejected(self):
        """'3.9' is not silently truncated for integer fields."""
        with pytest.raises(ValueError):
            from_dict_generic({"size": "3.9"}, Inner)

    def test_non_finite_numbers_rejected(self):
        """Overflowing or infinite cells raise ValueError, not OverflowError."""
        with pytest.raises(ValueError):
            from_dict_generic({"size": "1e400"}, Inner)
        with pytest.raises(ValueError):
            from_dict_generic({"name": "e", "scale": "nan"}, Row)

    def test_invalid_boolean(self):
        with pytest.raises(ValueError):
            from_dict_generic({"name": "d", "enabled": "maybe"}, Row)

    def test_missing_required_field(self):
        with pytest.raises(ValueError, match="name"):
            from_dict_generic({}, Row)

    def test_rejects_non_dataclass(self):
        with pytest.raises(TypeError):
            from_dict_generic({}, dict)
