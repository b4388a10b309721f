"""
Unit Golden Tests: Payload Translation Helpers

Pure functions shared by every translator: partial-update bodies, handle
normalisation, id gates and variant option resolution.
"""
import re
from typing import Optional

import pytest
from pydantic import ValidationError

from core.errors import BadRequestError
from core.payload import (
    StrictModel,
    compact,
    ensure_id_prefix,
    normalize_handle,
    parse_variant_title,
    provided_fields,
    resolve_variant_options,
    utc_timestamp,
)

pytestmark = [pytest.mark.unit, pytest.mark.golden]


class _PatchModel(StrictModel):
    name: Optional[str] = None
    description: Optional[str] = None
    rank: Optional[int] = None


class TestProvidedFieldsGolden:
    """Golden: partial update bodies carry only what the caller sent"""

    def test_unset_fields_are_omitted(self):
        """GOLDEN: fields never sent do not appear"""
        assert provided_fields(_PatchModel(name="Phones")) == {"name": "Phones"}

    def test_explicit_null_dropped_unless_nullable(self):
        """GOLDEN: an explicit null is kept only for nullable fields"""
        request = _PatchModel(name=None, description=None)

        assert provided_fields(request) == {}
        assert provided_fields(request, nullable=("description",)) == {"description": None}

    def test_falsy_values_are_kept(self):
        """GOLDEN: zero is a real value, not an omission"""
        assert provided_fields(_PatchModel(rank=0)) == {"rank": 0}

    def test_strict_model_rejects_unknown_fields(self):
        """GOLDEN: undeclared fields fail validation"""
        with pytest.raises(ValidationError):
            _PatchModel(name="x", unexpected=True)


class TestSmallHelpersGolden:
    """Golden: compact, handles, id prefixes, timestamps"""

    def test_compact_drops_only_none(self):
        assert compact({"a": None, "b": 0, "c": "", "d": False}) == {"b": 0, "c": "", "d": False}

    @pytest.mark.parametrize("raw,expected", [
        ("iPhone 15 Pro", "iphone-15-pro"),
        ("  Samsung   Galaxy\tS24  ", "samsung-galaxy-s24"),
        ("already-a-handle", "already-a-handle"),
    ])
    def test_normalize_handle(self, raw, expected):
        """GOLDEN: trimmed, lowercased, whitespace runs collapsed to '-'"""
        assert normalize_handle(raw) == expected

    def test_ensure_id_prefix_accepts_matching_id(self):
        assert ensure_id_prefix("pcat_123", "pcat_", "category") == "pcat_123"

    @pytest.mark.parametrize("bad_id", ["", None, "cat_123", "PCAT_123"])
    def test_ensure_id_prefix_rejects(self, bad_id):
        """GOLDEN: wrong or missing prefix is a 400 with the resource label"""
        with pytest.raises(BadRequestError) as exc_info:
            ensure_id_prefix(bad_id, "pcat_", "category")
        assert exc_info.value.message == "Invalid category ID format"
        assert exc_info.value.status_code == 400

    def test_utc_timestamp_format(self):
        """GOLDEN: ISO-8601 UTC with milliseconds and a Z suffix"""
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())


class TestVariantOptionsGolden:
    """Golden: variant option maps from explicit maps or display titles"""

    OPTIONS = [
        {"title": "Storage", "values": ["256GB", "512GB"]},
        {"title": "Color", "values": ["Natural Titanium", "Blue Titanium"]},
    ]

    def test_title_parsed_positionally(self):
        assert parse_variant_title("256GB - Blue Titanium", ["Storage", "Color"]) == {
            "Storage": "256GB",
            "Color": "Blue Titanium",
        }

    def test_no_options_maps_to_empty(self):
        assert parse_variant_title("Default", []) == {}

    def test_single_option_takes_whole_title(self):
        """GOLDEN: the separator inside a single-option value is not split"""
        assert parse_variant_title("Black - Matte", ["Color"]) == {"Color": "Black - Matte"}

    def test_segment_count_mismatch_rejected(self):
        with pytest.raises(BadRequestError):
            parse_variant_title("256GB", ["Storage", "Color"])

    def test_explicit_map_is_canonical(self):
        """GOLDEN: explicit options win over the title"""
        resolved = resolve_variant_options(
            "Any display title",
            self.OPTIONS,
            {"Storage": "512GB", "Color": "Natural Titanium"},
        )
        assert resolved == {"Storage": "512GB", "Color": "Natural Titanium"}

    def test_explicit_map_unknown_option_rejected(self):
        with pytest.raises(BadRequestError) as exc_info:
            resolve_variant_options("x", self.OPTIONS, {"Storage": "256GB", "Size": "XL"})
        assert "unknown option" in exc_info.value.message

    def test_explicit_map_missing_option_rejected(self):
        with pytest.raises(BadRequestError) as exc_info:
            resolve_variant_options("x", self.OPTIONS, {"Storage": "256GB"})
        assert "missing option" in exc_info.value.message

    def test_undeclared_value_rejected(self):
        """GOLDEN: a parsed value must be one the option declares"""
        with pytest.raises(BadRequestError) as exc_info:
            resolve_variant_options("1TB - Blue Titanium", self.OPTIONS)
        assert "1TB" in exc_info.value.message
