"""Tests for gcam_ports/common/text_utils.py"""

import pytest

from gcam_ports.common.text_utils import normalize_brand_key, slugify_model


class TestNormalizeBrandKey:
    @pytest.mark.parametrize("brand", ["samsung", "SAMSUNG", "SamSung"])
    def test_lowercases(self, brand):
        assert normalize_brand_key(brand) == "samsung"

    @pytest.mark.parametrize("brand", [None, "", 42, ["samsung"], {"brand": "samsung"}])
    def test_invalid_input_returns_none(self, brand):
        assert normalize_brand_key(brand) is None

    def test_whitespace_is_not_stripped(self):
        assert normalize_brand_key(" Samsung ") == " samsung "


class TestSlugifyModel:
    def test_spaces_become_hyphens(self):
        assert slugify_model("Galaxy S25") == "galaxy-s25"

    def test_special_characters_removed(self):
        slug = slugify_model("Galaxy S25+ Ultra")
        assert slug == "galaxy-s25-ultra"
        assert "+" not in slug

    def test_whitespace_runs_collapse(self):
        assert slugify_model("Pixel   9\tPro") == "pixel-9-pro"

    def test_parentheses_removed(self):
        assert slugify_model("Nothing Phone (2a)") == "nothing-phone-2a"

    def test_existing_hyphens_kept(self):
        assert slugify_model("Moto G-84") == "moto-g-84"

    def test_non_ascii_letters_dropped(self):
        assert slugify_model("Café Phone") == "caf-phone"

    def test_empty_string(self):
        assert slugify_model("") == ""
