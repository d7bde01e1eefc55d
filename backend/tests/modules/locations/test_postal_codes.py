"""Tests for postal code resolution."""

import pytest

from modules.locations import (
    POSTAL_CODE_RANGES,
    POSTAL_CODE_TABLE,
    all_municipalities,
    is_valid_postal_code,
    municipality_for_postal_code,
    normalize_postal_code,
)


class TestNormalizePostalCode:
    def test_strips_whitespace(self):
        assert normalize_postal_code(" 50 03 ") == "5003"

    def test_left_pads_with_zeros(self):
        assert normalize_postal_code("150") == "0150"
        assert normalize_postal_code("10") == "0010"

    def test_leaves_four_digits_alone(self):
        assert normalize_postal_code("7010") == "7010"


class TestIsValidPostalCode:
    @pytest.mark.parametrize("code", ["0150", "5003", " 9006", "70 10"])
    def test_four_digits_are_valid(self, code):
        assert is_valid_postal_code(code)

    @pytest.mark.parametrize("code", ["150", "12345", "abcd", "", "12a4"])
    def test_everything_else_is_invalid(self, code):
        assert not is_valid_postal_code(code)


class TestStaticTable:
    def test_every_table_entry_resolves_to_its_municipality(self):
        for code, municipality in POSTAL_CODE_TABLE.items():
            assert municipality_for_postal_code(code) == municipality

    def test_keys_are_four_digit_strings(self):
        for code in POSTAL_CODE_TABLE:
            assert len(code) == 4 and code.isdigit()

    @pytest.mark.parametrize(
        "code, municipality",
        [
            ("0150", "Oslo"),
            ("5003", "Bergen"),
            ("7010", "Trondheim"),
            ("4001", "Stavanger"),
            ("9006", "Tromsø"),
            ("1340", "Bærum"),
            ("1383", "Asker"),
            ("3251", "Larvik"),
            ("1751", "Halden"),
            ("8601", "Rana"),
        ],
    )
    def test_city_centre_codes(self, code, municipality):
        assert municipality_for_postal_code(code) == municipality

    def test_padding_applies_before_lookup(self):
        assert municipality_for_postal_code("150") == "Oslo"


class TestRanges:
    @pytest.mark.parametrize(
        "code, municipality",
        [
            ("1299", "Oslo"),
            ("1300", "Bærum"),
            ("1550", "Lørenskog"),
            ("1850", "Askim"),
            ("2050", "Lillestrøm"),
            ("4650", "Kristiansand"),
            ("5099", "Bergen"),
            ("7099", "Trondheim"),
            ("9050", "Tromsø"),
        ],
    )
    def test_codes_outside_table_fall_back_to_ranges(self, code, municipality):
        assert code not in POSTAL_CODE_TABLE
        assert municipality_for_postal_code(code) == municipality

    def test_ranges_are_half_open(self):
        assert municipality_for_postal_code("1399") == "Bærum"
        assert municipality_for_postal_code("1400") == "Nordre Follo"

    def test_range_name_can_differ_from_table_name(self):
        assert municipality_for_postal_code("8601") == "Rana"
        assert municipality_for_postal_code("8650") == "Mo i Rana"

    @pytest.mark.parametrize("code", ["1900", "2200", "3500", "5800", "8300", "9100", "9999"])
    def test_codes_outside_all_ranges_resolve_to_empty(self, code):
        assert municipality_for_postal_code(code) == ""

    def test_ranges_do_not_overlap(self):
        ordered = sorted(POSTAL_CODE_RANGES, key=lambda r: r.start)
        for previous, current in zip(ordered, ordered[1:]):
            assert previous.end <= current.start


class TestNonNumericInput:
    def test_non_numeric_resolves_to_empty(self):
        assert municipality_for_postal_code("abcd") == ""

    def test_whitespace_is_ignored(self):
        assert municipality_for_postal_code(" 50 03 ") == "Bergen"


class TestAllMunicipalities:
    def test_sorted_and_unique(self):
        municipalities = all_municipalities()
        assert municipalities == sorted(set(municipalities))

    def test_matches_static_table(self):
        assert set(all_municipalities()) == set(POSTAL_CODE_TABLE.values())
        assert "Oslo" in all_municipalities()
