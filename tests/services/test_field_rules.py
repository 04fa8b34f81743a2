# -*- coding: utf-8 -*-
"""
Tests for field-level validation rules.
"""
from datetime import time

import pytest

from services.validation import field_rules


class TestFormats:

    @pytest.mark.parametrize("email", ["jane@example.com", "a.b+c@mail.co"])
    def test_valid_email(self, email):
        assert field_rules.is_valid_email(email)

    @pytest.mark.parametrize("email", ["", None, "janeexample.com", "@example.com"])
    def test_invalid_email(self, email):
        assert not field_rules.is_valid_email(email)

    @pytest.mark.parametrize("phone", ["(555) 123-4567", "555-123-4567", "5551234567"])
    def test_valid_phone(self, phone):
        assert field_rules.is_valid_phone(phone)

    def test_invalid_phone(self):
        assert not field_rules.is_valid_phone("123-45")

    @pytest.mark.parametrize("zip_code", ["12345", "12345-6789"])
    def test_valid_zip(self, zip_code):
        assert field_rules.is_valid_zip_code(zip_code)

    @pytest.mark.parametrize("zip_code", ["1234", "123456", "12345-67", "ABCDE"])
    def test_invalid_zip(self, zip_code):
        assert not field_rules.is_valid_zip_code(zip_code)

    def test_state(self):
        assert field_rules.is_valid_state("tx")
        assert not field_rules.is_valid_state("T1")
        assert not field_rules.is_valid_state("TEX")


class TestTimes:

    def test_parse_time(self):
        assert field_rules.parse_time("09:30") == time(9, 30)
        assert field_rules.parse_time(" 17:05:10 ") == time(17, 5, 10)

    def test_blank_time_is_none(self):
        assert field_rules.parse_time("") is None
        assert field_rules.parse_time(None) is None

    @pytest.mark.parametrize("text", ["9:30", "25:00", "ab:cd", "09-30"])
    def test_bad_time_raises(self, text):
        with pytest.raises(ValueError):
            field_rules.parse_time(text)

    def test_time_range(self):
        assert field_rules.validate_time_range("09:00", "17:00") == ""
        assert field_rules.validate_time_range("09:00", "") == ""
        assert field_rules.validate_time_range("", "") == ""
        assert field_rules.validate_time_range("17:00", "09:00") == field_rules.START_AFTER_END
        assert field_rules.validate_time_range("9am", "17:00") == field_rules.INVALID_TIME_FORMAT


class TestAmounts:

    def test_parse_amount(self):
        assert field_rules.parse_amount("12.50") == 12.5
        assert field_rules.parse_amount("$1,200") == 1200.0
        assert field_rules.parse_amount("") == 0.0

    @pytest.mark.parametrize("text", ["abc", "nan", "inf", "1.2.3"])
    def test_bad_amount_raises(self, text):
        with pytest.raises(ValueError):
            field_rules.parse_amount(text)


def test_messages():
    assert field_rules.validate_required("Description", " ") == "Description is required"
    assert field_rules.validate_required("Description", "x") == ""
    assert field_rules.validate_email("Email", "bad") == "Please enter a valid email address"
    assert field_rules.validate_phone("Phone", "") == "Phone is required"
