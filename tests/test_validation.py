"""Tests for input validators, password rules and the Luhn checksum."""

from __future__ import annotations

import dataclasses

import pytest

from utilstoolkit.validation import (
    PHONE_PATTERNS,
    PasswordRules,
    is_alpha,
    is_alphanumeric,
    is_numeric,
    is_strong_password,
    is_valid_credit_card,
    is_valid_date,
    is_valid_email,
    is_valid_hex_color,
    is_valid_ipv4,
    is_valid_password,
    is_valid_phone,
    is_valid_url,
    is_valid_username,
    is_valid_zip_code,
)


class TestEmail:
    @pytest.mark.parametrize("value", ["user@example.com", "first.last+tag@sub.domain.org"])
    def test_valid(self, value):
        assert is_valid_email(value) is True

    @pytest.mark.parametrize(
        "value", ["user@localhost", "no-at-sign.com", "a b@c.com", "a@@b.com", "", None]
    )
    def test_invalid(self, value):
        assert is_valid_email(value) is False


class TestPhone:
    @pytest.mark.parametrize(
        "value", ["555-123-4567", "(555) 123-4567", "+1 555 123 4567", "5551234567"]
    )
    def test_us(self, value):
        assert is_valid_phone(value) is True

    def test_uk(self):
        assert is_valid_phone("+44 20 7946 0958", "UK") is True
        assert is_valid_phone("020 7946 0958", "UK") is True

    def test_india(self):
        assert is_valid_phone("9876543210", "IN") is True
        assert is_valid_phone("+919876543210", "IN") is True
        assert is_valid_phone("5876543210", "IN") is False

    def test_unknown_country_uses_us(self, log_messages):
        assert is_valid_phone("555-123-4567", "FR") is True
        assert any("unknown country" in m for m in log_messages)

    @pytest.mark.parametrize("value", ["12345", "555-123-45678", "", None, 5551234567])
    def test_invalid(self, value):
        assert is_valid_phone(value) is False

    def test_supported_countries(self):
        assert set(PHONE_PATTERNS) == {"US", "UK", "IN"}


class TestCreditCard:
    @pytest.mark.parametrize(
        "value", ["4539 1488 0343 6467", "4539-1488-0343-6467", "4111111111111111", "0"]
    )
    def test_valid(self, value):
        assert is_valid_credit_card(value) is True

    @pytest.mark.parametrize(
        "value", ["4539 1488 0343 6468", "4111-1111-1111-111a", "", "   ", None, 4111111111111111]
    )
    def test_invalid(self, value):
        assert is_valid_credit_card(value) is False


class TestUrl:
    @pytest.mark.parametrize(
        "value", ["https://example.com", "http://localhost:8000/a?b=c", "ftp://files.example.org/x"]
    )
    def test_valid(self, value):
        assert is_valid_url(value) is True

    @pytest.mark.parametrize(
        "value", ["example.com", "not a url", "http://", "", " https://example.com", None]
    )
    def test_invalid(self, value):
        assert is_valid_url(value) is False


class TestSimpleFormats:
    def test_username(self):
        assert is_valid_username("john_doe") is True
        assert is_valid_username("abc") is True
        assert is_valid_username("jo") is False
        assert is_valid_username("a" * 21) is False
        assert is_valid_username("bad-name") is False
        assert is_valid_username(None) is False

    def test_alpha(self):
        assert is_alpha("abcXYZ") is True
        assert is_alpha("abc1") is False
        assert is_alpha("") is False
        assert is_alpha("café") is False

    def test_alphanumeric(self):
        assert is_alphanumeric("abc123") is True
        assert is_alphanumeric("abc 123") is False
        assert is_alphanumeric(None) is False

    def test_zip_code(self):
        assert is_valid_zip_code("12345") is True
        assert is_valid_zip_code("12345-6789") is True
        assert is_valid_zip_code("1234") is False
        assert is_valid_zip_code("12345-678") is False
        assert is_valid_zip_code(12345) is False

    def test_hex_color_delegates(self):
        assert is_valid_hex_color("#fff") is True
        assert is_valid_hex_color("#a1b2c3") is True
        assert is_valid_hex_color("#abcd") is False


class TestNumeric:
    @pytest.mark.parametrize("value", [42, 3.14, -7, "42", "-1.5e3", " 12 "])
    def test_numeric(self, value):
        assert is_numeric(value) is True

    @pytest.mark.parametrize(
        "value", ["abc", "", "12abc", None, True, float("inf"), "nan", [1]]
    )
    def test_not_numeric(self, value):
        assert is_numeric(value) is False


class TestIpv4:
    @pytest.mark.parametrize("value", ["192.168.0.1", "0.0.0.0", "255.255.255.255", "10.0.0.10"])
    def test_valid(self, value):
        assert is_valid_ipv4(value) is True

    @pytest.mark.parametrize(
        "value", ["256.1.1.1", "1.2.3", "1.2.3.4.", "01.2.3.4", "1.2.3.4.5", "a.b.c.d", None]
    )
    def test_invalid(self, value):
        assert is_valid_ipv4(value) is False


class TestDate:
    def test_valid(self):
        assert is_valid_date("2023-01-15") is True
        assert is_valid_date("2024-02-29") is True

    @pytest.mark.parametrize(
        "value", ["2023-02-29", "2023-13-01", "2023-00-10", "2023-1-01", "15/01/2023", "", None]
    )
    def test_invalid(self, value):
        assert is_valid_date(value) is False


class TestPasswords:
    def test_default_rules(self):
        assert is_valid_password("Secret#123") is True
        assert is_valid_password("Sh#1") is False
        assert is_valid_password("secret#123") is False
        assert is_valid_password("Secret#abc") is False
        assert is_valid_password("Secret1234") is False
        assert is_valid_password(None) is False

    def test_custom_rules(self):
        relaxed = PasswordRules(min_length=4, has_uppercase=False, has_number=False, has_special=False)
        assert is_valid_password("abcd", relaxed) is True
        assert is_valid_password("abc", relaxed) is False

    def test_rule_defaults(self):
        rules = PasswordRules()
        assert rules.min_length == 8
        assert rules.has_uppercase and rules.has_number and rules.has_special

    def test_rules_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            PasswordRules().min_length = 3

    def test_strong_password(self):
        assert is_strong_password("Str0ng!pass") is True
        assert is_strong_password("weakpass") is False
        assert is_strong_password("NoSymbol123") is False
        assert is_strong_password("S0!a") is False
        assert is_strong_password(None) is False
