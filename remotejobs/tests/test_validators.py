"""Tests for shared input validators"""
import time

import pytest

from remotejobs.app.utils.validators import MAX_EMAIL_LENGTH, is_valid_email, normalize_email


@pytest.mark.parametrize("email", [
    "test@example.com",
    "first.last@example.co.uk",
    "a-b_c+tag@sub-domain.example.io",
])
def test_valid_emails(email):
    assert is_valid_email(email)


@pytest.mark.parametrize("email", [
    "",
    "nope",
    "bob-at-example",
    "bob@example",
    "bob@example.c",
    "bob@@example.com",
    "bob@exa mple.com",
])
def test_invalid_emails(email):
    assert not is_valid_email(email)


def test_overlong_email_rejected():
    local = "a" * (MAX_EMAIL_LENGTH - len("@example.com") + 1)
    assert not is_valid_email(f"{local}@example.com")


@pytest.mark.parametrize("email", [
    "a" * 49 + "!",
    "a" * 200 + "@" + "b" * 40 + "!",
    "a@" + "b." * 120 + "!",
])
def test_non_matching_email_is_rejected_quickly(email):
    start = time.perf_counter()
    assert not is_valid_email(email)
    assert time.perf_counter() - start < 0.5


def test_normalize_email():
    assert normalize_email("  Bob@Example.COM ") == "bob@example.com"
    assert normalize_email(None) == ""
