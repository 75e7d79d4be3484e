from tourism_catalog.mappers.booking_validator import (
    MAX_GUESTS,
    clamp_guests,
    is_valid_email,
    is_valid_phone,
    validate_contact,
)


def _codes(errors):
    return {(e.field, e.code) for e in errors}


def test_valid_with_email_only():
    assert validate_contact("A", "a@b.com", "") == []


def test_valid_with_phone_only():
    assert validate_contact("Suban", "", "+977-9812753938") == []


def test_name_required():
    assert _codes(validate_contact("  ", "a@b.com", "")) == {("contactName", "missing_required")}


def test_needs_a_contact_channel():
    assert _codes(validate_contact("A", "", "")) == {("contactEmail", "missing_required")}


def test_invalid_email():
    assert _codes(validate_contact("A", "not-an-email", "")) == {("contactEmail", "invalid_email")}


def test_too_long_fields():
    errors = validate_contact("x" * 101, "a@b.com", "1" * 21)
    assert _codes(errors) == {("contactName", "too_long"), ("contactPhone", "too_long")}


def test_invalid_phone():
    assert _codes(validate_contact("A", "", "call me")) == {("contactPhone", "invalid_phone")}


def test_email_and_phone_patterns():
    assert is_valid_email("guide@trek.np")
    assert not is_valid_email("guide@trek")
    assert not is_valid_email("gu ide@trek.np")
    assert is_valid_phone("(01) 442-1234")
    assert not is_valid_phone("01x442")


def test_clamp_guests():
    assert clamp_guests(0, -2).model_dump() == {"adults": 1, "children": 0}
    assert clamp_guests(3, 2).model_dump() == {"adults": 3, "children": 2}
    assert clamp_guests(99, 99).model_dump() == {"adults": MAX_GUESTS, "children": MAX_GUESTS}
