import re

from tourism_catalog.schemas.booking import FieldError, GuestCounts

MAX_NAME_LENGTH = 100
MAX_EMAIL_LENGTH = 254
MAX_PHONE_LENGTH = 20
MAX_GUESTS = 20

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^\+?[\d\s\-()]+$")


def is_valid_email(email: str) -> bool:
    return bool(_EMAIL_RE.match(email))


def is_valid_phone(phone: str) -> bool:
    return bool(_PHONE_RE.match(phone))


def clamp_guests(adults: int, children: int) -> GuestCounts:
    return GuestCounts(
        adults=min(max(adults, 1), MAX_GUESTS),
        children=min(max(children, 0), MAX_GUESTS),
    )


def validate_contact(name: str, email: str, phone: str) -> list[FieldError]:
    """Per-field checks for booking contact details.

    Name is required, and at least one of email or phone must be given.
    Returns an empty list when everything is acceptable.
    """
    errors: list[FieldError] = []
    name = name.strip()
    email = email.strip()
    phone = phone.strip()

    if not name:
        errors.append(FieldError(
            field="contactName", code="missing_required", message="Name is required",
        ))
    elif len(name) > MAX_NAME_LENGTH:
        errors.append(FieldError(
            field="contactName", code="too_long", message="Name too long",
        ))

    if not email and not phone:
        errors.append(FieldError(
            field="contactEmail",
            code="missing_required",
            message="An email address or phone number is required",
        ))

    if email:
        if len(email) > MAX_EMAIL_LENGTH:
            errors.append(FieldError(
                field="contactEmail", code="too_long", message="Email too long",
            ))
        elif not is_valid_email(email):
            errors.append(FieldError(
                field="contactEmail", code="invalid_email", message="Invalid email address",
            ))

    if phone:
        if len(phone) > MAX_PHONE_LENGTH:
            errors.append(FieldError(
                field="contactPhone", code="too_long", message="Phone number too long",
            ))
        elif not is_valid_phone(phone):
            errors.append(FieldError(
                field="contactPhone", code="invalid_phone", message="Invalid phone number",
            ))

    return errors
