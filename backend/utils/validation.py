import math
import re

from flask import request

from utils.errors import ValidationError

TRANSACTION_TYPES = {"buy", "sell", "transfer"}
TRANSACTION_STATUSES = {"pending", "completed", "failed", "cancelled"}

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
USERNAME_MIN, USERNAME_MAX = 3, 20
PASSWORD_MIN = 6

# Ids are 32-bit signed integer columns
MAX_ID = 2**31 - 1


def json_body() -> dict:
    """The request body as a dict, or ValidationError."""
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def parse_id(raw, resource: str) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        value = 0
    if not 0 < value <= MAX_ID:
        raise ValidationError(f"{resource} ID must be a valid number", error="Invalid ID")
    return value


def require(data: dict, *fields):
    missing = [f for f in fields if data.get(f) in (None, "")]
    if missing:
        raise ValidationError(f"Missing required field(s): {', '.join(missing)}")


def validate_email(val) -> str:
    if not isinstance(val, str) or not EMAIL_RE.match(val.strip()):
        raise ValidationError("email must be a valid email address")
    return val.strip()


def validate_username(val) -> str:
    if not isinstance(val, str) or not USERNAME_MIN <= len(val.strip()) <= USERNAME_MAX:
        raise ValidationError(f"username must be {USERNAME_MIN}-{USERNAME_MAX} characters")
    return val.strip()


def validate_password(val) -> str:
    if not isinstance(val, str) or len(val) < PASSWORD_MIN:
        raise ValidationError(f"password must be at least {PASSWORD_MIN} characters")
    return val


def validate_text(val, field: str, required=False) -> str:
    if val is None and not required:
        return ""
    if not isinstance(val, str) or (required and not val.strip()):
        raise ValidationError(f"{field} must be a{' non-empty' if required else ''} string")
    return val.strip()


def validate_amount(val, field: str = "amount") -> float:
    # bool is an int subclass; reject it explicitly
    if isinstance(val, bool) or not isinstance(val, (int, float)):
        raise ValidationError(f"{field} must be a number")
    x = float(val)
    if not math.isfinite(x) or x < 0:
        raise ValidationError(f"{field} must be a non-negative number")
    return x


def validate_flag(val, field: str) -> bool:
    if not isinstance(val, bool):
        raise ValidationError(f"{field} must be true or false")
    return val


def validate_choice(val, field: str, allowed) -> str:
    if val not in allowed:
        raise ValidationError(f"{field} must be one of: {', '.join(sorted(allowed))}")
    return val


def validate_ref(val, field: str) -> int:
    if isinstance(val, bool) or not isinstance(val, int) or not 0 < val <= MAX_ID:
        raise ValidationError(f"{field} must be a positive integer")
    return val
