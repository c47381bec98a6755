# app/core/ids.py
import re
import secrets

_ID_RE = re.compile(r"[0-9a-fA-F]{24}")


def new_id() -> str:
    """Generate a 24-char hex identifier (96 random bits)."""
    return secrets.token_hex(12)


def is_valid_id(value: str | None) -> bool:
    return bool(value) and _ID_RE.fullmatch(value) is not None
