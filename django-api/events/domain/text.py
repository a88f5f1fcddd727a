"""String and email helpers shared by the event and booking rules."""

import re
from typing import Any

# Unquoted dot-atom or quoted local part, then dot-separated domain labels
# ending in a label of two or more characters.
_ATOM = r'[^<>()\[\]\\.,;:\s@"]'
EMAIL_PATTERN = re.compile(
    rf'(({_ATOM}+(\.{_ATOM}+)*)|(".+"))@(({_ATOM}+\.)+{_ATOM}{{2,}})',
    re.IGNORECASE,
)


def clean_string(value: Any) -> Any:
    """Trim surrounding whitespace from strings; pass anything else through."""
    if isinstance(value, str):
        return value.strip()
    return value


def is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def normalize_email(value: str) -> str:
    return value.strip().lower()


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value) is not None
