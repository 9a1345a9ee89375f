import logging
import re
from typing import Any

# (prefix)(secret) pairs; only the secret group is replaced
SECRET_PATTERNS = [
    r"(private_token=)([^&\s\"']+)",
    r"(Private-Token:\s*)([a-zA-Z0-9\-\._~+/=]+)",
    r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)",
]

SENSITIVE_KEYS = {
    "private_token",
    "private-token",
    "token",
    "password",
}

REDACTED = "[REDACTED]"


def redact_text(text: str) -> str:
    if not text:
        return text

    redacted_text = text
    for pattern in SECRET_PATTERNS:
        redacted_text = re.sub(pattern, rf"\1{REDACTED}", redacted_text, flags=re.IGNORECASE)
    return redacted_text


def redact_value(value: Any) -> Any:
    """
    Recursive helper to redact values in dicts/lists.
    """
    if isinstance(value, str):
        return redact_text(value)
    if isinstance(value, dict):
        return redact_dict(value)
    if isinstance(value, (list, tuple)):
        return [redact_value(item) for item in value]
    return value


def redact_dict(obj: dict[str, Any]) -> dict[str, Any]:
    new_obj = {}
    for k, v in obj.items():
        key_lower = str(k).lower()
        if any(sensitive in key_lower for sensitive in SENSITIVE_KEYS):
            new_obj[k] = REDACTED
        else:
            new_obj[k] = redact_value(v)
    return new_obj


def redaction_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """Structlog processor masking GitLab tokens in every field of the event."""
    return redact_dict(event_dict)


class RedactionFilter(logging.Filter):
    """Rewrites the record's message in place so no handler receives a raw token."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_text(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True
