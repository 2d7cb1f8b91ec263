"""Redaction of secrets from URLs before they reach the logs."""

import re

# Query parameters whose values must never be logged
SENSITIVE_PARAMS = [
    "appid",
    "api_key",
    "apikey",
    "key",
    "token",
    "secret",
]

_SENSITIVE_PATTERN = re.compile(
    rf"(?P<prefix>[?&](?:{'|'.join(SENSITIVE_PARAMS)})=)[^&#\s\"]*",
    re.IGNORECASE,
)


def redact_sensitive_data(url: str) -> str:
    """Replace the values of sensitive query parameters with a placeholder.

    >>> redact_sensitive_data("https://x/weather?q=Paris&appid=abc123&units=metric")
    'https://x/weather?q=Paris&appid=***REDACTED***&units=metric'
    """
    return _SENSITIVE_PATTERN.sub(r"\g<prefix>***REDACTED***", url)
