# scheduler_client/duration.py
"""Duration string parser.

Parses duration expressions such as "300ms", "1.5h" or "2h45m" into seconds.
The accepted syntax is a possibly signed sequence of decimal numbers, each
with an optional fraction and a mandatory unit suffix.
"""

import re

# Unit suffix -> seconds multiplier
DURATION_UNITS = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,  # U+00B5 micro sign
    "μs": 1e-6,  # U+03BC Greek mu
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_COMPONENT_PATTERN = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> float:
    """Parse a duration string into seconds.

    Args:
        text: Duration expression (e.g., "5s", "1m30s", "-1.5h", "0").

    Returns:
        Duration in seconds.

    Raises:
        ValueError: If the string is empty or malformed.
    """
    if not isinstance(text, str):
        raise ValueError(f"invalid duration {text!r}")

    body = text
    sign = 1.0
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1.0
        body = body[1:]

    if body == "0":
        return 0.0
    if not body:
        raise ValueError(f"invalid duration {text!r}")

    total = 0.0
    pos = 0
    while pos < len(body):
        match = _COMPONENT_PATTERN.match(body, pos)
        if not match:
            raise ValueError(f"invalid duration {text!r}")
        number, unit = match.groups()
        total += float(number) * DURATION_UNITS[unit]
        pos = match.end()

    return sign * total
