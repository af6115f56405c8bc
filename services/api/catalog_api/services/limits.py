"""Result-size limit clamping.

Limits may come straight from a client. Anything that is not a whole number
in [1, MAX_LIMIT] is replaced by the caller's default instead of failing.
Limits are always bound as query parameters, never spliced into SQL text.
"""

import math
from typing import Any

MAX_LIMIT = 100


def clamp_limit(value: Any, default: int) -> int:
    """Return ``value`` as an int if it is a valid limit, else ``default``.

    Numeric strings are accepted ("5", "5.0"); bools, None, fractions,
    non-finite numbers and anything outside [1, MAX_LIMIT] are not.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value if 1 <= value <= MAX_LIMIT else default
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(number) or not number.is_integer():
        return default
    limit = int(number)
    if limit < 1 or limit > MAX_LIMIT:
        return default
    return limit
