"""Module for miscellaneous multi-use functions"""

__all__ = ['is_finite_number', 'round_to_int', 'validate_numbers']

import functools
import math

from pydantic import ValidationError, validate_call

from atseptools._const import ERROR_MESSAGES
from atseptools.exceptions import InvalidInput


def round_to_int(value: float) -> int:
    """Rounds half towards +inf to the nearest integer (e.g. -2.5 -> -2, 2.5 -> 3)"""
    return int(math.floor(value + 0.5))


def is_finite_number(value) -> bool:
    """True for real numbers which are neither NaN nor infinite"""
    if isinstance(value, bool):
        return False

    try:
        return math.isfinite(value)
    except TypeError:
        return False


def validate_numbers(func):
    """
    Validates the annotated arguments of func with pydantic in strict mode, so that
    strings and booleans are not coerced into numbers.

    Raises:
        InvalidInput: an argument fails validation
    """
    validated = validate_call(config=dict(strict=True))(func)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return validated(*args, **kwargs)
        except ValidationError as exc:
            raise InvalidInput(ERROR_MESSAGES['INVALID_NUMBER']) from exc

    return wrapper
