"""Ordinal suffix resolution.

The `_ordinals` entry of a language table is resolved in this order:

1. a plain string is the suffix for every number;
2. a callable is invoked with (num, last_digit) and wins if it returns a string;
   otherwise its stages (mapping keys, or attributes of a plain callable)
   are tried next;
3. `exceptions`: exact number lookup, or callable(num, last_digit);
4. `byLastDigit`: last digit lookup, or callable(last_digit, num);
5. `default`: suffix, or callable(num, last_digit).

Any string result wins, the empty string included. Anything else falls
through to the next stage.
"""

from typing import Any, Optional

from glossa.i18n.models import OrdinalSpec, lookup_item, resolve_value


def number_text(num: Any) -> str:
    """Decimal string form of num (integral floats drop the trailing ".0")."""
    if isinstance(num, float) and num.is_integer():
        return str(int(num))
    return str(num)


def last_digit(num: Any) -> Optional[int]:
    """Numeric value of the last character of num's decimal form.

    Returns:
        The digit, or None when the last character is not a digit.
    """
    text = number_text(num)
    if text and text[-1].isdigit():
        return int(text[-1])
    return None


def _stage(table: Any, key: Any, args: tuple) -> Any:
    if callable(table):
        return table(*args)
    found, value = lookup_item(table, key)
    if not found:
        return None
    return resolve_value(value, args)


def resolve_ordinal(entry: Any, num: Any) -> str:
    """Compute the ordinal suffix of num from an `_ordinals` entry.

    Args:
        entry: Value of the `_ordinals` key (None when absent).
        num: Number to compute the suffix for.

    Returns:
        The suffix, or "" when nothing applies.
    """
    if num is None:
        return ""

    spec = OrdinalSpec.from_entry(entry)
    if spec is None:
        return ""

    if spec.constant is not None:
        return spec.constant

    digit = last_digit(num)

    if spec.function is not None:
        result = spec.function(num, digit)
        if isinstance(result, str):
            return result

    if spec.has_exceptions:
        result = _stage(spec.exceptions, num, (num, digit))
        if isinstance(result, str):
            return result

    if spec.has_by_last_digit:
        result = _stage(spec.by_last_digit, digit, (digit, num))
        if isinstance(result, str):
            return result

    if spec.has_default:
        result = resolve_value(spec.default, (num, digit))
        if isinstance(result, str):
            return result

    return ""
