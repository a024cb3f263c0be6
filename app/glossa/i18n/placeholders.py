"""Placeholder substitution for translated strings.

Supported tokens:

    {{raw}}     emitted as "{raw}"
    {2} {%s:2}  second positional argument
    {} {%s}     next positional argument, left to right
    {name}      property of the named-parameter mapping

When the first argument is a mapping it holds the named parameters. It
still counts as slot 1 for explicit indexes, while automatic placeholders
skip it.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Sequence

PLACEHOLDER_PATTERN = re.compile(
    r"\{(?:(\{.*?\})|(?:%s:)?([0-9]+)|(?:%s)?|([\w-]+))\}"
)


@dataclass
class SubstitutionCursor:
    """Mutable state of a single substitution pass.

    Attributes:
        args: Arguments given to the pass.
        named: Whether args[0] is the named-parameter mapping.
        auto_index: Number of automatic placeholders consumed so far.
    """

    args: Sequence[Any]
    named: bool = False
    auto_index: int = 0

    @classmethod
    def for_args(cls, args: Sequence[Any]) -> "SubstitutionCursor":
        return cls(args=args, named=bool(args) and isinstance(args[0], Mapping))

    def positional(self, index: int) -> Any:
        """Return args[index], or None when out of range."""
        if 0 <= index < len(self.args):
            return self.args[index]
        return None

    def explicit(self, number: int) -> Any:
        return self.positional(number - (0 if self.named else 1))

    def next_auto(self) -> Any:
        index = self.auto_index + (1 if self.named else 0)
        self.auto_index += 1
        return self.positional(index)

    def named_value(self, name: str) -> Any:
        """Return the named parameter, or None when it is absent or falsy."""
        if not self.named:
            return None
        return self.args[0].get(name) or None


def _render(value: Any, cursor: SubstitutionCursor) -> str:
    if callable(value):
        value = value(cursor.auto_index, *cursor.args)
    if value is None:
        return ""
    return str(value)


def _replacement(match: re.Match, cursor: SubstitutionCursor) -> str:
    raw, number, name = match.groups()
    if raw is not None:
        return raw
    if number is not None:
        return _render(cursor.explicit(int(number)), cursor)
    if name is not None:
        return _render(cursor.named_value(name), cursor)
    return _render(cursor.next_auto(), cursor)


def substitute(template: str, args: Sequence[Any] = ()) -> str:
    """Replace every placeholder token in template.

    Args:
        template: Translated string.
        args: Positional arguments, optionally led by a named-parameter mapping.

    Returns:
        template with placeholders replaced. Missing values become "".

    Example:
        substitute("{} and {}", ["a", "b"])     # "a and b"
        substitute("{2} and {1}", ["a", "b"])   # "b and a"
        substitute("{x}", [{"x": "Z"}])         # "Z"
    """
    cursor = SubstitutionCursor.for_args(args)
    return PLACEHOLDER_PATTERN.sub(lambda match: _replacement(match, cursor), template)
