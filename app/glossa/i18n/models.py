"""Translation entry models for the i18n helper.

Dictionary values are untyped on purpose (they usually come straight from
Python literals or YAML files), so the helpers here classify them once at
the boundary instead of duck-typing at each call site.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence

LanguageTable = Dict[str, Any]
DictionaryFragment = Dict[str, LanguageTable]

ORDINALS_KEY = "_ordinals"


class EntryKind(str, Enum):
    """Kinds of values a language table may hold under a key."""

    MISSING = "missing"
    STRING = "string"
    NUMBER = "number"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    CALLABLE = "callable"
    OTHER = "other"


def classify_entry(value: Any) -> EntryKind:
    """Classify a translation entry.

    Args:
        value: Value found in a language table (None when absent).

    Returns:
        The EntryKind of value.
    """
    if value is None:
        return EntryKind.MISSING
    if isinstance(value, str):
        return EntryKind.STRING
    if isinstance(value, bool):
        return EntryKind.OTHER
    if isinstance(value, (int, float)):
        return EntryKind.NUMBER
    if isinstance(value, (list, tuple)):
        return EntryKind.SEQUENCE
    if callable(value):
        return EntryKind.CALLABLE
    if isinstance(value, Mapping):
        return EntryKind.MAPPING
    return EntryKind.OTHER


def resolve_value(value: Any, args: Sequence[Any] = ()) -> Any:
    """Invoke value with args if it is callable, otherwise return it as is."""
    if callable(value):
        return value(*args)
    return value


def lookup_item(container: Any, key: Any) -> tuple[bool, Any]:
    """Look key up in a sequence or mapping entry.

    Mappings are tried with the key itself and then with its string form, so
    integer keys from YAML and string keys from JSON both match. Sequences
    accept integer indices and their digit-only string forms. Keys that
    cannot index the container (unhashable values included) are not found.

    Returns:
        (found, value) pair.
    """
    if isinstance(container, Mapping):
        try:
            if key in container:
                return True, container[key]
        except TypeError:
            return False, None
        if not isinstance(key, str) and key is not None:
            text_key = str(key)
            if text_key in container:
                return True, container[text_key]
        return False, None

    if isinstance(container, (list, tuple)):
        if isinstance(key, str) and key.isascii() and key.isdigit():
            key = int(key)
        if isinstance(key, bool) or not isinstance(key, int):
            return False, None
        if 0 <= key < len(container):
            return True, container[key]
    return False, None


_ORDINAL_STAGES = (
    ("exceptions", "exceptions"),
    ("by_last_digit", "byLastDigit"),
    ("default", "default"),
)


def _ordinal_stages(entry: Any) -> Dict[str, Any]:
    """Read the cascade stages of an `_ordinals` entry.

    Mappings hold them as keys; plain callables may carry them as attributes.
    """
    stages: Dict[str, Any] = {}
    for field_name, entry_key in _ORDINAL_STAGES:
        if isinstance(entry, Mapping):
            present = entry_key in entry
            value = entry.get(entry_key)
        else:
            present = hasattr(entry, entry_key)
            value = getattr(entry, entry_key, None)
        stages[field_name] = value
        stages[f"has_{field_name}"] = present
    return stages


@dataclass(frozen=True)
class OrdinalSpec:
    """Parsed value of the reserved `_ordinals` key.

    Attributes:
        constant: Suffix used for every number.
        function: Callable invoked with (num, last_digit) before the cascade.
        exceptions: Mapping of exact numbers to suffixes, or a callable.
        by_last_digit: Mapping of last digits to suffixes, or a callable.
        default: Suffix, or callable invoked with (num, last_digit).
    """

    constant: Optional[str] = None
    function: Optional[Callable[..., Any]] = None
    exceptions: Any = None
    by_last_digit: Any = None
    default: Any = None
    has_exceptions: bool = False
    has_by_last_digit: bool = False
    has_default: bool = False

    @classmethod
    def from_entry(cls, entry: Any) -> Optional["OrdinalSpec"]:
        """Build an OrdinalSpec from a dictionary entry.

        A callable entry keeps its stages too, so the cascade still runs when
        the call does not produce a suffix.

        Returns:
            OrdinalSpec, or None when entry cannot describe ordinals.
        """
        kind = classify_entry(entry)
        if kind is EntryKind.STRING:
            return cls(constant=entry)
        if kind in (EntryKind.CALLABLE, EntryKind.MAPPING):
            return cls(
                function=entry if callable(entry) else None,
                **_ordinal_stages(entry),
            )
        return None
