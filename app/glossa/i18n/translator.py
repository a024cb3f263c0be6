"""Translator: resolves keys to localized strings, plurals and ordinals.

Roughly emulates GNU gettext's API over in-memory dictionaries.

Example:
    translator = Translator(
        {"pt_PT": {"{} day": "{} dia", "{} days": "{} dias"}}, "pt_PT"
    )
    translator.text("{} days", 3)                # "3 dias"
    translator.ntext("{} day", "{} days", 1)     # "1 dia"
"""

from typing import Any, Optional

from glossa.i18n import shared
from glossa.i18n.models import (
    ORDINALS_KEY,
    DictionaryFragment,
    EntryKind,
    classify_entry,
    lookup_item,
    resolve_value,
)
from glossa.i18n.ordinals import resolve_ordinal
from glossa.i18n.placeholders import substitute
from glossa.i18n.store import DictionaryStore
from glossa.logging import get_module_logger

logger = get_module_logger()

_UNSET: Any = object()


def _is_singular(count: Any) -> bool:
    return count == 1 and not isinstance(count, bool)


class Translator:
    """Translation helper bound to one active language.

    Keys missing from the instance dictionaries are looked up in the
    process-wide store under this instance's language.

    Attributes:
        store: Instance-scoped DictionaryStore.
        shared_store: Process-wide DictionaryStore used as fallback.
    """

    def __init__(
        self,
        dictionaries: Optional[DictionaryFragment] = None,
        language_code: Optional[str] = None,
        test_mode: Optional[bool] = None,
        shared_store: Optional[DictionaryStore] = None,
    ):
        """Initialize Translator.

        Args:
            dictionaries: Fragment mapping language codes to language tables.
            language_code: Active language (default: the global language).
            test_mode: Wrap unknown keys in brackets when True.
            shared_store: Fallback store (default: the process-wide store).
        """
        self.shared_store = shared_store or shared.get_global_store()
        self.store = DictionaryStore()
        self._test_mode = False

        self.reset()
        self.set_language(language_code)
        self.test_mode(test_mode)
        self.append(dictionaries or {})

    def reset(self) -> "Translator":
        """Drop instance dictionaries and adopt the global language."""
        self.store.reset(self.shared_store.get_language())
        self._test_mode = False
        return self

    def append(self, dictionaries: DictionaryFragment) -> "Translator":
        """Add translations for the helper to use.

        Example:
            translator.append({"pt_PT": {"sfraggles": "braggles"}})
            translator.text("sfraggles")  # "braggles"
        """
        self.store.append(dictionaries)
        return self

    def set_language(self, code: Any = _UNSET) -> Any:
        """Get or set the active language.

        Returns:
            The language code when called without arguments, else self.
        """
        if code is _UNSET:
            return self.store.get_language()

        self.store.set_language(code)
        return self

    def get_language(self) -> Optional[str]:
        return self.store.get_language()

    def test_mode(self, flag: Any = _UNSET) -> Any:
        """Get or set test mode.

        In test mode unknown keys are wrapped in "[...]", which helps spotting
        missing translations.

        Returns:
            The flag when called without arguments, else self.
        """
        if flag is _UNSET:
            return self._test_mode

        if flag is not None:
            self._test_mode = bool(flag)
        return self

    def get_key(self, key: str) -> Any:
        """Return the raw entry for key in the active language.

        Falls back to the process-wide dictionaries, resolved under this
        instance's language.

        Returns:
            The entry (string, sequence, mapping, callable...) or None.
        """
        if key in self.store.table:
            return self.store.table[key]
        return self.shared_store.lookup(key, self.store.get_language())

    def text(self, key: Any, *args: Any) -> Optional[str]:
        """Translate key and replace its placeholders.

        Unknown keys are used verbatim as their own translation.

        Args:
            key: Translation key (usually the source sentence).
            *args: Replacements. A leading mapping supplies named values.

        Returns:
            The translated string, or None when key is not a string.

        Example:
            translator.text("{} and {}", "a", "b")      # "a and b"
            translator.text("{2} and {1}", "a", "b")    # "b and a"
            translator.text("{x}", {"x": "Z"})          # "Z"
            translator.text("object", "a")              # entry["a"]
        """
        if not isinstance(key, str):
            return None

        entry = self.get_key(key)
        kind = classify_entry(entry)

        if kind is EntryKind.MISSING:
            logger.debug(
                "translation_missing",
                key=key,
                language=self.store.get_language(),
            )
            entry = f"[{key}]" if self._test_mode else key
            kind = EntryKind.STRING
        elif kind is EntryKind.NUMBER:
            entry = str(entry)
            kind = EntryKind.STRING

        if kind is EntryKind.STRING:
            return substitute(entry, args)

        if kind is EntryKind.CALLABLE:
            return entry(*args)

        if kind in (EntryKind.SEQUENCE, EntryKind.MAPPING):
            found, value = lookup_item(entry, args[0] if args else None)
            value = resolve_value(value, args) if found else None
            return "" if value is None else value

        return ""

    def ntext(self, str_sin: Any, str_plur: Any, *rest: Any) -> Optional[str]:
        """Translate and pluralize.

        With three or more arguments picks str_sin when the count is exactly 1
        and str_plur otherwise, then translates it with the count and any
        extra arguments as replacements. With two arguments (key, count) the
        key must hold a [singular, plural] pair.

        Example:
            translator.ntext("{} platypus", "{} platypuses", 2)  # "2 platypuses"
            translator.ntext("cat_forms", 1)                     # entry[0]
        """
        if not rest and classify_entry(str_plur) is EntryKind.NUMBER:
            count = str_plur
            forms = self.get_key(str_sin)
            if classify_entry(forms) is not EntryKind.SEQUENCE:
                return ""
            found, entry = lookup_item(forms, 0 if _is_singular(count) else 1)
            if not found:
                return ""
            return self.text(entry, count)

        count = rest[0] if rest else None
        entry = str_sin if _is_singular(count) else str_plur
        return self.text(entry, *rest)

    def ordinal(self, num: Any) -> str:
        """Get the ordinal suffix of a number from the `_ordinals` entry.

        Example:
            # en_US: {"_ordinals": {"default": "th",
            #                       "byLastDigit": {1: "st", 2: "nd", 3: "rd"},
            #                       "exceptions": {11: "th", 12: "th", 13: "th"}}}
            translator.ordinal(1)   # "st"
            translator.ordinal(11)  # "th"
            translator.ordinal(22)  # "nd"
        """
        if num is None:
            return ""
        return resolve_ordinal(self.get_key(ORDINALS_KEY), num)

    def get_alias(self) -> "TranslatorAlias":
        """Return a callable alias of text(), commonly assigned to "_"."""
        return TranslatorAlias(self)


class TranslatorAlias:
    """Callable shortcut to Translator.text() carrying the rest of its API.

    Example:
        _ = translator.get_alias()
        _("hi")                          # translator.text("hi")
        _.ntext("{} day", "{} days", 2)  # translator.ntext(...)
        _.ordinal(3)
    """

    def __init__(self, translator: Translator):
        self.translator = translator
        self.text = translator.text
        self.ntext = translator.ntext
        self.append = translator.append
        self.ordinal = translator.ordinal
        self.test_mode = translator.test_mode

    def __call__(self, key: Any, *args: Any) -> Optional[str]:
        return self.text(key, *args)
