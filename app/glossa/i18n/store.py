"""Dictionary store holding appended fragments and the merged active table."""

import threading
from collections.abc import Mapping
from typing import Any, List, Optional

from glossa.i18n.models import DictionaryFragment, LanguageTable
from glossa.logging import get_module_logger

logger = get_module_logger()


def _language_table(fragment: DictionaryFragment, language: str) -> Mapping:
    table = fragment.get(language) if isinstance(fragment, Mapping) else None
    return table if isinstance(table, Mapping) else {}


class DictionaryStore:
    """Ordered list of dictionary fragments plus a merged view of one language.

    The merged table is always the left-to-right overlay of every retained
    fragment's table for the active language. Later appends win on key
    collisions.

    Attributes:
        fragments: Appended fragments, in append order.
        table: Merged language table for the active language.
    """

    def __init__(self, language: Optional[str] = None):
        self._lock = threading.RLock()
        self._language = language
        self.fragments: List[DictionaryFragment] = []
        self.table: LanguageTable = {}

    def append(self, fragment: DictionaryFragment) -> "DictionaryStore":
        """Retain fragment and overlay its active-language table."""
        with self._lock:
            self.fragments.append(fragment)
            if self._language:
                self.table.update(_language_table(fragment, self._language))
        return self

    def set_language(self, code: Optional[str]) -> "DictionaryStore":
        """Switch the active language and rebuild the merged table.

        No-op when code is empty or already active.
        """
        with self._lock:
            if not code or code == self._language:
                return self

            table: LanguageTable = {}
            for fragment in self.fragments:
                table.update(_language_table(fragment, code))

            self._language = code
            self.table = table

        logger.debug(
            "language_switched",
            language=code,
            fragment_count=len(self.fragments),
            key_count=len(table),
        )
        return self

    def get_language(self) -> Optional[str]:
        """Return the active language code."""
        return self._language

    def lookup(self, key: str, language: Optional[str] = None) -> Any:
        """Look key up under language without touching the active language.

        Args:
            key: Translation key.
            language: Language to resolve under (default: the active one).

        Returns:
            The entry, or None when no fragment defines key for language.
        """
        with self._lock:
            if language is None or language == self._language:
                return self.table.get(key)

            for fragment in reversed(self.fragments):
                table = _language_table(fragment, language)
                if key in table:
                    return table[key]
        return None

    def reset(self, language: Optional[str] = None) -> "DictionaryStore":
        """Drop every fragment and restore the given language."""
        with self._lock:
            self.fragments = []
            self.table = {}
            self._language = language
        return self
