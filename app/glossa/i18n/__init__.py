"""Runtime string translation.

Resolves keys against per-language dictionaries, substitutes placeholders,
selects plural forms and computes ordinal suffixes.

Main components:
- models: entry classification and the ordinal spec record
- store: DictionaryStore holding fragments and the merged active table
- placeholders: placeholder substitution
- ordinals: ordinal suffix cascade
- translator: Translator and TranslatorAlias
- shared: process-wide dictionaries used as fallback
- loader: DictionaryLoader and YAMLDictionaryLoader
- factory: create() and create_from_directory()
"""

from glossa.i18n.factory import create, create_from_directory
from glossa.i18n.loader import DictionaryLoader, YAMLDictionaryLoader
from glossa.i18n.models import (
    DictionaryFragment,
    EntryKind,
    LanguageTable,
    OrdinalSpec,
    classify_entry,
    resolve_value,
)
from glossa.i18n.shared import (
    append_global,
    get_global_store,
    reset_global,
    set_language_global,
)
from glossa.i18n.store import DictionaryStore
from glossa.i18n.translator import Translator, TranslatorAlias

__all__ = [
    "create",
    "create_from_directory",
    "DictionaryLoader",
    "YAMLDictionaryLoader",
    "DictionaryFragment",
    "LanguageTable",
    "EntryKind",
    "OrdinalSpec",
    "classify_entry",
    "resolve_value",
    "DictionaryStore",
    "Translator",
    "TranslatorAlias",
    "append_global",
    "get_global_store",
    "reset_global",
    "set_language_global",
]
