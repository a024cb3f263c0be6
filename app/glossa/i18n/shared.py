"""Process-wide dictionaries shared by every Translator as a fallback layer.

Usage:
    from glossa.i18n import append_global, set_language_global

    append_global({"hello": "olá"}, "pt_PT")
    set_language_global("en_US")
"""

import threading
import warnings
from collections.abc import Mapping
from typing import Any, Optional

from glossa.configuration import settings
from glossa.i18n.models import DictionaryFragment
from glossa.i18n.store import DictionaryStore
from glossa.logging import get_module_logger

logger = get_module_logger()

_UNSET: Any = object()

_global_store: Optional[DictionaryStore] = None
_global_store_lock = threading.Lock()


def get_global_store() -> DictionaryStore:
    """Get the process-wide dictionary store singleton.

    Creates the store on first call, set to the configured default language.
    """
    global _global_store

    if _global_store is None:
        with _global_store_lock:
            if _global_store is None:
                _global_store = DictionaryStore(settings.i18n.DEFAULT_LANGUAGE)
                logger.debug(
                    "global_store_initialized",
                    language=settings.i18n.DEFAULT_LANGUAGE,
                )

    return _global_store


def reset_global() -> None:
    """Clear the global dictionaries and restore the default language."""
    get_global_store().reset(settings.i18n.DEFAULT_LANGUAGE)
    logger.debug("global_store_reset", language=settings.i18n.DEFAULT_LANGUAGE)


def append_global(
    fragment: DictionaryFragment, language_code: Optional[str] = None
) -> None:
    """Add a dictionary available to every Translator.

    Args:
        fragment: Mapping of language codes to language tables. When
            language_code is given and is not one of its keys, fragment is
            taken to be the language table itself.
        language_code: Language of the dictionary. When it differs from the
            global language, the global language switches to it.
    """
    store = get_global_store()

    if language_code:
        if not (isinstance(fragment, Mapping) and language_code in fragment):
            fragment = {language_code: fragment}

        if language_code != store.get_language():
            store.set_language(language_code)

    store.append(fragment)
    logger.debug(
        "global_fragment_appended",
        language=store.get_language(),
        fragment_count=len(store.fragments),
    )


def set_language_global(code: Any = _UNSET) -> Optional[str]:
    """Get or set the global language.

    Called without arguments, returns the global language code. Otherwise
    switches the global language (empty codes are ignored) and returns None.
    """
    store = get_global_store()
    if code is _UNSET:
        return store.get_language()

    store.set_language(code)
    return None


def append(fragment: DictionaryFragment, language_code: Optional[str] = None) -> None:
    """Deprecated alias of append_global()."""
    warnings.warn(
        "append() was renamed to append_global()",
        DeprecationWarning,
        stacklevel=2,
    )
    logger.warning("deprecated_alias_called", alias="append", target="append_global")
    append_global(fragment, language_code)


def lang(code: Any = _UNSET) -> Optional[str]:
    """Deprecated alias of set_language_global()."""
    warnings.warn(
        "lang() was renamed to set_language_global()",
        DeprecationWarning,
        stacklevel=2,
    )
    logger.warning(
        "deprecated_alias_called", alias="lang", target="set_language_global"
    )
    return set_language_global(code)
