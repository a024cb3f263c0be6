"""glossa - lightweight dictionary-based internationalization."""

from glossa.i18n import (
    Translator,
    append_global,
    create,
    create_from_directory,
    reset_global,
    set_language_global,
)

__version__ = "1.0.0"

__all__ = [
    "Translator",
    "append_global",
    "create",
    "create_from_directory",
    "reset_global",
    "set_language_global",
]
