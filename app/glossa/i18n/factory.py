"""Factory functions for creating translators."""

from pathlib import Path
from typing import Optional

from glossa.configuration import settings
from glossa.i18n.loader import YAMLDictionaryLoader
from glossa.i18n.models import DictionaryFragment
from glossa.i18n.translator import Translator
from glossa.logging import get_module_logger

logger = get_module_logger()

BUNDLED_LOCALES_DIR = Path(__file__).resolve().parents[1] / "locales"


def create(
    dictionaries: Optional[DictionaryFragment] = None,
    language_code: Optional[str] = None,
    test_mode: Optional[bool] = None,
) -> Translator:
    """Create a Translator.

    Args:
        dictionaries: Fragment mapping language codes to language tables.
        language_code: Active language (default: the global language).
        test_mode: Wrap unknown keys in brackets (default: settings.i18n.TEST_MODE).

    Usage:
        _ = create({"pt_PT": {"hi": "olá"}}, "pt_PT").get_alias()
        _("hi")  # "olá"
    """
    if test_mode is None:
        test_mode = settings.i18n.TEST_MODE
    return Translator(dictionaries, language_code, test_mode)


def create_from_directory(
    translations_dir: Path | str | None = None,
    language_code: Optional[str] = None,
    test_mode: Optional[bool] = None,
    use_cache: bool = True,
) -> Translator:
    """Create a Translator loaded with every YAML dictionary of a directory.

    Args:
        translations_dir: Directory of YAML dictionaries (default:
            settings.i18n.TRANSLATIONS_DIR, else the bundled locales).
        language_code: Active language (default: the global language).
        test_mode: Wrap unknown keys in brackets (default: settings.i18n.TEST_MODE).
        use_cache: Whether the loader caches parsed YAML.

    Raises:
        ValueError: If translations_dir does not exist or holds no dictionaries.
    """
    if translations_dir is None:
        translations_dir = settings.i18n.TRANSLATIONS_DIR or BUNDLED_LOCALES_DIR

    loader = YAMLDictionaryLoader(
        translations_dir=Path(translations_dir),
        use_cache=use_cache,
    )
    dictionaries = loader.load_all()
    translator = create(dictionaries, language_code, test_mode)

    logger.info(
        "translator_created_from_directory",
        translations_dir=str(translations_dir),
        languages=sorted(dictionaries),
        language=translator.get_language(),
    )
    return translator
