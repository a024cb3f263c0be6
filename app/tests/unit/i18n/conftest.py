"""Feature-level fixtures for i18n tests."""

import pytest
import yaml

from glossa.i18n import Translator
from tests.factories.i18n import make_english_ordinals, make_french_ordinals


@pytest.fixture
def dictionaries():
    """Fragment with Portuguese and English tables."""
    return {
        "pt_PT": {
            "hello": "olá",
            "{} day": "{} dia",
            "{} days": "{} dias",
            "cat_forms": ["gato", "gatos"],
            "count_forms": ["{} gato", "{} gatos"],
            "_ordinals": {"default": "º"},
        },
        "en_US": {
            "hello": "hello!",
            "_ordinals": make_english_ordinals(),
        },
        "fr": {
            "hello": "bonjour",
            "_ordinals": make_french_ordinals(),
        },
    }


@pytest.fixture
def translator(dictionaries):
    """Portuguese translator over the sample dictionaries."""
    return Translator(dictionaries, "pt_PT")


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML dictionaries.

    Returns a directory structure like:
    - common.en_US.yml
    - common.pt_PT.yml
    - ordinals.en_US.yml
    """
    with open(tmp_path / "common.en_US.yml", "w", encoding="utf-8") as f:
        yaml.dump({"hello": "hello!", "{} days": "{} days"}, f)

    with open(tmp_path / "common.pt_PT.yml", "w", encoding="utf-8") as f:
        yaml.dump({"hello": "olá", "{} days": "{} dias"}, f, allow_unicode=True)

    with open(tmp_path / "ordinals.en_US.yml", "w", encoding="utf-8") as f:
        yaml.dump({"_ordinals": make_english_ordinals()}, f)

    return tmp_path
