"""Dictionary loading interface and implementations.

Defines the contract for loading dictionaries and provides a YAML-based loader.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List

import yaml

from glossa.i18n.models import DictionaryFragment, LanguageTable
from glossa.logging import get_module_logger

logger = get_module_logger()


class DictionaryLoader(ABC):
    """Abstract base for dictionary loaders."""

    @abstractmethod
    def load(self, language: str) -> LanguageTable:
        """Load the language table for a specific language.

        Raises:
            FileNotFoundError: If no dictionary exists for language.
            ValueError: If the dictionary format is invalid.
        """
        pass

    @abstractmethod
    def load_all(self) -> DictionaryFragment:
        """Load every available language as a single dictionary fragment."""
        pass


class YAMLDictionaryLoader(DictionaryLoader):
    """Loader for YAML dictionaries.

    Expects files named <language>.yml or <domain>.<language>.yml, each
    holding a flat mapping of translation keys to entries:

        # common.en_US.yml
        "{} day": "{} day"
        "{} days": "{} days"
        _ordinals:
          default: th

    Attributes:
        translations_dir: Path to directory containing YAML files.
        cache: Loaded language tables (language -> table).
    """

    def __init__(
        self,
        translations_dir: Path,
        use_cache: bool = True,
    ):
        """Initialize YAML dictionary loader.

        Args:
            translations_dir: Path to directory with YAML files.
            use_cache: Whether to cache loaded tables in memory.

        Raises:
            ValueError: If translations_dir does not exist.
        """
        self.translations_dir = Path(translations_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, LanguageTable] = {}

        if not self.translations_dir.exists():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    @staticmethod
    def _language_of(yaml_file: Path) -> str:
        return yaml_file.stem.split(".")[-1]

    def _files_for(self, language: str) -> List[Path]:
        return [
            yaml_file
            for yaml_file in sorted(self.translations_dir.glob("*.yml"))
            if self._language_of(yaml_file) == language
        ]

    def available_languages(self) -> List[str]:
        """List languages that have at least one dictionary file."""
        languages = {
            self._language_of(yaml_file)
            for yaml_file in self.translations_dir.glob("*.yml")
        }
        return sorted(languages)

    def load(self, language: str) -> LanguageTable:
        """Load and merge every YAML file for a language.

        Files are merged in name order; later files win on key collisions.

        Raises:
            FileNotFoundError: If no YAML files found for language.
            ValueError: If YAML parsing fails.
        """
        if self.use_cache and language in self.cache:
            logger.debug("loaded_from_cache", language=language)
            return self.cache[language]

        yaml_files = self._files_for(language)
        if not yaml_files:
            raise FileNotFoundError(
                f"No dictionary files found for language {language} in {self.translations_dir}"
            )

        table: LanguageTable = {}
        for yaml_file in yaml_files:
            try:
                with open(yaml_file, "r", encoding="utf-8") as f:
                    data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                logger.error("yaml_parse_error", file=str(yaml_file), error=str(e))
                raise ValueError(f"Failed to parse {yaml_file}: {e}") from e

            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning(
                    "invalid_yaml_format", file=str(yaml_file), expected="dict"
                )
                continue
            table.update(data)

        logger.info(
            "loaded_translations",
            language=language,
            file_count=len(yaml_files),
            key_count=len(table),
        )

        if self.use_cache:
            self.cache[language] = table

        return table

    def load_all(self) -> DictionaryFragment:
        """Load every available language.

        Raises:
            ValueError: If no YAML files are found at all.
        """
        languages = self.available_languages()
        if not languages:
            raise ValueError(f"No dictionary files found in {self.translations_dir}")

        return {language: self.load(language) for language in languages}

    def clear_cache(self) -> None:
        """Clear all cached language tables."""
        self.cache.clear()
        logger.info("cleared_translation_cache")
