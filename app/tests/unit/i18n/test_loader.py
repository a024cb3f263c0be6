"""Tests for glossa.i18n.loader module."""

import pytest
import yaml

from glossa.i18n import YAMLDictionaryLoader


class TestYAMLDictionaryLoader:
    """Tests for YAMLDictionaryLoader."""

    def test_loader_initialization(self, temp_translations_dir):
        """YAMLDictionaryLoader initializes with valid directory."""
        loader = YAMLDictionaryLoader(temp_translations_dir)
        assert loader.translations_dir == temp_translations_dir
        assert loader.use_cache is True
        assert loader.cache == {}

    def test_loader_initialization_nonexistent_directory(self, tmp_path):
        """YAMLDictionaryLoader raises ValueError for missing directory."""
        with pytest.raises(ValueError):
            YAMLDictionaryLoader(tmp_path / "nonexistent")

    def test_available_languages(self, temp_translations_dir):
        """available_languages() lists languages from file names."""
        loader = YAMLDictionaryLoader(temp_translations_dir)
        assert loader.available_languages() == ["en_US", "pt_PT"]

    def test_load_merges_files(self, temp_translations_dir):
        """load() merges every file of a language."""
        loader = YAMLDictionaryLoader(temp_translations_dir)
        table = loader.load("en_US")
        assert table["hello"] == "hello!"
        assert table["_ordinals"]["byLastDigit"][1] == "st"

    def test_load_later_files_win(self, tmp_path):
        """Files later in name order override earlier ones."""
        with open(tmp_path / "a.pt_PT.yml", "w", encoding="utf-8") as f:
            yaml.dump({"k": "first", "only_a": "a"}, f)
        with open(tmp_path / "b.pt_PT.yml", "w", encoding="utf-8") as f:
            yaml.dump({"k": "second"}, f)

        table = YAMLDictionaryLoader(tmp_path).load("pt_PT")
        assert table == {"k": "second", "only_a": "a"}

    def test_load_language_only_file_name(self, tmp_path):
        """<language>.yml files are recognized."""
        with open(tmp_path / "fr.yml", "w", encoding="utf-8") as f:
            yaml.dump({"hello": "bonjour"}, f)

        assert YAMLDictionaryLoader(tmp_path).load("fr") == {"hello": "bonjour"}

    def test_load_missing_language_raises_error(self, temp_translations_dir):
        """load() raises FileNotFoundError for unknown languages."""
        loader = YAMLDictionaryLoader(temp_translations_dir)
        with pytest.raises(FileNotFoundError):
            loader.load("de")

    def test_load_invalid_yaml_raises_error(self, tmp_path):
        """load() raises ValueError when a file cannot be parsed."""
        with open(tmp_path / "bad.en_US.yml", "w", encoding="utf-8") as f:
            f.write("key: [unclosed\n")

        with pytest.raises(ValueError):
            YAMLDictionaryLoader(tmp_path).load("en_US")

    def test_load_skips_non_mapping_files(self, tmp_path):
        """Files that are not mappings are skipped."""
        with open(tmp_path / "list.en_US.yml", "w", encoding="utf-8") as f:
            yaml.dump(["a", "b"], f)
        with open(tmp_path / "main.en_US.yml", "w", encoding="utf-8") as f:
            yaml.dump({"a": "A"}, f)
        (tmp_path / "empty.en_US.yml").write_text("", encoding="utf-8")

        assert YAMLDictionaryLoader(tmp_path).load("en_US") == {"a": "A"}

    def test_load_caches_results(self, temp_translations_dir):
        """load() returns the cached table on repeated calls."""
        loader = YAMLDictionaryLoader(temp_translations_dir, use_cache=True)
        first = loader.load("en_US")
        assert loader.load("en_US") is first
        assert "en_US" in loader.cache

    def test_load_without_cache(self, temp_translations_dir):
        """load() re-reads files when caching is disabled."""
        loader = YAMLDictionaryLoader(temp_translations_dir, use_cache=False)
        first = loader.load("en_US")
        assert loader.load("en_US") is not first
        assert loader.cache == {}

    def test_load_all(self, temp_translations_dir):
        """load_all() returns a fragment covering every language."""
        fragment = YAMLDictionaryLoader(temp_translations_dir).load_all()
        assert set(fragment) == {"en_US", "pt_PT"}
        assert fragment["pt_PT"]["hello"] == "olá"

    def test_load_all_empty_directory(self, tmp_path):
        """load_all() raises ValueError when no files exist."""
        with pytest.raises(ValueError):
            YAMLDictionaryLoader(tmp_path).load_all()

    def test_clear_cache(self, temp_translations_dir):
        """clear_cache() empties the cache."""
        loader = YAMLDictionaryLoader(temp_translations_dir)
        loader.load("en_US")
        loader.clear_cache()
        assert loader.cache == {}
