"""Tests for configuration loading and policy building."""

from pathlib import Path

import pytest

from vendorprune.config import (
    DEFAULT_CODE_SUFFIXES,
    RetentionPolicy,
    build_policy,
    get_code_suffixes,
    get_dev_imports,
    get_keep_patterns,
    get_test_suffixes,
    load_config,
)
from vendorprune.errors import ConfigurationError


class TestRetentionPolicy:
    """Tests for RetentionPolicy validation."""

    def test_defaults(self):
        policy = RetentionPolicy()

        assert not policy.code_only
        assert policy.include_dev_imports
        assert policy.code_suffixes == DEFAULT_CODE_SUFFIXES
        assert policy.test_suffixes == ("_test.go",)
        policy.validate()

    def test_no_tests_requires_code_only(self):
        with pytest.raises(ConfigurationError, match="--no-tests requires --only-code"):
            RetentionPolicy(exclude_tests=True).validate()

        RetentionPolicy(code_only=True, exclude_tests=True).validate()

    def test_keep_matcher(self):
        assert RetentionPolicy().build_keep_matcher() is None

        matcher = RetentionPolicy(keep_patterns=("**/*.json",)).build_keep_matcher()

        assert matcher.match("a/b/c.json")
        assert matcher.match("c.json")
        assert not matcher.match("a/b/c.go")

    def test_bad_keep_pattern_rejected(self):
        with pytest.raises(ConfigurationError, match="Bad keep pattern"):
            RetentionPolicy(code_only=True, keep_patterns=("h/[abc",)).validate()

    def test_to_dict(self):
        data = RetentionPolicy(keep_patterns=("**/*.json",)).to_dict()

        assert data["keep_patterns"] == ["**/*.json"]
        assert data["code_only"] is False


class TestConfigAccessors:
    """Tests for config dict accessors."""

    def test_defaults(self):
        assert get_keep_patterns({}) == []
        assert get_dev_imports({}) is True
        assert get_code_suffixes({}) == list(DEFAULT_CODE_SUFFIXES)
        assert get_test_suffixes({}) == ["_test.go"]

    def test_code_suffixes_extend_defaults(self):
        suffixes = get_code_suffixes({"code_suffixes": [".proto", ".go"]})

        assert suffixes[-1] == ".proto"
        assert suffixes.count(".go") == 1

    def test_test_suffixes_replace_defaults(self):
        assert get_test_suffixes({"test_suffixes": ["_spec.go"]}) == ["_spec.go"]

    def test_type_errors(self):
        with pytest.raises(ConfigurationError):
            get_keep_patterns({"keep": "**/*.json"})
        with pytest.raises(ConfigurationError):
            get_dev_imports({"dev_imports": "yes"})


class TestLoadConfig:
    """Tests for load_config."""

    def test_nothing_configured(self, tmp_path: Path):
        assert load_config(None, tmp_path) == {}

    def test_dotfile_table(self, tmp_path: Path):
        (tmp_path / ".vendorprune.toml").write_text('[vendorprune]\nonly_code = true\nkeep = ["**/*.tmpl"]\n')

        config = load_config(None, tmp_path)

        assert config == {"only_code": True, "keep": ["**/*.tmpl"]}

    def test_dotfile_top_level_keys(self, tmp_path: Path):
        (tmp_path / ".vendorprune.toml").write_text("no_legal_files = true\n")

        assert load_config(None, tmp_path) == {"no_legal_files": True}

    def test_pyproject_tool_table(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text("[tool.vendorprune]\ndev_imports = false\n")

        assert load_config(None, tmp_path) == {"dev_imports": False}

    def test_explicit_path(self, tmp_path: Path):
        path = tmp_path / "custom.toml"
        path.write_text("[vendorprune]\nonly_code = true\n")

        assert load_config(path, tmp_path / "elsewhere") == {"only_code": True}

    def test_explicit_path_missing(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.toml", tmp_path)

    def test_misspelled_table_rejected(self, tmp_path: Path):
        (tmp_path / ".vendorprune.toml").write_text("[vendorprun]\nonly_code = true\n")

        with pytest.raises(ConfigurationError, match="Unknown config key\\(s\\) .*: vendorprun"):
            load_config(None, tmp_path)

    def test_unknown_key_rejected(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text("[tool.vendorprune]\nonly_cod = true\n")

        with pytest.raises(ConfigurationError, match="only_cod"):
            load_config(None, tmp_path)

    def test_invalid_toml(self, tmp_path: Path):
        (tmp_path / ".vendorprune.toml").write_text("only_code = = true\n")

        with pytest.raises(ConfigurationError):
            load_config(None, tmp_path)


class TestBuildPolicy:
    """Tests for merging command line options over config."""

    def test_config_values_used(self):
        policy = build_policy({"only_code": True, "no_tests": True, "keep": ["a/**"]})

        assert policy.code_only
        assert policy.exclude_tests
        assert policy.keep_patterns == ("a/**",)

    def test_cli_values_added(self):
        policy = build_policy(
            {"keep": ["a/**"]},
            dry_run=True,
            no_legal_files=True,
            keep=["b/**"],
            code_suffixes=[".proto"],
        )

        assert policy.dry_run
        assert policy.exclude_legal_files
        assert policy.keep_patterns == ("a/**", "b/**")
        assert ".proto" in policy.code_suffixes

    def test_dev_imports_override(self):
        assert build_policy({"dev_imports": False}).include_dev_imports is False
        assert build_policy({"dev_imports": False}, dev_imports=True).include_dev_imports is True
        assert build_policy({}, dev_imports=False).include_dev_imports is False

    def test_invalid_combination(self):
        with pytest.raises(ConfigurationError):
            build_policy({}, no_tests=True)
