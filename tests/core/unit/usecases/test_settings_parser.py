"""Unit tests for SettingsParser use case."""

from __future__ import annotations

from pathlib import Path

import pytest

from carbonyl_install.domain.exceptions import InstallerConfigError
from carbonyl_install.domain.settings import InstallerSettings
from carbonyl_install.usecases.settings_parser import SettingsParser


@pytest.mark.unit
@pytest.mark.tier(1)
@pytest.mark.tra("UseCase.SettingsParser")
class TestSettingsParser:
    """Test SettingsParser use case."""

    def test_parse_yaml_to_settings(self):
        """Test basic parsing of YAML to InstallerSettings."""
        yaml_str = """
install_dir: /opt/carbonyl
bin_link: /opt/bin/carbonyl
dependency_search_dir: /opt/lib
retriever: gh
use_sudo: true
"""
        settings = SettingsParser().parse(yaml_str)

        assert isinstance(settings, InstallerSettings)
        assert settings.install_dir == Path("/opt/carbonyl")
        assert settings.bin_link == Path("/opt/bin/carbonyl")
        assert settings.dependency_search_dir == Path("/opt/lib")
        assert settings.retriever == "gh"
        assert settings.use_sudo is True
        assert settings.repo == "fathyb/carbonyl"
        assert settings.version_tag == "v0.0.3"

    def test_absent_keys_keep_base_values(self, tmp_path: Path):
        """Test keys missing from the file come from the base settings."""
        base = InstallerSettings(project_root=tmp_path, install_dir=tmp_path / "lib")

        settings = SettingsParser().parse("version_tag: v0.0.4\n", base)

        assert settings.version_tag == "v0.0.4"
        assert settings.project_root == tmp_path
        assert settings.install_dir == tmp_path / "lib"

    def test_numeric_versions_become_strings(self):
        """Test unquoted YAML numbers are read as version strings."""
        settings = SettingsParser().parse("dependency_abi_major: 0\ndependency_version: 0.1\n")

        assert settings.dependency_abi_major == "0"
        assert settings.dependency_version == "0.1"

    def test_home_is_expanded_in_paths(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
        """Test '~' in path settings is expanded."""
        monkeypatch.setenv("HOME", str(tmp_path))

        settings = SettingsParser().parse("dependency_search_dir: ~/.local/lib\n")

        assert settings.dependency_search_dir == tmp_path / ".local" / "lib"

    def test_empty_document_returns_base(self):
        """Test an empty file changes nothing."""
        base = InstallerSettings()

        assert SettingsParser().parse("", base) == base

    def test_parse_invalid_yaml(self):
        """Test that invalid YAML raises InstallerConfigError."""
        with pytest.raises(InstallerConfigError, match="Invalid YAML"):
            SettingsParser().parse("invalid: yaml: [")

    def test_parse_non_mapping(self):
        """Test a top-level list is rejected."""
        with pytest.raises(InstallerConfigError, match="must be a dictionary"):
            SettingsParser().parse("- install_dir\n")

    def test_unknown_key_is_rejected(self):
        """Test typos in setting names are reported."""
        with pytest.raises(InstallerConfigError, match="Unknown settings: instal_dir"):
            SettingsParser().parse("instal_dir: /opt/carbonyl\n")

    def test_non_boolean_sudo_is_rejected(self):
        """Test use_sudo must be a YAML boolean."""
        with pytest.raises(InstallerConfigError, match="use_sudo must be a boolean"):
            SettingsParser().parse("use_sudo: sometimes\n")

    def test_nested_value_is_rejected(self):
        """Test mappings are not accepted as setting values."""
        with pytest.raises(InstallerConfigError, match="must be a scalar"):
            SettingsParser().parse("repo:\n  owner: fathyb\n")

    def test_relative_install_dir_is_rejected(self):
        """Test settings validation still applies to parsed values."""
        with pytest.raises(InstallerConfigError, match="must be absolute"):
            SettingsParser().parse("install_dir: lib/carbonyl\n")

    def test_parse_file(self, tmp_path: Path):
        """Test parsing from a file on disk."""
        config = tmp_path / "carbonyl-install.yml"
        config.write_text("install_dir: /opt/carbonyl\n", encoding="utf-8")

        settings = SettingsParser().parse_file(config)

        assert settings.install_dir == Path("/opt/carbonyl")

    def test_parse_missing_file(self, tmp_path: Path):
        """Test an unreadable file is a configuration error."""
        with pytest.raises(InstallerConfigError, match="Cannot read config file"):
            SettingsParser().parse_file(tmp_path / "missing.yml")

    def test_abi_major_equal_to_version_is_rejected(self):
        """Test a file whose soname link would point at itself is refused."""
        with pytest.raises(InstallerConfigError, match="must differ from dependency_version"):
            SettingsParser().parse("dependency_version: '1'\ndependency_abi_major: 1\n")
