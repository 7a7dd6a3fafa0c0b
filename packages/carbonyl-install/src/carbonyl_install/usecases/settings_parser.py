"""Settings parser use case for installer YAML configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from carbonyl_install.domain.exceptions import InstallerConfigError
from carbonyl_install.domain.settings import InstallerSettings

_PATH_FIELDS = frozenset(
    ["project_root", "install_dir", "bin_link", "dependency_search_dir"]
)
_BOOL_FIELDS = frozenset(["use_sudo"])


class SettingsParser:
    """Parses installer YAML configuration onto base settings.

    Keys are the InstallerSettings field names. Keys absent from the file
    keep the value of the base settings.

    Example file:
        install_dir: /opt/carbonyl
        dependency_search_dir: ~/.local/lib
        retriever: gh
    """

    def parse(
        self, yaml_str: str, base: InstallerSettings | None = None
    ) -> InstallerSettings:
        """Parse YAML config to settings.

        Args:
            yaml_str: YAML string holding a mapping of settings.
            base: Settings to override; defaults to InstallerSettings().

        Returns:
            InstallerSettings domain object.

        Raises:
            InstallerConfigError: If YAML is invalid, not a mapping, has
                unknown keys or values of the wrong type.
        """
        try:
            config = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise InstallerConfigError(f"Invalid YAML: {e}") from e

        if config is None:
            config = {}
        if not isinstance(config, dict):
            raise InstallerConfigError("Config must be a dictionary")

        overrides = {str(key): self._coerce(str(key), value) for key, value in config.items()}
        return (base or InstallerSettings()).with_overrides(**overrides)

    def parse_file(
        self, path: Path, base: InstallerSettings | None = None
    ) -> InstallerSettings:
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise InstallerConfigError(f"Cannot read config file {path}: {e}") from e
        return self.parse(text, base)

    def _coerce(self, key: str, value: Any) -> Any:
        if value is None:
            return None
        if key in _PATH_FIELDS:
            return Path(str(value)).expanduser()
        if key in _BOOL_FIELDS:
            if not isinstance(value, bool):
                raise InstallerConfigError(f"{key} must be a boolean, got: {value!r}")
            return value
        if isinstance(value, (dict, list)):
            raise InstallerConfigError(f"{key} must be a scalar, got: {value!r}")
        return str(value)
