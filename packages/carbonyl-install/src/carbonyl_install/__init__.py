"""carbonyl-install: compose a Carbonyl installation from upstream and local builds."""

__version__ = "0.1.0"

from carbonyl_install.domain.exceptions import CarbonylInstallError
from carbonyl_install.domain.settings import InstallerSettings
from carbonyl_install.usecases.installer import Installer

__all__ = [
    "CarbonylInstallError",
    "InstallerSettings",
    "Installer",
]
