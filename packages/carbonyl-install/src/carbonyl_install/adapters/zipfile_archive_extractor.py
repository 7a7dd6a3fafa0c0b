"""Zipfile-based implementation of the ArchiveExtractorPort."""

from __future__ import annotations

import os
import stat
import zipfile
from pathlib import Path


class ZipfileArchiveExtractor:
    """Adapter that expands zip archives using the zipfile module.

    zipfile restores neither permissions nor symbolic links, so the Unix mode
    recorded in each member's external attributes is re-applied: executables
    keep their mode bits and link members become links again, like `unzip`.
    """

    def extract(self, archive: Path, destination: Path) -> None:
        """Expand archive into destination.

        Raises:
            zipfile.BadZipFile: If the archive is corrupt.
            OSError: For filesystem errors.
        """
        destination.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(archive) as zf:
            for info in zf.infolist():
                # extract() sanitizes the member name; links are rebuilt in place.
                extracted = Path(zf.extract(info, destination))
                unix_mode = info.external_attr >> 16
                if stat.S_ISLNK(unix_mode):
                    target = zf.read(info).decode()
                    extracted.unlink()
                    os.symlink(target, extracted)
                elif stat.S_IMODE(unix_mode) and not info.is_dir():
                    extracted.chmod(stat.S_IMODE(unix_mode))
