"""Credentials migration from a previous installation."""

import shutil
from pathlib import Path
from typing import Optional

from ..common.config import DEFAULT_CREDENTIALS_DIR
from ..common.logger import get_logger
from ..credentials import (
    DEFAULT_CREDENTIALS_FILE,
    LEGACY_NCC_CREDENTIALS_FILE,
    LEGACY_SCC_CREDENTIALS_FILE,
)

logger = get_logger("migration")


class CredentialMigrator:
    """Copy old NCC/SCC credentials into the new credentials store."""

    def __init__(self, credentials_dir: str = DEFAULT_CREDENTIALS_DIR):
        self.credentials_dir = credentials_dir

    def _old_file(self, target_dir: str, name: str) -> Path:
        return Path(target_dir) / self.credentials_dir.lstrip("/") / name

    def copy_old_credentials(self, target_dir: str) -> Optional[Path]:
        """Copy credentials found under ``target_dir``.

        Files are copied in the order NCC, SCCCredentials, SCCcredentials;
        the last one found wins.

        Args:
            target_dir: Root of the previous installation

        Returns:
            Path of the new credentials file, or None if nothing was found

        Raises:
            OSError: If copying fails
        """
        new_file = Path(self.credentials_dir) / DEFAULT_CREDENTIALS_FILE
        copied = None

        old_files = (
            ("NCC", LEGACY_NCC_CREDENTIALS_FILE),
            ("SCC", LEGACY_SCC_CREDENTIALS_FILE),
            ("SCC", DEFAULT_CREDENTIALS_FILE),
        )
        for label, name in old_files:
            old_file = self._old_file(target_dir, name)
            if not old_file.exists():
                continue

            logger.info(f"Copying the old {label} credentials from previous installation")
            logger.debug(f"Copying {old_file} to {new_file}")
            new_file.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy(old_file, new_file)
            copied = new_file

        return copied
