"""Service credentials stored in the package manager credentials directory."""

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Dict, Optional
from urllib.parse import parse_qs, urlparse

from .common.config import DEFAULT_CREDENTIALS_DIR
from .common.logger import get_logger

logger = get_logger("credentials")

DEFAULT_CREDENTIALS_FILE = "SCCcredentials"
LEGACY_NCC_CREDENTIALS_FILE = "NCCcredentials"
LEGACY_SCC_CREDENTIALS_FILE = "SCCCredentials"


@dataclass(frozen=True)
class Credentials:
    """Username/password pair persisted under a credentials file name.

    Instances are immutable; use :meth:`with_file` to write the same
    payload under another name.
    """

    username: str
    password: str
    file: str = DEFAULT_CREDENTIALS_FILE
    credentials_dir: str = DEFAULT_CREDENTIALS_DIR

    @property
    def path(self) -> Path:
        """Full path of the credentials file."""
        return Path(self.credentials_dir) / self.file

    def with_file(self, file: str) -> "Credentials":
        """Return a copy that persists to ``file``."""
        return replace(self, file=file)

    def write(self) -> Path:
        """Write the credentials file, readable by root only.

        Returns:
            Path of the written file

        Raises:
            OSError: If the file cannot be written
        """
        path = self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Writing credentials to {path}")

        fd = os.open(str(path), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w") as f:
            f.write(f"username={self.username}\npassword={self.password}\n")
        os.chmod(path, 0o600)
        return path

    @classmethod
    def read(cls, path: str) -> "Credentials":
        """Read a credentials file.

        Args:
            path: Path to an existing credentials file

        Returns:
            Credentials bound to the file's directory and name

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If username or password is missing
        """
        file_path = Path(path)
        values: Dict[str, str] = {}
        with file_path.open("r") as f:
            for line in f:
                key, sep, value = line.strip().partition("=")
                if sep:
                    values[key.strip()] = value.strip()

        if "username" not in values or "password" not in values:
            raise ValueError(f"Incomplete credentials file: {path}")

        return cls(
            username=values["username"],
            password=values["password"],
            file=file_path.name,
            credentials_dir=str(file_path.parent),
        )


def credentials_from_url(url: str) -> Optional[str]:
    """Get the credentials file name embedded in a service URL.

    Service URLs carry it as the ``credentials`` query parameter, e.g.
    ``https://scc.example.com/access/services/1?credentials=SLES_x86_64``.

    Args:
        url: Service URL

    Returns:
        Credentials file name or None if the URL has none
    """
    query = parse_qs(urlparse(str(url)).query)
    names = query.get("credentials")
    if not names or not names[0]:
        return None
    name = os.path.basename(names[0])
    if name in ("", ".", ".."):
        return None
    return name
