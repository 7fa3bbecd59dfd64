"""Writable package manager configuration during upgrade.

While upgrading from the installation media the configuration directory
lives on a read-only file system. The whole tree is copied to a temporary
directory and the copy is bind-mounted over the original location.
"""

import os
import shutil
import tempfile
from pathlib import Path
from typing import Optional

from ..common.config import DEFAULT_ZYPP_DIR
from ..common.logger import get_logger
from ..mounts import MountProvider

logger = get_logger("zypp_config")


class WritableConfigEnsurer:
    """Make the package manager configuration directory writable."""

    def __init__(self, mount_provider: MountProvider, zypp_dir: str = DEFAULT_ZYPP_DIR):
        self.mount_provider = mount_provider
        self.zypp_dir = zypp_dir

    def is_writable(self) -> bool:
        """Check whether the configuration directory can be written."""
        return os.access(self.zypp_dir, os.W_OK)

    def ensure_writable(self, installation: bool, update: bool) -> Optional[Path]:
        """Overlay a writable copy of the configuration directory if needed.

        Args:
            installation: Running in installation mode
            update: Running an upgrade

        Returns:
            Path of the writable copy, or None when nothing was done

        Raises:
            OSError: If copying the tree fails
            subprocess.CalledProcessError: If the bind mount fails
        """
        if not installation or not update or self.is_writable():
            return None

        logger.info("Copying package manager config to a writable place")

        tmpdir = tempfile.mkdtemp(prefix="regbridge-")
        copy = Path(tmpdir) / Path(self.zypp_dir).name

        logger.info(f"Copying {self.zypp_dir} to {tmpdir} ...")
        try:
            shutil.copytree(self.zypp_dir, copy, symlinks=True)
        except OSError:
            shutil.rmtree(tmpdir, ignore_errors=True)
            raise

        self.mount_provider.bind_mount(str(copy), self.zypp_dir)
        return copy
