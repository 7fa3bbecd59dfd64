"""Mount providers used to overlay writable copies of directories."""

import subprocess
from abc import ABC, abstractmethod
from typing import List

from .common.logger import get_logger

logger = get_logger("mounts")


class MountProvider(ABC):
    """Abstract mount provider.

    All privileged mount operations go through this interface.
    """

    @abstractmethod
    def bind_mount(self, source: str, target: str) -> None:
        """Bind-mount ``source`` over ``target``.

        Raises:
            Exception: Any failure; mounts are never partially applied
        """
        pass


class CommandMountProvider(MountProvider):
    """Mount provider running the system ``mount`` command."""

    def __init__(self, mount_command: str = "mount", timeout: int = 60):
        """Initialize mount provider.

        Args:
            mount_command: Path or name of the mount binary
            timeout: Command timeout in seconds
        """
        self.mount_command = mount_command
        self.timeout = timeout

    def _run_mount(self, args: List[str]) -> subprocess.CompletedProcess:
        """Run the mount command.

        Raises:
            subprocess.CalledProcessError: If mount exits non-zero
            subprocess.TimeoutExpired: If mount does not finish in time
            RuntimeError: If the mount binary is missing
        """
        cmd = [self.mount_command] + args
        try:
            return subprocess.run(
                cmd,
                capture_output=True,
                timeout=self.timeout,
                check=True,
            )
        except subprocess.CalledProcessError as e:
            stderr = e.stderr.decode() if e.stderr else str(e)
            logger.error(f"Mount command failed: {stderr}")
            raise
        except FileNotFoundError as e:
            raise RuntimeError(f"Mount command not found: {self.mount_command}") from e

    def bind_mount(self, source: str, target: str) -> None:
        logger.info(f"Mounting {source} to {target}")
        self._run_mount(["-o", "bind", source, target])
