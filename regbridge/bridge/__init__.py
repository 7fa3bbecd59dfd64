"""Registration bridge between the registration server and the package manager.

:class:`RegistrationPackageBridge` ties together product discovery,
service registration, repository collection, the writable configuration
workaround and credentials migration over one injected target.
"""

from pathlib import Path
from typing import List, Optional, Sequence

from ..common.config import RegistrationConfig
from ..common.logger import get_logger
from ..credentials import Credentials
from ..exceptions import PkgError
from ..mounts import CommandMountProvider, MountProvider
from ..target.base import InstallMode, PackageTarget, Product, ProductService, Repository, Service
from .migration import CredentialMigrator
from .products import ProductDiscovery
from .repositories import RepositoryCollector
from .services import ServiceRegistrar, saved_repositories
from .zypp_config import WritableConfigEnsurer

logger = get_logger("bridge")


class RegistrationPackageBridge:
    """Facade over the registration workflow steps."""

    def __init__(
        self,
        target: PackageTarget,
        mode: InstallMode,
        mount_provider: Optional[MountProvider] = None,
        config: Optional[RegistrationConfig] = None,
    ):
        self.target = target
        self.mode = mode
        self.config = config or RegistrationConfig()
        mount_provider = mount_provider or CommandMountProvider(self.config.mount_command)

        self.products = ProductDiscovery(target, mode)
        self.registrar = ServiceRegistrar(target)
        self.collector = RepositoryCollector(target)
        self.config_ensurer = WritableConfigEnsurer(mount_provider, self.config.zypp_dir)
        self.migrator = CredentialMigrator(self.config.credentials_dir)

    @classmethod
    def from_config(
        cls,
        config: RegistrationConfig,
        target: PackageTarget,
        mode: InstallMode,
    ) -> "RegistrationPackageBridge":
        """Create a bridge using the configured mount command."""
        return cls(target, mode, CommandMountProvider(config.mount_command), config)

    def init_target(self, destdir: Optional[str] = None) -> None:
        """Initialize and load the target.

        Args:
            destdir: Target root, defaults to the configured destdir

        Raises:
            PkgError: If the target cannot be initialized or loaded
        """
        root = destdir or self.config.destdir
        logger.info(f"Initializing package management target at {root}")
        if not self.target.target_initialize(root):
            raise PkgError(f"Initializing the package management target at {root} failed.")
        if not self.target.target_load():
            raise PkgError("Loading the package management target failed.")

    def zypp_config_writable(self) -> Optional[Path]:
        return self.config_ensurer.ensure_writable(self.mode.installation, self.mode.update)

    def base_products(self) -> List[Product]:
        return self.products.base_products()

    def add_services(
        self, product_services: Sequence[ProductService], credentials: Credentials
    ) -> List[Service]:
        return self.registrar.add_services(product_services, credentials)

    def service_repos(self, product_services: Sequence[ProductService]) -> List[Repository]:
        return self.collector.service_repos(product_services)

    def copy_old_credentials(self, target_dir: str) -> Optional[Path]:
        return self.migrator.copy_old_credentials(target_dir)


__all__ = [
    "CredentialMigrator",
    "ProductDiscovery",
    "RegistrationPackageBridge",
    "RepositoryCollector",
    "ServiceRegistrar",
    "WritableConfigEnsurer",
    "saved_repositories",
]
