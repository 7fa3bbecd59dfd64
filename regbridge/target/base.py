"""Base classes and protocols for the package management target.

Defines the interface the registration workflow drives, along with the
data structures exchanged with it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence


@dataclass(frozen=True)
class InstallMode:
    """Installer phase flags."""

    installation: bool = False
    update: bool = False

    @property
    def normal(self) -> bool:
        """Running on an installed system, neither installing nor upgrading."""
        return not self.installation and not self.update


@dataclass(frozen=True)
class Product:
    """Base product snapshot reported by the target."""

    name: str
    arch: str
    version: str

    def to_dict(self) -> Dict[str, str]:
        """Return the product as a plain mapping."""
        return {"name": self.name, "arch": self.arch, "version": self.version}


@dataclass(frozen=True)
class Service:
    """Remote repository service endpoint."""

    name: str
    url: str


@dataclass
class ProductService:
    """Registration services provided for one product."""

    services: List[Service] = field(default_factory=list)


@dataclass(frozen=True)
class Repository:
    """Loaded repository as reported by the target."""

    src_id: int
    service: Optional[str]
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_general_data(cls, src_id: int, data: Dict[str, Any]) -> "Repository":
        """Build a repository from the target's general data record."""
        return cls(src_id=src_id, service=data.get("service") or None, data=dict(data))

    def as_dict(self) -> Dict[str, Any]:
        """Return the metadata annotated with its source index."""
        record = dict(self.data)
        record["SrcId"] = self.src_id
        return record


def flatten_services(product_services: Sequence[ProductService]) -> List[Service]:
    """Flatten services in product order, then service order."""
    return [service for product in product_services for service in product.services]


class PackageTarget(ABC):
    """Abstract handle to the system's package management database.

    Implementations wrap a single process-wide package manager. None of
    the methods are reentrant; callers own the target for the duration
    of a registration pass.
    """

    @abstractmethod
    def target_initialize(self, root: str) -> bool:
        """Initialize the target rooted at ``root``."""
        pass

    @abstractmethod
    def target_load(self) -> bool:
        """Load the installed system's resolvables."""
        pass

    @abstractmethod
    def resolvable_properties(self, name: str, kind: str, version: str) -> List[Dict[str, Any]]:
        """List resolvables of a kind.

        Args:
            name: Resolvable name, empty string for all
            kind: Resolvable kind (e.g., 'product', 'package')
            version: Version, empty string for all

        Returns:
            Records with at least status, type, source, name, arch
            and version keys
        """
        pass

    @abstractmethod
    def source_save_all(self) -> bool:
        """Persist all loaded repositories.

        Returns:
            True if saving succeeded
        """
        pass

    @abstractmethod
    def source_get_current(self, enabled_only: bool = True) -> List[int]:
        """List source ids of loaded repositories.

        Repositories marked for removal are never reported.

        Args:
            enabled_only: Report only enabled repositories
        """
        pass

    @abstractmethod
    def source_general_data(self, src_id: int) -> Dict[str, Any]:
        """Return general metadata of a repository."""
        pass

    @abstractmethod
    def service_add(self, name: str, url: str) -> bool:
        """Add a service.

        Returns:
            True if the service was added
        """
        pass

    @abstractmethod
    def service_save(self, name: str) -> bool:
        """Persist an added service.

        Returns:
            True if saving succeeded
        """
        pass

    @abstractmethod
    def service_refresh(self, name: str) -> bool:
        """Refresh a saved service and load its repositories.

        Returns:
            True if the refresh succeeded
        """
        pass


class PackageTargetProtocol(Protocol):
    """Protocol for type checking package targets."""

    def resolvable_properties(self, name: str, kind: str, version: str) -> List[Dict[str, Any]]: ...

    def source_save_all(self) -> bool: ...

    def source_get_current(self, enabled_only: bool = True) -> List[int]: ...

    def source_general_data(self, src_id: int) -> Dict[str, Any]: ...

    def service_add(self, name: str, url: str) -> bool: ...

    def service_save(self, name: str) -> bool: ...

    def service_refresh(self, name: str) -> bool: ...
