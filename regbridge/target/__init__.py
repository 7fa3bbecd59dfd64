"""Package management target abstraction.

The registration workflow never talks to a package manager directly; it
drives an injected :class:`PackageTarget` so the real system database can
be replaced in tests.
"""

from .base import (
    InstallMode,
    PackageTarget,
    PackageTargetProtocol,
    Product,
    ProductService,
    Repository,
    Service,
    flatten_services,
)

__all__ = [
    "InstallMode",
    "PackageTarget",
    "PackageTargetProtocol",
    "Product",
    "ProductService",
    "Repository",
    "Service",
    "flatten_services",
]
