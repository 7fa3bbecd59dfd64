"""Registration of update services with the system package manager."""

from .bridge import RegistrationPackageBridge
from .credentials import Credentials, credentials_from_url
from .exceptions import PkgError, RegistrationError, ServiceError
from .target import InstallMode, PackageTarget, Product, ProductService, Repository, Service

__all__ = [
    "Credentials",
    "InstallMode",
    "PackageTarget",
    "PkgError",
    "Product",
    "ProductService",
    "RegistrationError",
    "RegistrationPackageBridge",
    "Repository",
    "Service",
    "ServiceError",
    "credentials_from_url",
]
