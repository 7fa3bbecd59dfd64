"""Service registration.

Adds the registration services to the package management target, saves
and refreshes them. Refreshing a service loads its repositories.
"""

from contextlib import contextmanager
from typing import Iterator, List, Sequence

from ..common.logger import get_logger
from ..credentials import Credentials, credentials_from_url
from ..exceptions import PkgError, ServiceError
from ..target.base import PackageTargetProtocol, ProductService, Service, flatten_services

logger = get_logger("services")


@contextmanager
def saved_repositories(target: PackageTargetProtocol) -> Iterator[None]:
    """Save all repositories on entry and again on every exit.

    Repositories not yet saved when a service is refreshed are treated as
    removed by the target and dropped.

    Raises:
        PkgError: If the initial save fails
    """
    try:
        if not target.source_save_all():
            logger.error("Saving repository configuration failed")
            raise PkgError("Saving repository configuration failed.")
        yield
    finally:
        if not target.source_save_all():
            logger.warning("Saving repository configuration on exit failed")


class ServiceRegistrar:
    """Register product services with the package management target."""

    def __init__(self, target: PackageTargetProtocol):
        self.target = target

    def _write_credentials(self, service: Service, credentials: Credentials) -> None:
        credentials_file = credentials_from_url(service.url)
        if credentials_file:
            # the registration server does not issue per-service credentials,
            # the global ones are stored under the service's file name
            credentials.with_file(credentials_file).write()

    def _add_service(self, service: Service) -> None:
        if not self.target.service_add(service.name, service.url):
            logger.error(f"Adding service {service.name!r} failed")
            raise ServiceError("Adding service '%s' failed.", service.name)

        # refresh works only for saved services
        if not self.target.service_save(service.name):
            logger.error(f"Saving service {service.name!r} failed")
            raise ServiceError("Saving service '%s' failed.", service.name)

        if not self.target.service_refresh(service.name):
            logger.error(f"Refreshing service {service.name!r} failed")
            raise ServiceError("Refreshing service '%s' failed.", service.name)

    def add_services(
        self,
        product_services: Sequence[ProductService],
        credentials: Credentials,
    ) -> List[Service]:
        """Add, save and refresh all services of the given products.

        Args:
            product_services: Services per product, registered in order
            credentials: Credentials written for every service that
                names a credentials file in its URL

        Returns:
            Registered services in registration order

        Raises:
            PkgError: If the repositories cannot be saved before adding
            ServiceError: If a service cannot be added, saved or refreshed
        """
        with saved_repositories(self.target):
            services = flatten_services(product_services)
            for service in services:
                logger.info(f"Adding service {service.name!r} ({service.url})")
                self._write_credentials(service, credentials)
                self._add_service(service)

        return services
