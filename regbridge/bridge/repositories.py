"""Repositories provided by registered services."""

from typing import List, Sequence

from ..common.logger import get_logger
from ..target.base import PackageTargetProtocol, ProductService, Repository, flatten_services

logger = get_logger("repositories")


class RepositoryCollector:
    """Select the loaded repositories that belong to registered services."""

    def __init__(self, target: PackageTargetProtocol):
        self.target = target

    def loaded_repos(self) -> List[Repository]:
        """Get all loaded repositories, enabled or not."""
        return [
            Repository.from_general_data(src_id, self.target.source_general_data(src_id))
            for src_id in self.target.source_get_current(enabled_only=False)
        ]

    def service_repos(self, product_services: Sequence[ProductService]) -> List[Repository]:
        """Get repositories belonging to the given product services.

        Args:
            product_services: Services registered for the products

        Returns:
            Matching repositories in the target's enumeration order
        """
        repos = self.loaded_repos()

        service_names = {service.name for service in flatten_services(product_services)}
        logger.info(f"Added services: {sorted(service_names)}")

        selected = [repo for repo in repos if repo.service in service_names]
        logger.info(f"Service repositories: {[repo.as_dict() for repo in selected]}")
        return selected
