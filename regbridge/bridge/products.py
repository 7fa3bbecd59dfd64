"""Base product discovery."""

from typing import Any, Dict, List

from ..common.logger import get_logger
from ..target.base import InstallMode, PackageTargetProtocol, Product

logger = get_logger("products")


class ProductDiscovery:
    """Find the base product to register.

    On a running system the base product is installed and typed ``base``.
    During installation or upgrade the type is not set yet, so the newly
    selected product from the first repository is used instead.
    """

    def __init__(self, target: PackageTargetProtocol, mode: InstallMode):
        self.target = target
        self.mode = mode

    def _is_base_product(self, resolvable: Dict[str, Any]) -> bool:
        if self.mode.normal:
            return resolvable.get("status") == "installed" and resolvable.get("type") == "base"
        return resolvable.get("status") == "selected" and resolvable.get("source") == 0

    def base_products(self) -> List[Product]:
        """Get base products to register.

        Returns:
            Matching products, usually zero or one
        """
        resolvables = self.target.resolvable_properties("", "product", "")
        products = [
            Product(name=p.get("name", ""), arch=p.get("arch", ""), version=p.get("version", ""))
            for p in resolvables
            if self._is_base_product(p)
        ]

        logger.info(f"Products to register: {[p.to_dict() for p in products]}")
        return products
