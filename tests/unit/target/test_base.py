"""Tests for package target base classes."""

import pytest

from regbridge.exceptions import ServiceError
from regbridge.target.base import (
    InstallMode,
    PackageTarget,
    ProductService,
    Repository,
    Service,
    flatten_services,
)


class TestFlattenServices:
    """Tests for flatten_services."""

    def test_product_then_service_order(self):
        """Test services keep product order, then service order."""
        products = [
            ProductService(services=[Service("a", "http://a"), Service("b", "http://b")]),
            ProductService(),
            ProductService(services=[Service("c", "http://c")]),
        ]

        assert [s.name for s in flatten_services(products)] == ["a", "b", "c"]


class TestRepository:
    """Tests for Repository."""

    def test_from_general_data(self):
        """Test building a repository from general data."""
        repo = Repository.from_general_data(4, {"alias": "r", "service": "svc"})

        assert repo.src_id == 4
        assert repo.service == "svc"
        assert repo.as_dict() == {"alias": "r", "service": "svc", "SrcId": 4}

    @pytest.mark.parametrize("data", [{"alias": "r"}, {"alias": "r", "service": ""}])
    def test_without_service(self, data):
        """Test repositories not owned by a service."""
        assert Repository.from_general_data(0, data).service is None


class TestInstallMode:
    """Tests for InstallMode."""

    def test_defaults_to_running_system(self):
        """Test the default mode is a running system."""
        mode = InstallMode()

        assert mode.normal
        assert not mode.installation
        assert not mode.update

    @pytest.mark.parametrize(
        "installation, update", [(True, False), (False, True), (True, True)]
    )
    def test_installer_phase_is_not_normal(self, installation, update):
        """Test any installer phase excludes normal mode."""
        assert not InstallMode(installation=installation, update=update).normal

    def test_normal_is_derived(self):
        """Test normal mode cannot be passed explicitly."""
        with pytest.raises(TypeError):
            InstallMode(installation=True, normal=True)


class TestPackageTarget:
    """Tests for the abstract target."""

    def test_cannot_instantiate(self):
        """Test the abstract target requires an implementation."""
        with pytest.raises(TypeError):
            PackageTarget()


class TestServiceError:
    """Tests for ServiceError."""

    def test_message_includes_service(self):
        """Test the message is formatted with the service name."""
        error = ServiceError("Adding service '%s' failed.", "SLES_12")

        assert str(error) == "Adding service 'SLES_12' failed."
        assert error.service_name == "SLES_12"
        assert isinstance(error, RuntimeError)
