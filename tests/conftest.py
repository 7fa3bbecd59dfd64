"""Pytest configuration and shared fixtures."""

from typing import Any, Dict, List, Optional, Set

import pytest

from regbridge.target.base import PackageTarget, ProductService, Service


class FakePackageTarget(PackageTarget):
    """Package target recording every call in order.

    ``fail`` holds ``(operation, service_name)`` pairs that return False;
    a service name of None matches any call of that operation.
    """

    def __init__(
        self,
        resolvables: Optional[List[Dict[str, Any]]] = None,
        repos: Optional[Dict[int, Dict[str, Any]]] = None,
    ):
        self.resolvables = resolvables or []
        self.repos = repos or {}
        self.calls: List[tuple] = []
        self.fail: Set[tuple] = set()

    def _ok(self, operation: str, name: Optional[str] = None) -> bool:
        return (operation, name) not in self.fail and (operation, None) not in self.fail

    def target_initialize(self, root):
        self.calls.append(("target_initialize", root))
        return self._ok("target_initialize")

    def target_load(self):
        self.calls.append(("target_load",))
        return self._ok("target_load")

    def resolvable_properties(self, name, kind, version):
        self.calls.append(("resolvable_properties", name, kind, version))
        return list(self.resolvables)

    def source_save_all(self):
        self.calls.append(("source_save_all",))
        return self._ok("source_save_all")

    def source_get_current(self, enabled_only=True):
        self.calls.append(("source_get_current", enabled_only))
        return list(self.repos.keys())

    def source_general_data(self, src_id):
        self.calls.append(("source_general_data", src_id))
        return dict(self.repos[src_id])

    def service_add(self, name, url):
        self.calls.append(("service_add", name, url))
        return self._ok("service_add", name)

    def service_save(self, name):
        self.calls.append(("service_save", name))
        return self._ok("service_save", name)

    def service_refresh(self, name):
        self.calls.append(("service_refresh", name))
        return self._ok("service_refresh", name)

    def operations(self) -> List[str]:
        """Names of the recorded calls."""
        return [call[0] for call in self.calls]


@pytest.fixture
def fake_target():
    """Empty recording package target."""
    return FakePackageTarget()


@pytest.fixture
def make_target():
    """Factory for recording package targets with preset state."""
    return FakePackageTarget


@pytest.fixture
def sample_config():
    """Sample configuration dictionary for an upgrade mounted at /mnt."""
    return {
        "zypp_dir": "/mnt/etc/zypp",
        "credentials_dir": "/mnt/etc/zypp/credentials.d",
        "destdir": "/mnt",
        "mount_command": "mount",
        "logging": {
            "level": "DEBUG",
            "log_dir": "/var/log/regbridge",
            "file_logging": False,
        },
    }


@pytest.fixture
def product_services():
    """Two products with three services in total."""
    return [
        ProductService(
            services=[
                Service(
                    name="SLES_12_x86_64",
                    url="https://scc.example.com/access/services/1?credentials=SLES_12_x86_64",
                ),
                Service(name="SLES_12_Debuginfo", url="https://scc.example.com/access/services/2"),
            ]
        ),
        ProductService(
            services=[
                Service(
                    name="SDK_12_x86_64",
                    url="https://scc.example.com/access/services/3?credentials=SDK_12_x86_64",
                ),
            ]
        ),
    ]
