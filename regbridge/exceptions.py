"""Errors raised by the registration workflow."""

from typing import Optional


class RegistrationError(RuntimeError):
    """Base class for registration failures."""


class PkgError(RegistrationError):
    """The package management target rejected a repository request."""


class ServiceError(RegistrationError):
    """Adding, saving or refreshing a named service failed.

    Args:
        template: Message with a single ``%s`` placeholder for the service
        service_name: Name of the failing service
    """

    def __init__(self, template: str, service_name: Optional[str] = None):
        self.template = template
        self.service_name = service_name
        message = template % service_name if service_name is not None else template
        super().__init__(message)
