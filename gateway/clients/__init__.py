"""Clients for the backend microservices."""

from .base import BackendServiceError, ServiceClient
from .resolver import BackendResolver

__all__ = ["BackendResolver", "BackendServiceError", "ServiceClient"]
