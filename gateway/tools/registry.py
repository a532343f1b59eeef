"""Two-phase tool registry: a builder collects capabilities, seal() freezes them."""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping

import structlog

from .errors import DuplicateCapabilityError, NotFoundError
from .protocol import Capability

logger = structlog.get_logger(__name__)


class ToolRegistry:
    """
    Sealed, read-only registry of capabilities.

    Only produced by RegistryBuilder.seal(); safe to share between any
    number of concurrent dispatches without locking.
    """

    def __init__(self, capabilities: Mapping[str, Capability]) -> None:
        self._capabilities: Mapping[str, Capability] = MappingProxyType(dict(capabilities))

    def lookup(self, name: str) -> Capability:
        """Return a capability or raise NotFoundError."""
        try:
            return self._capabilities[name]
        except KeyError:
            raise NotFoundError(name) from None

    def list_all(self) -> List[Capability]:
        return [self._capabilities[name] for name in sorted(self._capabilities)]

    def names(self) -> List[str]:
        return sorted(self._capabilities)

    def __contains__(self, name: object) -> bool:
        return name in self._capabilities

    def __len__(self) -> int:
        return len(self._capabilities)

    def __iter__(self) -> Iterator[Capability]:
        return iter(self.list_all())


class RegistryBuilder:
    """Collects capabilities during startup."""

    def __init__(self) -> None:
        self._capabilities: Dict[str, Capability] = {}
        self._sealed = False

    def register(self, capability: Capability) -> None:
        """Register a capability, refusing to overwrite an existing name."""
        if self._sealed:
            raise RuntimeError("registry is sealed; no further tools can be registered")
        if capability.name in self._capabilities:
            raise DuplicateCapabilityError(capability.name)
        self._capabilities[capability.name] = capability
        logger.debug(
            "Registered tool",
            tool=capability.name,
            parameters=list(capability.parameters.properties),
        )

    def register_all(self, capabilities: List[Capability]) -> None:
        for capability in capabilities:
            self.register(capability)

    def seal(self) -> ToolRegistry:
        """Finish registration and return the immutable registry."""
        if self._sealed:
            raise RuntimeError("registry is already sealed")
        self._sealed = True
        registry = ToolRegistry(self._capabilities)
        logger.info("Tool registry sealed", tools=len(registry))
        return registry
