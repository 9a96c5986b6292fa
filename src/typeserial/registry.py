"""
Capability Registry

A capability is one unit of shared boolean-type behaviour: the binding of
the shared type name itself, or a single coercion/operator such as
``__int__`` or ``__str__``.

Independent libraries that agree on a shared type name cooperate through a
registry: the first one to claim a capability owns it for the lifetime of
the registry, everybody else leaves it alone.

ARCHITECTURAL RULE:
    The registry NEVER overwrites.
    There is no "replace" or "unregister" operation.

    Per capability the only transition is:
        unclaimed -> claimed (terminal)

Tests (and embedders that want isolation) create their own
``CapabilityRegistry``; ``default_registry`` is the process-wide one.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional


# Capability id for the shared type binding.
TYPE_CAPABILITY = "type"

# Identifier cooperating libraries agree on for the canonical boolean type.
SHARED_TYPE_NAME = "JSON::PP::Boolean"


@dataclass(frozen=True)
class Capability:
    """
    A claimed capability.

    Properties:
        id: Capability identifier (e.g. "type", "__int__")
        implementation: The installed object (class or function)
        owner: Name of the library that claimed it
    """

    id: str
    implementation: Any
    owner: str = ""


class CapabilityRegistry:
    """
    Check-then-install table of capabilities for one shared type name.

    Not thread-safe: claims are expected to happen during (serialised)
    module import.
    """

    def __init__(self, type_name: str = SHARED_TYPE_NAME):
        self.type_name = type_name
        self._capabilities: Dict[str, Capability] = {}

    def register_if_absent(self, capability_id: str, implementation: Any, owner: str = "") -> bool:
        """
        Claim ``capability_id`` for ``implementation`` unless already claimed.

        Returns:
            True if this call installed the capability, False if an earlier
            claim was left in place.

        Raises:
            ValueError: If capability_id is empty
        """
        if not capability_id:
            raise ValueError("capability_id must be a non-empty string")
        if capability_id in self._capabilities:
            return False
        self._capabilities[capability_id] = Capability(
            id=capability_id,
            implementation=implementation,
            owner=owner,
        )
        return True

    def lookup(self, capability_id: str, default: Any = None) -> Any:
        """Return the installed implementation, or ``default``."""
        capability = self._capabilities.get(capability_id)
        if capability is None:
            return default
        return capability.implementation

    def owner_of(self, capability_id: str) -> Optional[str]:
        capability = self._capabilities.get(capability_id)
        return capability.owner if capability is not None else None

    def shared_type(self) -> Optional[type]:
        """Class bound to the shared type name, if a class was claimed."""
        bound = self.lookup(TYPE_CAPABILITY)
        return bound if isinstance(bound, type) else None

    def claimed(self) -> List[str]:
        """Claimed capability ids, in claim order."""
        return list(self._capabilities)

    def __contains__(self, capability_id: object) -> bool:
        return capability_id in self._capabilities

    def __iter__(self) -> Iterator[Capability]:
        return iter(list(self._capabilities.values()))

    def __len__(self) -> int:
        return len(self._capabilities)

    def __repr__(self) -> str:
        return f"CapabilityRegistry(type_name={self.type_name!r}, claimed={self.claimed()!r})"


default_registry = CapabilityRegistry()
