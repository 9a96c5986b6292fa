"""
Compatibility negotiation for the shared boolean type.

Several libraries may each want to define "the" boolean type under the
agreed shared name. At load time this module walks through every
capability ``Boolean`` provides and claims it in a registry only if
nobody has claimed it before:

    capability         installed implementation
    -----------------  ------------------------------
    "type"             the Boolean class
    "__bool__" ...     Boolean's coercion functions

If another library already bound its own class to the shared name, any
operator we end up owning is attached to that class, but only where the
class does not define it already. Nothing is ever overwritten.

Passive mode (Settings.passive) claims nothing at all.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from typeserial.boolean import Boolean
from typeserial.config import Settings
from typeserial.registry import TYPE_CAPABILITY, CapabilityRegistry


OWNER = "typeserial"

OPERATOR_CAPABILITIES = (
    "__bool__",
    "__int__",
    "__index__",
    "__float__",
    "__str__",
    "__eq__",
    "__hash__",
)


class CapabilityConflictWarning(UserWarning):
    """A capability was left to an earlier definition."""
    pass


@dataclass
class NegotiationReport:
    """
    Outcome of one negotiation run.

    Properties:
        passive: True if the run claimed nothing by configuration
        installed: Capability ids claimed by this run
        skipped: Capability id -> owner, for claims left in place
        attached: Operators attached to a foreign shared type
        unattachable: Operators claimed but refused by an immutable shared type
    """

    passive: bool = False
    installed: List[str] = field(default_factory=list)
    skipped: Dict[str, str] = field(default_factory=dict)
    attached: List[str] = field(default_factory=list)
    unattachable: List[str] = field(default_factory=list)


def _defines(cls: type, name: str) -> bool:
    """True if ``cls`` (not counting ``object``) defines ``name``."""
    return any(name in vars(base) for base in cls.__mro__ if base is not object)


def _claim(
    registry: CapabilityRegistry,
    capability_id: str,
    implementation: object,
    owner: str,
    settings: Settings,
    report: NegotiationReport,
) -> bool:
    if registry.register_if_absent(capability_id, implementation, owner):
        report.installed.append(capability_id)
        return True

    holder = registry.owner_of(capability_id) or ""
    report.skipped[capability_id] = holder
    # Re-running our own negotiation is not a conflict
    if settings.verbose and holder != owner:
        warnings.warn(
            f"{registry.type_name}: capability {capability_id!r} already defined "
            f"by {holder or 'another library'}, leaving it in place",
            CapabilityConflictWarning,
            stacklevel=3,
        )
    return False


def negotiate(
    registry: CapabilityRegistry,
    settings: Optional[Settings] = None,
    owner: str = OWNER,
) -> NegotiationReport:
    """
    Claim every unclaimed Boolean capability in ``registry``.

    Args:
        registry: Registry to negotiate against
        settings: Passive/verbose flags (defaults to Settings())
        owner: Name recorded for the claims made here

    Returns:
        NegotiationReport describing what was installed and skipped
    """
    if settings is None:
        settings = Settings()
    report = NegotiationReport(passive=settings.passive)
    if settings.passive:
        return report

    _claim(registry, TYPE_CAPABILITY, Boolean, owner, settings, report)
    shared = registry.shared_type()

    for name in OPERATOR_CAPABILITIES:
        implementation = vars(Boolean)[name]
        if not _claim(registry, name, implementation, owner, settings, report):
            continue
        if shared is None or shared is Boolean or _defines(shared, name):
            continue
        try:
            setattr(shared, name, implementation)
        except (TypeError, AttributeError):
            # Immutable or extension type: accept it as it is
            report.unattachable.append(name)
            if settings.verbose:
                warnings.warn(
                    f"{registry.type_name}: cannot attach {name!r} to "
                    f"{shared.__qualname__}, leaving the type as it is",
                    CapabilityConflictWarning,
                    stacklevel=2,
                )
            continue
        report.attached.append(name)

    return report
