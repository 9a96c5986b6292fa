"""
typeserial: shared boolean (and error) values for serializers

Serializers that must keep "boolean" apart from "integer" through a
decode/encode round-trip use these objects as leaf values in their data
trees:

    true(), false()     canonical Boolean singletons
    is_bool(v)          type-based predicate
    to_bool(v)          truthiness -> canonical singleton
    Boolean(x)          independent (non-singleton) instance
    error(), is_error   "undefined/error" sentinel

ARCHITECTURAL GUARANTEE:
------------------------
The core package contains ZERO knowledge of:
    - JSON, YAML or binary wire formats
    - Parsing or schema validation
    - I/O of any kind

typeserial.adapters is the only module that touches json and PyYAML,
and only to hand boolean objects through them unchanged.

On import, the package negotiates the shared boolean type name with any
library that claimed it earlier (see typeserial.compat). Set
TYPESERIAL_PASSIVE=1 to skip that, TYPESERIAL_VERBOSE=1 to be told about
every capability left to someone else.
"""

from typeserial.boolean import (
    Boolean,
    false,
    is_bool,
    is_false,
    is_true,
    shared_type,
    shared_type_name,
    to_bool,
    true,
)
from typeserial.compat import CapabilityConflictWarning, negotiate
from typeserial.config import Settings, load_settings
from typeserial.error_value import Error, SerialiserError, error, is_error
from typeserial.registry import CapabilityRegistry, default_registry

__version__ = "0.1.0"

settings = load_settings()
negotiation = negotiate(default_registry, settings)

__all__ = [
    "Boolean",
    "CapabilityConflictWarning",
    "CapabilityRegistry",
    "Error",
    "SerialiserError",
    "Settings",
    "default_registry",
    "error",
    "false",
    "is_bool",
    "is_error",
    "is_false",
    "is_true",
    "load_settings",
    "negotiate",
    "negotiation",
    "settings",
    "shared_type",
    "shared_type_name",
    "to_bool",
    "true",
]
