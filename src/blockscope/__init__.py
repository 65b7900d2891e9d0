"""
Block-scoped binding emulation.

Models the runtime binding rules of block-scoped declarations in modern
scripting languages: frozen (``const``-like) and mutable (``let``-like)
bindings, the temporal dead zone, one declaration per name per scope,
and assignment protection for frozen bindings.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Source text, tokens or syntax trees
    - Expression evaluation
    - Any global or process-wide scope

Every operation acts on a Scope the caller constructed and passed in.
"""

from blockscope.errors import (
    BindingError,
    DuplicateDeclarationError,
    ImmutableAssignmentError,
    MissingInitializerError,
    UninitializedAccessError,
    UnknownIdentifierError,
)
from blockscope.model import UNDEFINED, BindingKind, BindingRecord, BindingState, Scope
from blockscope.bindings import FrozenBinding, MutableBinding, policy_for
from blockscope.registrar import (
    declare,
    declare_frozen,
    declare_mutable,
    hoist,
    initialize,
    predeclare,
    read,
    write,
)

__version__ = "0.1.0"

__all__ = [
    "BindingError",
    "DuplicateDeclarationError",
    "ImmutableAssignmentError",
    "MissingInitializerError",
    "UninitializedAccessError",
    "UnknownIdentifierError",
    "UNDEFINED",
    "BindingKind",
    "BindingRecord",
    "BindingState",
    "Scope",
    "FrozenBinding",
    "MutableBinding",
    "policy_for",
    "declare",
    "declare_frozen",
    "declare_mutable",
    "hoist",
    "initialize",
    "predeclare",
    "read",
    "write",
]
