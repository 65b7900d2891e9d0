"""
Binding Registrar: the declaration / initialization / access protocol.

Every operation takes the Scope it acts on explicitly. There is no
process-wide scope; each emulated program owns its own root Scope.

Control flow mirrors a block being entered and run:
    1. Declaration phase: predeclare() / hoist() put names in the dead zone
    2. Initialization phase: initialize() supplies values
    3. Execution: read() / write() are checked against kind and state

declare() collapses phases 1 and 2 into one call for the common
``const x = 1`` / ``let y`` case.

All checks run before any mutation, so a failing call leaves the scope
exactly as it was.
"""

from typing import Any, Iterable, List, Set, Tuple, Union

from blockscope.bindings import policy_for
from blockscope.errors import (
    DuplicateDeclarationError,
    UninitializedAccessError,
    UnknownIdentifierError,
)
from blockscope.model import (
    UNDEFINED,
    BindingKind,
    BindingRecord,
    BindingState,
    Scope,
)


_MISSING = object()

Declaration = Union[str, Tuple[str, Union[BindingKind, str]]]


def _coerce_kind(kind: Union[BindingKind, str]) -> BindingKind:
    try:
        return BindingKind(kind)
    except ValueError:
        raise TypeError(f"Unsupported binding kind: {kind!r}") from None


def _lookup(scope: Scope, identifier: str, chained: bool) -> BindingRecord:
    record = scope.resolve(identifier) if chained else scope.resolve_local(identifier)
    if record is None:
        raise UnknownIdentifierError(identifier)
    return record


def predeclare(scope: Scope, identifier: str, kind: Union[BindingKind, str] = BindingKind.MUTABLE) -> BindingRecord:
    """
    Register an identifier in the dead zone.

    Until initialize() is called, every read or write of the identifier
    fails with UninitializedAccessError.

    Raises:
        DuplicateDeclarationError: If the scope already declares it
    """
    kind = _coerce_kind(kind)
    if scope.declares(identifier):
        raise DuplicateDeclarationError(identifier)
    record = BindingRecord(identifier=identifier, kind=kind)
    scope.bindings[identifier] = record
    return record


def hoist(scope: Scope, declarations: Iterable[Declaration]) -> List[BindingRecord]:
    """
    Run the declaration phase for a block.

    Each entry is either a bare identifier (mutable) or an
    ``(identifier, kind)`` pair. Duplicates are detected against the
    scope and within the batch before anything is registered.

    Returns:
        The new records, in declaration order

    Raises:
        DuplicateDeclarationError: On the first duplicate found; nothing
            from the batch is registered
    """
    pending: List[Tuple[str, BindingKind]] = []
    seen: Set[str] = set()
    for entry in declarations:
        if isinstance(entry, str):
            identifier, kind = entry, BindingKind.MUTABLE
        else:
            identifier, kind = entry
            kind = _coerce_kind(kind)
        if identifier in seen or scope.declares(identifier):
            raise DuplicateDeclarationError(identifier)
        seen.add(identifier)
        pending.append((identifier, kind))

    return [predeclare(scope, identifier, kind) for identifier, kind in pending]


def initialize(scope: Scope, identifier: str, value: Any = _MISSING) -> BindingRecord:
    """
    Move a predeclared binding out of the dead zone.

    A frozen binding needs a value; a mutable one defaults to UNDEFINED.

    Raises:
        UnknownIdentifierError: If the scope never declared it
        MissingInitializerError: If a frozen binding gets no value
        DuplicateDeclarationError: If it is already initialized
    """
    record = scope.resolve_local(identifier)
    if record is None:
        raise UnknownIdentifierError(identifier)
    if record.initialized:
        raise DuplicateDeclarationError(identifier)
    if value is _MISSING:
        value = policy_for(record.kind).default_value(identifier)
    record.value = value
    record.state = BindingState.INITIALIZED
    return record


def declare(scope: Scope, identifier: str, kind: Union[BindingKind, str], value: Any = _MISSING) -> BindingRecord:
    """
    Declare and initialize a binding in one step.

    Raises:
        MissingInitializerError: If kind is FROZEN and no value is given
        DuplicateDeclarationError: If the scope already declares it
    """
    kind = _coerce_kind(kind)
    if value is _MISSING:
        value = policy_for(kind).default_value(identifier)
    if scope.declares(identifier):
        raise DuplicateDeclarationError(identifier)
    record = BindingRecord(
        identifier=identifier,
        kind=kind,
        state=BindingState.INITIALIZED,
        value=value,
    )
    scope.bindings[identifier] = record
    return record


def declare_frozen(scope: Scope, identifier: str, value: Any = _MISSING) -> BindingRecord:
    """Declare an immutable binding. The value is required."""
    return declare(scope, identifier, BindingKind.FROZEN, value)


def declare_mutable(scope: Scope, identifier: str, value: Any = UNDEFINED) -> BindingRecord:
    """Declare a reassignable binding, UNDEFINED unless a value is given."""
    return declare(scope, identifier, BindingKind.MUTABLE, value)


def read(scope: Scope, identifier: str, *, chained: bool = False) -> Any:
    """
    Return the current value of a binding.

    By default only the scope's own bindings are consulted. With
    ``chained=True`` the parent chain is walked to the nearest declaration.

    Raises:
        UnknownIdentifierError: If no consulted scope declares it
        UninitializedAccessError: If the binding is in the dead zone
    """
    record = _lookup(scope, identifier, chained)
    if record.in_dead_zone:
        raise UninitializedAccessError(identifier)
    return record.value


def write(scope: Scope, identifier: str, value: Any, *, chained: bool = False) -> None:
    """
    Assign a new value to a binding.

    Raises:
        UnknownIdentifierError: If no consulted scope declares it
        UninitializedAccessError: If the binding is in the dead zone
        ImmutableAssignmentError: If the binding is frozen
    """
    record = _lookup(scope, identifier, chained)
    if record.in_dead_zone:
        raise UninitializedAccessError(identifier)
    policy_for(record.kind).assign(record, value)


__all__ = [
    "predeclare",
    "hoist",
    "initialize",
    "declare",
    "declare_frozen",
    "declare_mutable",
    "read",
    "write",
]
