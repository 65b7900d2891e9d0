"""
Core Binding Model Objects

Defines the data structures that hold declared names:
    - BindingKind (frozen vs mutable)
    - BindingState (dead zone vs initialized)
    - BindingRecord (one declared identifier)
    - Scope (ordered identifier map chained to an enclosing scope)

ARCHITECTURAL RULE:
    These objects hold state only.
    Declaration, initialization and access checks live in the registrar.
    Nothing here raises binding errors.
"""

import weakref
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, Optional


class _Undefined:
    """Type of the UNDEFINED sentinel."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Undefined, ())


UNDEFINED = _Undefined()
"""The value held by a mutable binding declared without an initializer."""


class BindingKind(Enum):
    """Whether a binding accepts writes after initialization."""

    FROZEN = "frozen"
    MUTABLE = "mutable"


class BindingState(Enum):
    """
    Lifecycle of a binding.

    UNINITIALIZED --initialize--> INITIALIZED

    The transition is one-way and happens exactly once.
    """

    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"


@dataclass
class BindingRecord:
    """
    One declared identifier.

    Properties:
        identifier: The declared name
        kind: BindingKind of the declaration
        state: Current BindingState
        value: Current value (UNDEFINED while in the dead zone)

    INVARIANTS:
        - UNINITIALIZED records reject every read and write
        - FROZEN + INITIALIZED records reject every write
    """

    identifier: str
    kind: BindingKind
    state: BindingState = BindingState.UNINITIALIZED
    value: Any = UNDEFINED

    @property
    def initialized(self) -> bool:
        return self.state is BindingState.INITIALIZED

    @property
    def in_dead_zone(self) -> bool:
        return self.state is BindingState.UNINITIALIZED


class Scope:
    """
    A lexical block: an ordered map from identifier to BindingRecord.

    The parent link is a weak reference. A scope traverses its parent
    but never keeps it alive, so once the enclosing block is gone and
    nothing else holds it, ``parent`` returns None.

    Properties:
        bindings: Identifier -> BindingRecord, in declaration order
        parent: Enclosing Scope or None
        name: Optional label used in reports and serialization

    INVARIANTS:
        - An identifier appears at most once in ``bindings``
        - Shadowing an identifier held by an ancestor is allowed
        - The parent link never changes after construction
    """

    def __init__(self, name: Optional[str] = None, parent: Optional["Scope"] = None):
        self.name = name
        self.bindings: Dict[str, BindingRecord] = {}
        self._parent_ref = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self) -> Optional["Scope"]:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def depth(self) -> int:
        """Number of reachable ancestors."""
        return sum(1 for _ in self.ancestors())

    def ancestors(self) -> Iterator["Scope"]:
        """Yield the parent, then the grandparent, up to the root."""
        cur = self.parent
        while cur is not None:
            yield cur
            cur = cur.parent

    def create_child(self, name: Optional[str] = None) -> "Scope":
        """Open a nested block whose parent is this scope."""
        return Scope(name=name, parent=self)

    def resolve_local(self, identifier: str) -> Optional[BindingRecord]:
        """
        Look up an identifier in this scope's own bindings.

        Returns:
            BindingRecord or None if not declared here
        """
        return self.bindings.get(identifier)

    def resolve(self, identifier: str) -> Optional[BindingRecord]:
        """
        Look up an identifier here, then in each ancestor in turn.

        Returns:
            The nearest BindingRecord or None if no scope declares it
        """
        cur: Optional[Scope] = self
        while cur is not None:
            record = cur.bindings.get(identifier)
            if record is not None:
                return record
            cur = cur.parent
        return None

    def declares(self, identifier: str) -> bool:
        return identifier in self.bindings

    def __contains__(self, identifier: str) -> bool:
        return self.declares(identifier)

    def __iter__(self) -> Iterator[str]:
        return iter(self.bindings)

    def __len__(self) -> int:
        return len(self.bindings)

    def __repr__(self) -> str:
        label = self.name or "<anonymous>"
        return f"Scope({label!r}, bindings={list(self.bindings)!r}, depth={self.depth})"
