"""
Binding policies.

FrozenBinding and MutableBinding are stateless policy objects. They hold
no per-binding data; the registrar selects one by BindingKind and asks
it how to default a missing initializer and how to handle a write.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from blockscope.errors import ImmutableAssignmentError, MissingInitializerError
from blockscope.model import UNDEFINED, BindingKind, BindingRecord


class BindingPolicy(ABC):
    """Root of the policy hierarchy. Subclasses decide defaults and writes."""

    kind: BindingKind
    requires_initializer: bool = False

    @abstractmethod
    def default_value(self, identifier: str) -> Any:
        """Value used when a declaration supplies no initializer."""

    @abstractmethod
    def assign(self, record: BindingRecord, value: Any) -> None:
        """Apply a write to an initialized record."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class FrozenBinding(BindingPolicy):
    """
    Policy for immutable bindings.

    A value is required at declaration time, and every later write fails,
    even one that would store an equal value.
    """

    kind = BindingKind.FROZEN
    requires_initializer = True

    def default_value(self, identifier: str) -> Any:
        raise MissingInitializerError(identifier)

    def assign(self, record: BindingRecord, value: Any) -> None:
        raise ImmutableAssignmentError(record.identifier)


class MutableBinding(BindingPolicy):
    """Policy for reassignable bindings. Missing initializers become UNDEFINED."""

    kind = BindingKind.MUTABLE

    def default_value(self, identifier: str) -> Any:
        return UNDEFINED

    def assign(self, record: BindingRecord, value: Any) -> None:
        record.value = value


FROZEN = FrozenBinding()
MUTABLE = MutableBinding()

_POLICIES: Dict[BindingKind, BindingPolicy] = {
    BindingKind.FROZEN: FROZEN,
    BindingKind.MUTABLE: MUTABLE,
}


def policy_for(kind: BindingKind) -> BindingPolicy:
    """Return the policy object for a BindingKind."""
    try:
        return _POLICIES[kind]
    except KeyError:
        raise TypeError(f"Unsupported binding kind: {kind!r}") from None


__all__ = [
    "BindingPolicy",
    "FrozenBinding",
    "MutableBinding",
    "FROZEN",
    "MUTABLE",
    "policy_for",
]
