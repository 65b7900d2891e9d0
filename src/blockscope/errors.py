"""
Binding protocol errors.

Every error here signals misuse of the declaration protocol by the
emulated program, not a transient failure. They are raised at the point
of violation and are never retried or recovered internally.

Messages follow the wording scripting engines use for the same mistakes.
"""


class BindingError(Exception):
    """Base class for all binding protocol violations."""

    def __init__(self, identifier: str, message: str):
        super().__init__(message)
        self.identifier = identifier


class DuplicateDeclarationError(BindingError):
    """Raised when an identifier is declared twice in the same scope."""

    def __init__(self, identifier: str):
        super().__init__(identifier, f"Identifier '{identifier}' has already been declared")


class UninitializedAccessError(BindingError, NameError):
    """Raised when a binding is read or written while in the dead zone."""

    def __init__(self, identifier: str):
        super().__init__(identifier, f"Cannot access '{identifier}' before initialization")


class MissingInitializerError(BindingError):
    """Raised when a frozen binding is declared without a value."""

    def __init__(self, identifier: str):
        super().__init__(identifier, f"Missing initializer in frozen declaration of '{identifier}'")


class ImmutableAssignmentError(BindingError, TypeError):
    """Raised on any write to a frozen binding."""

    def __init__(self, identifier: str):
        super().__init__(identifier, f"Assignment to constant variable '{identifier}'")


class UnknownIdentifierError(BindingError, NameError):
    """Raised when an identifier was never declared."""

    def __init__(self, identifier: str):
        super().__init__(identifier, f"{identifier} is not defined")


__all__ = [
    "BindingError",
    "DuplicateDeclarationError",
    "UninitializedAccessError",
    "MissingInitializerError",
    "ImmutableAssignmentError",
    "UnknownIdentifierError",
]
