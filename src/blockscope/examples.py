"""
Example program builder.

Reproduces the classic block-scoping walkthrough:

    const PI = 3.14;
    let count = 0;
    count = 1;
    let pending;          // hoisted, initialized later in the block
    {
        let count = 10;   // shadows the outer count
        const label = "inner";
    }

The declaration of ``pending`` is hoisted but its initializer is
optionally left unrun, so the returned scope still holds a dead-zone name.
"""
from typing import Tuple

from blockscope.model import BindingKind, Scope
from blockscope.registrar import declare_frozen, declare_mutable, hoist, initialize, write


def build_example_program(initialize_pending: bool = False) -> Tuple[Scope, Scope]:
    """
    Returns:
        (root, block) scopes. Keep ``root`` referenced while using
        ``block``; the parent link is weak.
    """
    root = Scope(name="program")

    hoist(root, [("pending", BindingKind.MUTABLE)])
    declare_frozen(root, "PI", 3.14)
    declare_mutable(root, "count", 0)
    write(root, "count", 1)
    if initialize_pending:
        initialize(root, "pending", "ready")

    block = root.create_child(name="block")
    declare_mutable(block, "count", 10)
    declare_frozen(block, "label", "inner")

    return root, block
