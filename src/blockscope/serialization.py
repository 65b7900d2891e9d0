"""
Serialization helpers for binding objects (BindingRecord, Scope).

Provides JSON/YAML snapshots via an intermediate dict representation.
Restoring goes through the registrar so a restored scope obeys the same
declaration rules as one built by hand.

Values outside the plain JSON types, at any nesting depth, are stored as
their repr with a UserWarning; such values do not round-trip. Non-string
dict keys are stringified with a warning, and tuples become lists.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict, List

import yaml

from blockscope.model import UNDEFINED, BindingKind, BindingRecord, BindingState, Scope
from blockscope import registrar


_PLAIN_TYPES = (type(None), bool, int, float, str, list, tuple, dict)


def _to_plain(identifier: str, value: Any) -> Any:
    """Copy a value into plain JSON/YAML types, walking lists and dicts."""
    if value is UNDEFINED or type(value) not in _PLAIN_TYPES:
        warnings.warn(
            f"Value of {identifier} ({type(value).__name__}) is not serializable; storing repr",
            UserWarning,
        )
        return repr(value)
    if isinstance(value, (list, tuple)):
        # Tuples come back as lists.
        return [_to_plain(identifier, item) for item in value]
    if isinstance(value, dict):
        out = {}
        for key, item in value.items():
            if type(key) is not str:
                warnings.warn(
                    f"Key {key!r} in value of {identifier} is not a string; storing str(key)",
                    UserWarning,
                )
                key = str(key)
            out[key] = _to_plain(identifier, item)
        return out
    return value


def value_to_dict(identifier: str, value: Any) -> Dict[str, Any]:
    if value is UNDEFINED:
        return {"value": None, "undefined": True}
    return {"value": _to_plain(identifier, value), "undefined": False}


def value_from_dict(d: Dict[str, Any]) -> Any:
    if d.get("undefined"):
        return UNDEFINED
    return d.get("value")


def record_to_dict(r: BindingRecord) -> Dict[str, Any]:
    d = {"identifier": r.identifier, "kind": r.kind.value, "state": r.state.value}
    d.update(value_to_dict(r.identifier, r.value))
    return d


def record_from_dict(d: Dict[str, Any]) -> BindingRecord:
    return BindingRecord(
        identifier=d["identifier"],
        kind=BindingKind(d["kind"]),
        state=BindingState(d.get("state", BindingState.INITIALIZED.value)),
        value=value_from_dict(d),
    )


def scope_to_dict(s: Scope) -> Dict[str, Any]:
    return {
        "name": s.name,
        "bindings": [record_to_dict(r) for r in s.bindings.values()],
    }


def scope_from_dict(d: Dict[str, Any], parent: Scope | None = None) -> Scope:
    s = Scope(name=d.get("name"), parent=parent)
    for entry in d.get("bindings", []):
        r = record_from_dict(entry)
        if r.in_dead_zone:
            registrar.predeclare(s, r.identifier, r.kind)
        else:
            registrar.declare(s, r.identifier, r.kind, r.value)
    return s


def scope_chain_to_dict(s: Scope) -> Dict[str, Any]:
    """Snapshot a scope together with every reachable ancestor."""
    d = scope_to_dict(s)
    d["ancestors"] = [scope_to_dict(a) for a in s.ancestors()]
    return d


def scope_chain_from_dict(d: Dict[str, Any]) -> List[Scope]:
    """
    Rebuild a chain produced by scope_chain_to_dict.

    Returns:
        Scopes ordered root first, innermost last. The caller must keep
        the list alive: parent links are weak.
    """
    chain: List[Scope] = []
    parent = None
    for entry in reversed(d.get("ancestors", [])):
        parent = scope_from_dict(entry, parent=parent)
        chain.append(parent)
    chain.append(scope_from_dict(d, parent=parent))
    return chain


def scope_to_json(s: Scope) -> str:
    return json.dumps(scope_to_dict(s), sort_keys=True)


def scope_from_json(s: str) -> Scope:
    d = json.loads(s)
    return scope_from_dict(d)


def scope_to_yaml(s: Scope) -> str:
    return yaml.safe_dump(scope_to_dict(s))


def scope_from_yaml(s: str) -> Scope:
    d = yaml.safe_load(s)
    return scope_from_dict(d)
