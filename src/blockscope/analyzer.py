"""
Scope Analyzer: read-only diagnostics over a scope and its ancestors.

Reports:
    - Binding inventory by kind
    - Names still in the dead zone
    - Mutable bindings that were never given a value
    - Local names shadowing an ancestor's binding

IMPORTANT: This module never declares, initializes or writes anything.
It only produces reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from blockscope.model import UNDEFINED, BindingKind, Scope


@dataclass
class ScopeReport:
    """Analysis report for one scope."""

    scope_name: Optional[str]
    depth: int = 0
    total_bindings: int = 0
    frozen_bindings: int = 0
    mutable_bindings: int = 0

    dead_zone: List[str] = field(default_factory=list)
    undefined_mutables: List[str] = field(default_factory=list)
    shadowed: List[str] = field(default_factory=list)

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)


def analyze_scope(scope: Scope) -> ScopeReport:
    """
    Inventory a scope's own bindings.

    Ancestors are consulted only to detect shadowing.
    """
    report = ScopeReport(scope_name=scope.name, depth=scope.depth)
    report.total_bindings = len(scope)
    ancestors = list(scope.ancestors())

    for identifier, record in scope.bindings.items():
        if record.kind is BindingKind.FROZEN:
            report.frozen_bindings += 1
        else:
            report.mutable_bindings += 1

        if record.in_dead_zone:
            report.dead_zone.append(identifier)
            report.add_warning(f"'{identifier}' is declared but never initialized")
        elif record.kind is BindingKind.MUTABLE and record.value is UNDEFINED:
            report.undefined_mutables.append(identifier)

        for ancestor in ancestors:
            if ancestor.declares(identifier):
                report.shadowed.append(identifier)
                label = ancestor.name or "<anonymous>"
                report.add_warning(f"'{identifier}' shadows a binding in scope {label}")
                break

    return report


def format_report(report: ScopeReport) -> str:
    """Render a report as plain text."""
    lines = [
        f"Scope: {report.scope_name or '<anonymous>'} (depth {report.depth})",
        f"  Bindings: {report.total_bindings} "
        f"({report.frozen_bindings} frozen, {report.mutable_bindings} mutable)",
    ]
    if report.dead_zone:
        lines.append(f"  Dead zone: {', '.join(report.dead_zone)}")
    if report.undefined_mutables:
        lines.append(f"  Undefined: {', '.join(report.undefined_mutables)}")
    if report.shadowed:
        lines.append(f"  Shadowed: {', '.join(report.shadowed)}")
    for w in report.warnings:
        lines.append(f"  WARNING: {w}")
    return "\n".join(lines)
