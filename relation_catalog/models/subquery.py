"""
Qualifier-rename wrapper.

This module defines the Subquery class, which re-qualifies the output of a
plan under a new name without altering the plan itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Subquery:
    """A plan re-qualified under an alias.

    Catalog lookups wrap the stored plan in a Subquery named after the
    table, and wrap it again when the caller supplied an alias. The outermost
    wrapper determines the qualifier seen by attribute resolution.

    Attributes:
        alias: The qualifier attached to the plan's output.
        child: The wrapped plan (any object, or another Subquery).

    Example:
        >>> inner = Subquery(alias="orders", child="plan")
        >>> outer = Subquery(alias="o", child=inner)
        >>> outer.qualifier
        'o'
        >>> outer.unwrap()
        'plan'
    """

    alias: str
    child: Any

    def __post_init__(self) -> None:
        """Validate that the alias is not empty."""
        if not self.alias:
            raise ValueError("alias cannot be empty")

    @property
    def qualifier(self) -> str:
        """Return the qualifier seen by attribute resolution."""
        return self.alias

    def unwrap(self) -> Any:
        """Return the innermost plan, stripping every wrapper layer."""
        plan: Any = self
        while isinstance(plan, Subquery):
            plan = plan.child
        return plan

    def qualifiers(self) -> list[str]:
        """Return the qualifiers from the outermost wrapper inwards."""
        names: list[str] = []
        plan: Any = self
        while isinstance(plan, Subquery):
            names.append(plan.alias)
            plan = plan.child
        return names
