"""Object filter builder for SoftLayer REST queries.

SoftLayer filters are nested json objects keyed by a dotted property path,
with an operation (and optional options) at the leaf. Several predicates are
merged into one object, which the API evaluates as a logical AND.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Predicate:
    path: str
    operation: str
    options: tuple[tuple[str, tuple[str, ...]], ...] = ()

    def as_leaf(self) -> dict[str, Any]:
        leaf: dict[str, Any] = {"operation": self.operation}
        if self.options:
            leaf["options"] = [
                {"name": name, "value": list(values)} for name, values in self.options
            ]
        return leaf


@dataclass(frozen=True)
class Path:
    """Dotted property path, e.g. ``tickets.group.name``."""

    path: str

    def not_contains(self, value: str) -> Predicate:
        return Predicate(self.path, f"!~ {value}")

    def in_(self, *values: str) -> Predicate:
        return Predicate(self.path, "in", (("data", tuple(values)),))

    def date_after(self, date: str) -> Predicate:
        return Predicate(self.path, "greaterThanDate", (("date", (date,)),))


def build(*predicates: Predicate) -> dict[str, Any]:
    """Merge predicates into a single nested filter object."""

    root: dict[str, Any] = {}
    for predicate in predicates:
        parts = [part for part in predicate.path.split(".") if part]
        if not parts:
            raise ValueError(f"Invalid filter path: {predicate.path!r}")
        node = root
        for part in parts[:-1]:
            child = node.setdefault(part, {})
            if not isinstance(child, dict) or "operation" in child:
                raise ValueError(f"Conflicting filter path: {predicate.path}")
            node = child
        if parts[-1] in node:
            raise ValueError(f"Duplicate filter path: {predicate.path}")
        node[parts[-1]] = predicate.as_leaf()
    return root


def encode(filter_obj: dict[str, Any]) -> str:
    return json.dumps(filter_obj, separators=(",", ":"), sort_keys=True)
