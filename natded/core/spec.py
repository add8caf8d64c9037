"""
Roth specifications: the declarative description of a rule or theorem.

A roth ("rule or theorem") is pure data:

    given:       premise templates
    extra:       auxiliary inputs supplied fresh at each use
    conclusion:  output templates
    prereq:      side-condition templates, or None

    RothSpec("and-i", given=["A", "B"], conclusion=[("and", "A", "B")])

Templates are normalized on construction, so a malformed template is
rejected before the spec ever reaches the registry.
"""

import json
import logging
from dataclasses import dataclass
from typing import Optional

from .errors import MalformedTemplate
from .unification import Group, to_expr, pattern_variables

logger = logging.getLogger(__name__)


def _is_single_template(values) -> bool:
    """A bare atom, group or compound passed where a list belongs."""
    if isinstance(values, (str, Group)):
        return True
    return isinstance(values, tuple) and bool(values) and isinstance(values[0], str)


def _templates(values, field_name: str, roth_id) -> tuple:
    if _is_single_template(values):
        raise MalformedTemplate(
            f"{roth_id}: {field_name} must be a list of templates, got {values!r}")
    try:
        return tuple(to_expr(v) for v in values)
    except MalformedTemplate as exc:
        raise MalformedTemplate(f"{roth_id}: {field_name}: {exc}") from exc


@dataclass(frozen=True)
class RothSpec:
    """A rule or theorem. Never mutated after construction."""
    id: str
    given: tuple = ()
    extra: tuple = ()
    conclusion: tuple = ()
    prereq: Optional[tuple] = None

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise MalformedTemplate(f"roth id must be a non-empty string, got {self.id!r}")
        object.__setattr__(self, "given", _templates(self.given, "given", self.id))
        object.__setattr__(self, "extra", _templates(self.extra, "extra", self.id))
        object.__setattr__(self, "conclusion",
                           _templates(self.conclusion, "conclusion", self.id))
        if self.prereq is not None:
            object.__setattr__(self, "prereq", _templates(self.prereq, "prereq", self.id))

    @property
    def arity(self) -> int:
        return len(self.given) + len(self.extra) + len(self.conclusion)

    @property
    def is_theorem(self) -> bool:
        return not self.extra and self.prereq is None

    def unreachable_variables(self) -> list:
        """Conclusion/prereq variables that no given or extra template mentions."""
        reachable = set()
        for t in self.given + self.extra:
            reachable.update(pattern_variables(t))
        loose = []
        for t in self.conclusion + (self.prereq or ()):
            for v in pattern_variables(t):
                if v not in reachable and v not in loose:
                    loose.append(v)
        return loose

    def to_dict(self) -> dict:
        d = {
            "id": self.id,
            "given": [serialize_term(t) for t in self.given],
            "extra": [serialize_term(t) for t in self.extra],
            "conclusion": [serialize_term(t) for t in self.conclusion],
        }
        if self.prereq is not None:
            d["prereq"] = [serialize_term(t) for t in self.prereq]
        return d

    @classmethod
    def from_dict(cls, d: dict) -> "RothSpec":
        prereq = d.get("prereq")
        return cls(
            id=d["id"],
            given=[deserialize_term(t) for t in d.get("given", [])],
            extra=[deserialize_term(t) for t in d.get("extra", [])],
            conclusion=[deserialize_term(t) for t in d.get("conclusion", [])],
            prereq=None if prereq is None else [deserialize_term(t) for t in prereq],
        )


def rule(roth_id, given=(), conclusion=(), extra=(), prereq=None) -> RothSpec:
    return RothSpec(roth_id, given=given, extra=extra,
                    conclusion=conclusion, prereq=prereq)


def theorem(roth_id, given=(), conclusion=()) -> RothSpec:
    """Theorems are exported proofs: no extra inputs, no prerequisites."""
    return RothSpec(roth_id, given=given, conclusion=conclusion)


def validate_spec(spec: RothSpec, strict: bool = False) -> RothSpec:
    """
    Check that every conclusion/prereq variable is reachable from the
    givens or extras. Strict mode rejects the spec; otherwise the loose
    variables are logged and come out of an application as _0, _1, ...
    """
    loose = spec.unreachable_variables()
    if loose:
        if strict:
            raise MalformedTemplate(
                f"{spec.id}: variables {', '.join(loose)} are not reachable "
                f"from given or extra")
        logger.debug("%s: unconstrained variables %s", spec.id, loose)
    return spec


# ── JSON encoding ────────────────────────────────────────────────────────────

def serialize_term(t):
    if isinstance(t, tuple):
        return {"_fn": [serialize_term(x) for x in t]}
    if isinstance(t, Group):
        return {"_group": [serialize_term(x) for x in t]}
    return t


def deserialize_term(t):
    if isinstance(t, dict):
        if "_fn" in t:
            return tuple(deserialize_term(x) for x in t["_fn"])
        if "_group" in t:
            return Group(tuple(deserialize_term(x) for x in t["_group"]))
        raise MalformedTemplate(f"unknown term encoding: {t!r}")
    return t


def save_specs(specs, path: str):
    with open(path, "w") as f:
        json.dump({"roths": [s.to_dict() for s in specs]}, f, indent=2)


def load_specs(path: str) -> list:
    with open(path) as f:
        data = json.load(f)
    return [RothSpec.from_dict(d) for d in data["roths"]]
