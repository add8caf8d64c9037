"""
natded: the inference engine of a natural deduction proof assistant.

Rules and theorems ("roths") are classified into forward and backward
call structures, compiled into relations over logic variables, and
applied to proof-step arguments by unification.

Usage:
    python -m natded --logic prop --list
    python -m natded --logic prop --roth and-i --forward P Q ?
    python -m natded --logic ltl  --roth always-e --forward "(at [i] (always A))" ? ?
"""

from .core.errors import (
    NaturalDeductionError, MalformedTemplate, RothNotFound,
    DirectionUnsupported, ArityMismatch, UnboundVariable,
    UnificationConflict, RuleNotApplicable, SearchLimitExceeded,
)
from .core.unification import KEYWORDS, Var, Group, to_expr, unify, reconstruct, format_expr
from .core.spec import RothSpec, rule, theorem
from .core.structure import Tag, Direction, classify, format_structure
from .core.relation import Relation, compile_relation
from .core.registry import Roth, RothRegistry
from .core.engine import WILDCARD, Engine, apply_roth, check_roth, step_forward, step_backward
from .reader import parse_expr
from .logics import LOGICS, make_registry

__all__ = [
    "NaturalDeductionError", "MalformedTemplate", "RothNotFound",
    "DirectionUnsupported", "ArityMismatch", "UnboundVariable",
    "UnificationConflict", "RuleNotApplicable", "SearchLimitExceeded",
    "KEYWORDS", "Var", "Group", "to_expr", "unify", "reconstruct", "format_expr",
    "RothSpec", "rule", "theorem",
    "Tag", "Direction", "classify", "format_structure",
    "Relation", "compile_relation",
    "Roth", "RothRegistry",
    "WILDCARD", "Engine", "apply_roth", "check_roth", "step_forward", "step_backward",
    "parse_expr",
    "LOGICS", "make_registry",
]
