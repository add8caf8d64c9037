from .errors import (
    NaturalDeductionError, MalformedTemplate, RothNotFound,
    DirectionUnsupported, ArityMismatch, UnboundVariable,
    UnificationConflict, RuleNotApplicable, SearchLimitExceeded,
)
from .unification import (
    KEYWORDS, Var, Group, to_expr, pattern_variables,
    reconstruct, apply_substitution, unify_terms, unify, reify, format_expr,
)
from .spec import RothSpec, rule, theorem, validate_spec
from .structure import Tag, Direction, Marker, classify, format_structure
from .relation import Relation, compile_relation
from .registry import Roth, RothRegistry
from .engine import WILDCARD, Engine, apply_roth, check_roth, step_forward, step_backward

__all__ = [
    "NaturalDeductionError", "MalformedTemplate", "RothNotFound",
    "DirectionUnsupported", "ArityMismatch", "UnboundVariable",
    "UnificationConflict", "RuleNotApplicable", "SearchLimitExceeded",
    "KEYWORDS", "Var", "Group", "to_expr", "pattern_variables",
    "reconstruct", "apply_substitution", "unify_terms", "unify", "reify", "format_expr",
    "RothSpec", "rule", "theorem", "validate_spec",
    "Tag", "Direction", "Marker", "classify", "format_structure",
    "Relation", "compile_relation",
    "Roth", "RothRegistry",
    "WILDCARD", "Engine", "apply_roth", "check_roth", "step_forward", "step_backward",
]
