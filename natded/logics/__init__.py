"""
Object-logic registry.

Each logic is a dict describing a rule catalogue for the engine:
    rules:       list of RothSpec (rules first, then proved theorems)
    predicates:  {name: callable} for prerequisite checks  [optional]
    description: str

The engine treats every operator name as opaque; a logic only decides
which rules exist and what its prerequisite predicates compute.
"""

from ..core.registry import RothRegistry
from .prop import PROP_RULES, PROP_THEOREMS
from .pred import PRED_RULES, PRED_PREDICATES
from .ltl import LTL_RULES


LOGICS = {
    "prop": {
        "rules":       PROP_RULES + PROP_THEOREMS,
        "description": "Classical propositional logic",
    },
    "pred": {
        "rules":       PROP_RULES + PROP_THEOREMS + PRED_RULES,
        "predicates":  PRED_PREDICATES,
        "description": "First-order predicate logic with equality",
    },
    "ltl": {
        "rules":       LTL_RULES,
        "description": "Linear temporal logic, labelled by states",
    },
}


def make_registry(name: str, strict: bool = False) -> RothRegistry:
    """A registry loaded with the rules of one logic."""
    if name not in LOGICS:
        raise ValueError(
            f"Unknown logic: {name!r}. "
            f"Choose from: {list(LOGICS.keys())}"
        )
    logic = LOGICS[name]
    return RothRegistry(logic["rules"], predicates=logic.get("predicates"), strict=strict)
