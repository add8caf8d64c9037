"""
Logic: first-order predicate logic, the quantifier and equality rules.

    (forall [x] phi), (exists [x] phi)   quantifiers bind the atom in the group
    (actual t)                           t denotes an element of the domain
    (substitution phi x t)               phi with t for the free occurrences of x

A substitution in a conclusion is left symbolic by the engine; the
object logic evaluates it afterwards with resolve_substitutions. The
equality rule carries a prerequisite, (substitution? phi x a chi),
evaluated by the predicate of the same name.
"""

from ..core.spec import rule
from ..core.unification import Group, is_compound, is_group

QUANTIFIERS = frozenset({"forall", "exists"})


def substitute(expr, var, term):
    """expr with term for the free occurrences of var."""
    if expr == var:
        return term
    if is_compound(expr):
        if expr[0] in QUANTIFIERS and is_group(expr[1]) and var in expr[1]:
            return expr  # var is bound below this point
        return (expr[0],) + tuple(substitute(arg, var, term) for arg in expr[1:])
    if is_group(expr):
        return Group(tuple(substitute(item, var, term) for item in expr))
    return expr


def resolve_substitutions(expr):
    """Evaluate every (substitution phi x t) node, innermost first."""
    if is_compound(expr):
        args = tuple(resolve_substitutions(arg) for arg in expr[1:])
        if expr[0] == "substitution" and len(args) == 3:
            return substitute(*args)
        return (expr[0],) + args
    if is_group(expr):
        return Group(tuple(resolve_substitutions(item) for item in expr))
    return expr


def is_substitution(phi, var, term, chi) -> bool:
    """Is chi the result of substituting term for var in phi?"""
    return substitute(phi, var, term) == chi


PRED_PREDICATES = {
    "substitution?": is_substitution,
}

PRED_RULES = [
    rule("forall-i",
         given=[("infer", ("actual", "x0"), ("substitution", "phi", "x", "x0"))],
         conclusion=[("forall", ["x"], "phi")]),
    rule("forall-e",
         given=[("forall", ["x"], "phi"), ("actual", "t")],
         conclusion=[("substitution", "phi", "x", "t")]),
    rule("exists-i",
         given=[("actual", "t"), ("substitution", "phi", "x", "t")],
         conclusion=[("exists", ["x"], "phi")]),
    rule("exists-e",
         given=[("exists", ["x"], "phi"),
                ("infer", [("actual", "x0"), ("substitution", "phi", "x", "x0")], "chi")],
         conclusion=["chi"]),
    rule("equal-i", given=[], conclusion=[("=", "t", "t")]),
    rule("equal-e",
         given=[("=", "a", "b"), "chi"],
         extra=["phi", "x"],
         conclusion=[("substitution", "phi", "x", "b")],
         prereq=[("substitution?", "phi", "x", "a", "chi")]),
]
