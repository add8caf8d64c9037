"""
Application of roths.

A proof step names a roth and supplies one argument per slot of the
chosen call structure. Arguments are concrete expressions or WILDCARD,
the unknowns to solve for:

    apply_roth(registry, "and-i", ["P", "Q", WILDCARD], Direction.FORWARD)
        -> ("and", "P", "Q")
    apply_roth(registry, "and-i", [("and", "P", "Q"), WILDCARD, WILDCARD],
               Direction.BACKWARD)
        -> ["P", "Q"]

The first solution of the compiled relation wins. The registry is only
read, never written.
"""

import logging
from typing import Optional

from .errors import (
    ArityMismatch, DirectionUnsupported, RuleNotApplicable,
    UnboundVariable, UnificationConflict,
)
from .registry import RothRegistry
from .structure import Direction, format_structure
from .unification import fresh_var, to_expr, apply_substitution, reify, format_expr

logger = logging.getLogger(__name__)


class _Wildcard:
    """Marks an argument slot to be solved for."""

    def __repr__(self):
        return "?"


WILDCARD = _Wildcard()


def _format_arg(arg) -> str:
    return "?" if arg is WILDCARD else format_expr(arg)


def apply_roth(
    registry: RothRegistry,
    roth_id,
    args,
    direction: Optional[Direction] = None,
    max_steps: Optional[int] = None,
    verbose: bool = False,
):
    """
    Apply a rule or theorem to the arguments of a proof step.

    Args:
        registry:   where roth_id is looked up
        roth_id:    id of the rule or theorem
        args:       concrete expressions and WILDCARDs
        direction:  None   -> args in relation order (given, extra, conclusion)
                    FORWARD  -> same order, checked against the forward structure
                    BACKWARD -> conclusion first, then the givens
        max_steps:  search step limit (default DEFAULT_MAX_STEPS)
        verbose:    print the step

    Returns:
        the value of the single wildcard, the list of values when there
        are several (in wildcard order), or True when there are none.
        Unconstrained parts of a value come back as _0, _1, ...

    Raises:
        RothNotFound, DirectionUnsupported, ArityMismatch, RuleNotApplicable
    """
    roth = registry.lookup(roth_id)
    args = list(args)

    if direction is None:
        expected = roth.relation.arity
    else:
        structure = roth.pattern(direction)
        if structure is None:
            raise DirectionUnsupported(
                f"{roth_id} cannot be used {direction.value}")
        expected = len(structure)
    if len(args) != expected:
        raise ArityMismatch(
            f"{roth_id} expects {expected} arguments, got {len(args)}"
            + ("" if direction is None else
               f" (structure {format_structure(roth.pattern(direction))})"))

    call = f"{roth_id} {' '.join(_format_arg(a) for a in args)}"

    # wildcards are numbered in call order, which is the order of the results
    queries = []
    rel_args = []
    for arg in args:
        if arg is WILDCARD:
            q = fresh_var(f"?{len(queries)}")
            queries.append(q)
            rel_args.append(q)
        else:
            rel_args.append(to_expr(arg))

    if direction is Direction.BACKWARD:
        # the conclusion comes first in the call, last in the relation
        rel_args = rel_args[1:] + rel_args[:1]

    try:
        sub = roth.relation.first(
            rel_args,
            predicates=registry.predicates,
            max_steps=max_steps,
        )
    except (UnboundVariable, UnificationConflict) as exc:
        raise RuleNotApplicable(f"{call}: {exc}") from exc

    if sub is None:
        logger.debug("not applicable: %s", call)
        raise RuleNotApplicable(f"{roth_id} is not applicable to these arguments: {call}")

    values = reify([apply_substitution(sub, q) for q in queries])
    if verbose:
        produced = ", ".join(format_expr(v) for v in values) if values else "(check passed)"
        print(f"  [{direction.value if direction else 'apply'}] {call} -> {produced}")

    if not values:
        return True
    if len(values) == 1:
        return values[0]
    return values


def check_roth(registry: RothRegistry, roth_id, args, direction=None, **kwargs) -> bool:
    """Is the fully concrete argument list an instance of the roth?"""
    try:
        return apply_roth(registry, roth_id, args, direction, **kwargs) is True
    except RuleNotApplicable:
        return False


def step_forward(registry: RothRegistry, roth_id, *args, **kwargs):
    return apply_roth(registry, roth_id, args, Direction.FORWARD, **kwargs)


def step_backward(registry: RothRegistry, roth_id, *args, **kwargs):
    return apply_roth(registry, roth_id, args, Direction.BACKWARD, **kwargs)


class Engine:
    """A registry together with application defaults."""

    def __init__(self, registry: Optional[RothRegistry] = None,
                 max_steps: Optional[int] = None, verbose: bool = False):
        self.registry = registry if registry is not None else RothRegistry()
        self.max_steps = max_steps
        self.verbose = verbose

    def apply(self, roth_id, args, direction: Optional[Direction] = None):
        return apply_roth(self.registry, roth_id, args, direction,
                          max_steps=self.max_steps, verbose=self.verbose)

    def forward(self, roth_id, *args):
        return self.apply(roth_id, args, Direction.FORWARD)

    def backward(self, roth_id, *args):
        return self.apply(roth_id, args, Direction.BACKWARD)

    def check(self, roth_id, args, direction: Optional[Direction] = None) -> bool:
        return check_roth(self.registry, roth_id, args, direction,
                          max_steps=self.max_steps, verbose=self.verbose)
