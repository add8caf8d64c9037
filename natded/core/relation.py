"""
Compilation of roths into executable relations.

A roth becomes a relation with one argument per given, extra and
conclusion slot, in that order. The compiled form is a small closed
program over those slots, e.g. for and-e2:

    given [(and A B)]  conclusion [B]

    params  [and#1 q#1]
    locals  [A B]
    goals   (== and#1 (and A B))
            (== q#1 B)

Given and extra templates that are bare pattern variables are the
arguments themselves. Every other template gets an alias slot plus a
unify goal. Pattern variables that are not arguments are existentials,
shared between the given side and the conclusion side. Prerequisites
become Check goals.

Search order (the "first solution" contract):
    1. arguments are bound to the parameter slots, left to right
    2. given/extra unify goals, in slot order
    3. conclusion unify goals, in slot order
    4. a Check fires as soon as every variable in it is bound;
       a Check still waiting after the last goal rejects the candidate
Unification is syntactic and most general, so a relation has at most
one solution up to renaming of the unbound variables.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .errors import ArityMismatch, RuleNotApplicable, SearchLimitExceeded
from .unification import (
    is_pattern_variable, is_compound, is_group, head,
    pattern_variables, free_vars, fresh_var,
    reconstruct, apply_substitution, unify_terms, format_expr,
)

logger = logging.getLogger(__name__)

# Safety valve against malformed roth sets, overridable from the environment.
DEFAULT_MAX_STEPS = int(os.environ.get("NATDED_MAX_STEPS", "10000"))


@dataclass(frozen=True)
class Unify:
    """Unify the variable of slot with the instantiated template."""
    slot: str
    template: object


@dataclass(frozen=True)
class Check:
    """A prerequisite: the instantiated template must evaluate to true."""
    template: object


def evaluate_prereq(value, predicates: Optional[dict] = None) -> bool:
    """
    A ground prerequisite holds if it is the atom true, or a compound
    whose operator names a predicate of the object logic that returns
    True (or "true") for the arguments.
    """
    if value == "true":
        return True
    name = head(value)
    if name is not None and predicates and name in predicates:
        try:
            result = predicates[name](*value[1:])
        except Exception as exc:
            raise RuleNotApplicable(
                f"prerequisite {format_expr(value)} failed: {exc}") from exc
        return result is True or result == "true"
    return False


@dataclass(frozen=True)
class Relation:
    """The compiled, immutable relation of one roth."""
    roth_id: str
    params: tuple
    locals: tuple
    goals: tuple

    @property
    def arity(self) -> int:
        return len(self.params)

    def solve(self, args, predicates=None, max_steps=None, occurs_check=True):
        """
        Generate the substitutions under which args is an instance of the
        roth. args holds concrete expressions and caller variables.
        """
        if len(args) != self.arity:
            raise ArityMismatch(
                f"{self.roth_id} takes {self.arity} arguments, got {len(args)}")
        if max_steps is None:
            max_steps = DEFAULT_MAX_STEPS

        env = {name: fresh_var(name) for name in self.params + self.locals}
        checks = [reconstruct(g.template, env) for g in self.goals if isinstance(g, Check)]
        steps = 0
        sub = {}
        checks = _fire_ready(checks, sub, predicates)
        if checks is None:
            return

        def spend():
            nonlocal steps
            steps += 1
            if steps > max_steps:
                raise SearchLimitExceeded(
                    f"{self.roth_id}: search exceeded {max_steps} steps")

        for slot, arg in zip(self.params, args):
            spend()
            sub = unify_terms(env[slot], arg, sub, occurs_check)
            if sub is None:
                return
            checks = _fire_ready(checks, sub, predicates)
            if checks is None:
                return

        for goal in self.goals:
            if not isinstance(goal, Unify):
                continue
            spend()
            sub = unify_terms(env[goal.slot], reconstruct(goal.template, env),
                              sub, occurs_check)
            if sub is None:
                return
            checks = _fire_ready(checks, sub, predicates)
            if checks is None:
                return

        if checks:
            logger.debug("%s: prerequisites never became ground: %s", self.roth_id,
                         [format_expr(apply_substitution(sub, c)) for c in checks])
            return
        yield sub

    def first(self, args, **kwargs) -> Optional[dict]:
        """The first solution, or None."""
        return next(self.solve(args, **kwargs), None)

    def describe(self) -> str:
        """Readable listing of the compiled program."""
        lines = [f"(fn [{' '.join(self.params)}]",
                 f"  (fresh [{' '.join(self.locals)}]"]
        for goal in self.goals:
            if isinstance(goal, Unify):
                lines.append(f"    (== {goal.slot} {format_expr(goal.template)})")
            else:
                lines.append(f"    (check {format_expr(goal.template)})")
        lines[-1] += "))"
        return "\n".join(lines)


def _fire_ready(checks: list, sub: dict, predicates):
    """Evaluate the checks that became ground. None if one of them fails."""
    waiting = []
    for term in checks:
        value = apply_substitution(sub, term)
        if free_vars(value):
            waiting.append(term)
        elif not evaluate_prereq(value, predicates):
            return None
    return waiting


def _alias(template, n: int) -> str:
    """Slot name for a structured given: (and A B) in position 2 -> and#2."""
    if is_compound(template):
        return f"{template[0]}#{n}"
    if is_group(template):
        return f"group#{n}"
    return f"{template}#{n}"  # reserved constant


def compile_relation(spec) -> Relation:
    """Build the relation of a RothSpec."""
    params = []
    goals = []
    for n, template in enumerate(spec.given + spec.extra, start=1):
        if is_pattern_variable(template):
            params.append(template)
        else:
            alias = _alias(template, n)
            params.append(alias)
            goals.append(Unify(alias, template))

    outputs = [f"q#{k}" for k in range(1, len(spec.conclusion) + 1)]
    for q, template in zip(outputs, spec.conclusion):
        goals.append(Unify(q, template))
    for template in spec.prereq or ():
        goals.append(Check(template))

    existentials = []
    for template in spec.given + spec.extra + spec.conclusion + (spec.prereq or ()):
        for v in pattern_variables(template):
            if v not in params and v not in existentials:
                existentials.append(v)

    relation = Relation(spec.id, tuple(params + outputs), tuple(existentials), tuple(goals))
    logger.debug("compiled %s:\n%s", spec.id, relation.describe())
    return relation
