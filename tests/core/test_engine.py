"""
Property-based and unit tests for roth application.

Core claims:
    - Soundness:    and-i forward on P, Q yields exactly (and P Q)
    - Extraction:   and-e2 forward on (and P Q) yields Q
    - Failure:      a non-matching given is RuleNotApplicable, not a crash
    - Round trip:   notnot-i forward and notnot-e backward agree
    - Direction and arity are checked against the cached structures
    - One wildcard returns a value, several return a list in order
    - Application never alters the registry
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from natded.core.engine import (
    WILDCARD, Engine, apply_roth, check_roth, step_forward, step_backward,
)
from natded.core.errors import (
    ArityMismatch, DirectionUnsupported, MalformedTemplate,
    RothNotFound, RuleNotApplicable,
)
from natded.core.registry import RothRegistry
from natded.core.spec import rule
from natded.core.structure import Direction
from natded.logics import make_registry

F, B = Direction.FORWARD, Direction.BACKWARD
Q_ = WILDCARD


@pytest.fixture(scope="module")
def prop():
    return make_registry("prop")


# ── Generators ───────────────────────────────────────────────────────────────

@st.composite
def formulas(draw, max_depth=3):
    if max_depth == 0:
        return draw(st.sampled_from(["P", "Q", "R", "truth"]))
    choice = draw(st.integers(min_value=0, max_value=3))
    if choice == 0:
        return draw(st.sampled_from(["P", "Q", "R", "truth"]))
    if choice == 1:
        return ("not", draw(formulas(max_depth=max_depth - 1)))
    op = draw(st.sampled_from(["and", "or", "impl"]))
    return (op, draw(formulas(max_depth=max_depth - 1)), draw(formulas(max_depth=max_depth - 1)))


# ── Forward ──────────────────────────────────────────────────────────────────

class TestForward:
    def test_and_i_soundness(self, prop):
        assert apply_roth(prop, "and-i", ["P", "Q", Q_], F) == ("and", "P", "Q")

    def test_and_e2_extraction(self, prop):
        assert apply_roth(prop, "and-e2", [("and", "P", "Q"), Q_], F) == "Q"

    def test_and_e2_failure(self, prop):
        with pytest.raises(RuleNotApplicable):
            apply_roth(prop, "and-e2", ["P", Q_], F)
        with pytest.raises(RuleNotApplicable):
            apply_roth(prop, "and-e2", [("or", "P", "Q"), Q_], F)

    def test_impl_e(self, prop):
        assert apply_roth(prop, "impl-e", ["P", ("impl", "P", "Q"), Q_], F) == "Q"

    def test_impl_e_antecedent_mismatch(self, prop):
        with pytest.raises(RuleNotApplicable):
            apply_roth(prop, "impl-e", ["R", ("impl", "P", "Q"), Q_], F)

    def test_not_e_yields_contradiction(self, prop):
        assert apply_roth(prop, "not-e", [("not", "P"), "P", Q_], F) == "contradiction"

    def test_unconstrained_part_is_reified(self, prop):
        assert apply_roth(prop, "or-i1", ["P", Q_], F) == ("or", "P", "_0")

    def test_axiom(self, prop):
        assert apply_roth(prop, "tnd", [Q_], F) == ("or", "_0", ("not", "_0"))

    def test_combined_conclusion(self, prop):
        result = apply_roth(prop, "or-e", [("or", "P", "Q"), Q_, Q_, Q_], F)
        assert result == [("infer", "P", "_0"), ("infer", "Q", "_0"), "_0"]

    def test_several_conclusions(self, prop):
        assert apply_roth(prop, "and-split", [("and", "P", "Q"), Q_, Q_], F) == ["P", "Q"]

    def test_solving_for_a_given(self, prop):
        """A choice-one call: only the second given is supplied."""
        result = apply_roth(prop, "impl-e", [Q_, ("impl", "P", "Q"), Q_], F)
        assert result == ["P", "Q"]


# ── Backward ─────────────────────────────────────────────────────────────────

class TestBackward:
    def test_and_i(self, prop):
        assert apply_roth(prop, "and-i", [("and", "P", "Q"), Q_, Q_], B) == ["P", "Q"]

    def test_impl_i_opens_box(self, prop):
        assert apply_roth(prop, "impl-i", [("impl", "P", "Q"), Q_], B) == ("infer", "P", "Q")

    def test_raa(self, prop):
        assert apply_roth(prop, "raa", ["P", Q_], B) == \
            ("infer", ("not", "P"), "contradiction")

    def test_impl_e_invents_antecedent(self, prop):
        assert apply_roth(prop, "impl-e", ["Q", Q_, Q_], B) == ["_0", ("impl", "_0", "Q")]

    def test_efq(self, prop):
        assert apply_roth(prop, "efq", ["P", Q_], B) == "contradiction"

    def test_conclusion_mismatch(self, prop):
        with pytest.raises(RuleNotApplicable):
            apply_roth(prop, "and-i", [("or", "P", "Q"), Q_, Q_], B)

    def test_round_trip_notnot(self, prop):
        doubled = apply_roth(prop, "notnot-i", ["P", Q_], F)
        assert doubled == ("not", ("not", "P"))
        assert apply_roth(prop, "notnot-e", ["P", Q_], B) == doubled
        assert apply_roth(prop, "notnot-e", [doubled, Q_], F) == "P"


# ── Call checking ────────────────────────────────────────────────────────────

class TestCallChecks:
    def test_unknown_roth(self, prop):
        with pytest.raises(RothNotFound):
            apply_roth(prop, "no-such-rule", [Q_])

    def test_forward_unsupported(self, prop):
        with pytest.raises(DirectionUnsupported):
            apply_roth(prop, "impl-i", [Q_, Q_], F)

    def test_backward_unsupported(self, prop):
        with pytest.raises(DirectionUnsupported):
            apply_roth(prop, "and-split", [("and", "P", "Q"), Q_], B)
        with pytest.raises(DirectionUnsupported):
            apply_roth(prop, "tnd", [Q_, Q_], B)

    def test_arity_mismatch(self, prop):
        with pytest.raises(ArityMismatch):
            apply_roth(prop, "and-i", ["P", Q_], F)
        with pytest.raises(ArityMismatch):
            apply_roth(prop, "and-i", [("and", "P", "Q"), Q_], B)

    def test_relation_order_without_direction(self, prop):
        assert apply_roth(prop, "impl-i", [Q_, ("impl", "P", "Q")]) == ("infer", "P", "Q")

    def test_backward_results_in_call_order(self, prop):
        """The conclusion wildcard comes first in the call, so first in the result."""
        assert apply_roth(prop, "and-i", [Q_, "P", Q_], B) == [("and", "P", "_0"), "_0"]

    def test_failing_predicate_is_rule_not_applicable(self):
        reg = RothRegistry([rule("r", given=["A"], conclusion=["A"],
                                 prereq=[("ok?", "A", "A")])],
                           predicates={"ok?": lambda a: True})
        with pytest.raises(RuleNotApplicable):
            apply_roth(reg, "r", ["P", Q_], F)

    def test_check_only_roth(self):
        reg = RothRegistry([rule("triv", given=[], conclusion=[], prereq=["true"])])
        assert apply_roth(reg, "triv", []) is True
        assert apply_roth(reg, "triv", [], F) is True

    def test_malformed_argument(self, prop):
        with pytest.raises(MalformedTemplate):
            apply_roth(prop, "and-i", ["P", 3, Q_], F)

    def test_zero_wildcards_is_a_check(self, prop):
        assert apply_roth(prop, "and-i", ["P", "Q", ("and", "P", "Q")], F) is True
        assert check_roth(prop, "and-i", ["P", "Q", ("and", "P", "Q")], F)
        assert not check_roth(prop, "and-i", ["P", "Q", ("and", "Q", "P")], F)


class TestNoMutation:
    def test_idempotent_and_registry_unchanged(self, prop):
        ids_before = prop.ids()
        roth_before = prop.lookup("and-i")
        first = apply_roth(prop, "and-i", ["P", "Q", Q_], F)
        second = apply_roth(prop, "and-i", ["P", "Q", Q_], F)
        assert first == second
        assert prop.ids() == ids_before
        assert prop.lookup("and-i") is roth_before


class TestEngine:
    def test_forward_and_backward(self, prop):
        engine = Engine(prop)
        assert engine.forward("and-i", "P", "Q", Q_) == ("and", "P", "Q")
        assert engine.backward("and-i", ("and", "P", "Q"), Q_, Q_) == ["P", "Q"]

    def test_check(self, prop):
        engine = Engine(prop)
        assert engine.check("not-e", [("not", "P"), "P", "contradiction"], F)

    def test_max_steps(self, prop):
        engine = Engine(prop, max_steps=1)
        with pytest.raises(RuleNotApplicable):
            engine.forward("and-i", "P", "Q", Q_)

    def test_empty_registry(self):
        with pytest.raises(RothNotFound):
            Engine().forward("and-i", "P", "Q", Q_)

    def test_step_helpers(self, prop):
        assert step_forward(prop, "and-e1", ("and", "P", "Q"), Q_) == "P"
        assert step_backward(prop, "or-i1", ("or", "P", "Q"), Q_) == "P"

    def test_verbose(self, prop, capsys):
        apply_roth(prop, "and-i", ["P", "Q", Q_], F, verbose=True)
        out = capsys.readouterr().out
        assert "[forward] and-i P Q ?" in out
        assert "(and P Q)" in out


# ── Property-based tests ─────────────────────────────────────────────────────

class TestApplicationProperties:

    @given(formulas(), formulas())
    def test_and_intro_elim(self, a, b):
        prop = make_registry("prop")
        conj = apply_roth(prop, "and-i", [a, b, Q_], F)
        assert conj == ("and", a, b)
        assert apply_roth(prop, "and-e1", [conj, Q_], F) == a
        assert apply_roth(prop, "and-e2", [conj, Q_], F) == b
        assert apply_roth(prop, "and-i", [conj, Q_, Q_], B) == [a, b]

    @given(formulas())
    def test_notnot_round_trip(self, a):
        prop = make_registry("prop")
        doubled = apply_roth(prop, "notnot-i", [a, Q_], F)
        assert apply_roth(prop, "notnot-e", [doubled, Q_], F) == a
        assert apply_roth(prop, "notnot-e", [a, Q_], B) == doubled

    @given(formulas(), formulas())
    def test_modus_ponens(self, a, b):
        prop = make_registry("prop")
        assert apply_roth(prop, "impl-e", [a, ("impl", a, b), Q_], F) == b
