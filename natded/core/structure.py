"""
Structural classification of roths.

The structure of a roth determines how the rule or theorem may be
called in a proof step, and with which arguments. It is derived from
the given/extra/conclusion templates alone:

    and-i    given [A B]          conclusion [(and A B)]
             forward   [:g1 :g1 :c?]
             backward  [:cm :gb :gb]

    impl-i   given [(infer A B)]  conclusion [(impl A B)]
             forward   nil           (first given is an infer)
             backward  [:cm :g?]

Tag legend:
    g = given, e = extra input, c = conclusion
    m = mandatory, o = optional, 1 = at least one of them,
    b = required when stepping backward, ? = queried (solved for),
    co = the lone conclusion when an infer already takes a query slot
"""

from enum import Enum
from typing import Optional

from .unification import is_compound, contains_head


class Tag(Enum):
    MANDATORY = "gm"
    OPTIONAL = "go"
    CHOICE_ONE = "g1"
    QUERY = "g?"
    EXTRA_MANDATORY = "em"
    CONCLUSION_OUTPUT = "c?"
    CONCLUSION_COMBINED = "co"
    BACKWARD_REQUIRED = "gb"
    CONCLUSION_MANDATORY = "cm"

    def __repr__(self):
        return f":{self.value}"


class Direction(Enum):
    FORWARD = "forward"
    BACKWARD = "backward"


class Marker(Enum):
    """Reserved template heads the classifier reacts to."""
    INFER = "infer"
    SUCC = "succ"
    SUBSTITUTION = "substitution"
    ACTUAL = "actual"


_MARKERS = {m.value: m for m in Marker}


def marker_of(template) -> Optional[Marker]:
    if is_compound(template):
        return _MARKERS.get(template[0])
    return None


def _forward_given_tag(idx: int, marker: Optional[Marker]) -> Tag:
    if marker is Marker.INFER:
        return Tag.QUERY
    if marker is Marker.SUCC or idx == 0:
        return Tag.MANDATORY
    return Tag.OPTIONAL


def _backward_given_tag(idx: int, marker: Optional[Marker]) -> Tag:
    if marker in (Marker.INFER, Marker.SUBSTITUTION):
        return Tag.QUERY
    if idx == 0:
        return Tag.OPTIONAL
    return Tag.BACKWARD_REQUIRED


def structure_forward(given, extra, conclusion) -> Optional[tuple]:
    """
    Forward call structure, e.g. (:gm, :g?, :g?, :co), or None when the
    roth can only be used backward.
    """
    markers = [marker_of(g) for g in given]
    tags = [_forward_given_tag(i, m) for i, m in enumerate(markers)]
    tags += [Tag.EXTRA_MANDATORY] * len(extra)

    # (actual t) among the givens or extra input: every given is mandatory
    if Marker.ACTUAL in markers or Tag.EXTRA_MANDATORY in tags:
        tags = [Tag.MANDATORY if t is Tag.OPTIONAL else t for t in tags]
    # mandatory and optional mixed: supplying one of them is enough
    if set(tags) == {Tag.MANDATORY, Tag.OPTIONAL}:
        tags = [Tag.CHOICE_ONE] * len(tags)

    if tags and tags[0] is Tag.QUERY:
        return None
    if Marker.SUBSTITUTION in markers:
        return None
    if len(conclusion) == 1 and Tag.QUERY in tags:
        return tuple(tags) + (Tag.CONCLUSION_COMBINED,)
    return tuple(tags) + (Tag.CONCLUSION_OUTPUT,) * len(conclusion)


def structure_backward(given, extra, conclusion) -> Optional[tuple]:
    """
    Backward call structure, e.g. (:cm, :gb, :gb), or None when the roth
    can only be used forward.
    """
    tags = [_backward_given_tag(i, marker_of(g)) for i, g in enumerate(given)]
    if set(tags) == {Tag.OPTIONAL, Tag.BACKWARD_REQUIRED}:
        tags = [Tag.BACKWARD_REQUIRED] * len(tags)
    if len(tags) == 1:
        tags = [Tag.QUERY]

    if len(conclusion) > 1:
        return None
    if extra:
        return None
    if not tags:
        return None  # an axiom has no backward use
    if any(contains_head(c, Marker.SUBSTITUTION.value) for c in conclusion):
        return None
    return (Tag.CONCLUSION_MANDATORY,) + tuple(tags)


def classify(spec) -> tuple:
    """(forward, backward) structures of a RothSpec."""
    return (
        structure_forward(spec.given, spec.extra, spec.conclusion),
        structure_backward(spec.given, spec.extra, spec.conclusion),
    )


def format_structure(tags: Optional[tuple]) -> str:
    if tags is None:
        return "nil"
    return "[" + " ".join(f":{t.value}" for t in tags) + "]"
