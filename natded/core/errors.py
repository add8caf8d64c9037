"""
Error kinds raised by the inference engine.

Structural errors (MalformedTemplate) surface at registration time.
Application errors (RothNotFound, DirectionUnsupported, ArityMismatch,
RuleNotApplicable) surface to the proof-stepping caller.
UnboundVariable and UnificationConflict are internal: apply_roth turns
them into RuleNotApplicable.
"""


class NaturalDeductionError(Exception):
    """Base class for every error raised by natded."""


class MalformedTemplate(NaturalDeductionError, ValueError):
    """A template is neither an atom, a compound nor a group."""


class RothNotFound(NaturalDeductionError, KeyError):
    """No rule or theorem is registered under the requested id."""

    def __init__(self, roth_id):
        super().__init__(roth_id)
        self.roth_id = roth_id

    def __str__(self):
        return f"{self.roth_id} not found in the roth registry"


class DirectionUnsupported(NaturalDeductionError):
    """The roth has no structure for the requested direction."""


class ArityMismatch(NaturalDeductionError, ValueError):
    """Argument count disagrees with the roth's call structure."""


class UnboundVariable(NaturalDeductionError):
    """Reconstruction met a pattern variable with no binding."""

    def __init__(self, var):
        super().__init__(f"unbound variable {var}")
        self.var = var


class UnificationConflict(NaturalDeductionError):
    """Two terms cannot be made structurally equal."""


class RuleNotApplicable(NaturalDeductionError):
    """The compiled relation has no solution for the given arguments."""


class SearchLimitExceeded(RuleNotApplicable):
    """The search ran out of steps before finding a solution."""
