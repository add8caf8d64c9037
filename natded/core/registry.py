"""
The roth registry: roth id -> (spec, structures, compiled relation).

Registration does all the structural work up front -- validation,
classification, compilation -- so a malformed roth is rejected when it
is loaded, never halfway through a proof.

Single writer, many readers: register/unregister serialize on a lock
and publish a fully built entry in one dict assignment. Lookups never
lock and never see a half-built entry.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from .errors import RothNotFound
from .relation import Relation, compile_relation
from .spec import RothSpec, validate_spec, save_specs, load_specs
from .structure import Direction, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Roth:
    """A registered rule or theorem with its derived artefacts."""
    spec: RothSpec
    forward: Optional[tuple]
    backward: Optional[tuple]
    relation: Relation

    @property
    def id(self):
        return self.spec.id

    @property
    def given_count(self) -> int:
        return len(self.spec.given)

    @property
    def conclusion_count(self) -> int:
        return len(self.spec.conclusion)

    @property
    def is_forward(self) -> bool:
        return self.forward is not None

    @property
    def is_backward(self) -> bool:
        return self.backward is not None

    def pattern(self, direction: Direction) -> Optional[tuple]:
        """The call structure for an application in the given direction."""
        if direction is Direction.FORWARD:
            return self.forward
        return self.backward


def build_roth(spec: RothSpec, strict: bool = False) -> Roth:
    validate_spec(spec, strict=strict)
    forward, backward = classify(spec)
    return Roth(spec, forward, backward, compile_relation(spec))


class RothRegistry:
    """
    Rules and theorems available to a proof.

    predicates: prerequisite functions of the object logic,
                {name: callable}, used when a Check is evaluated.
    strict:     reject roths whose conclusion or prereq mentions a
                variable no given or extra mentions.
    """

    def __init__(self, specs=(), predicates: Optional[dict] = None, strict: bool = False):
        self._roths = {}
        self._write_lock = threading.Lock()
        self.predicates = dict(predicates or {})
        self.strict = strict
        self.register_all(specs)

    def register(self, spec: RothSpec) -> Roth:
        """Add or replace a roth. Derived artefacts are rebuilt from the spec."""
        roth = build_roth(spec, strict=self.strict)
        with self._write_lock:
            replaced = spec.id in self._roths
            roths = dict(self._roths)
            roths[spec.id] = roth
            self._roths = roths
        logger.debug("%s %s", "re-registered" if replaced else "registered", spec.id)
        return roth

    def register_all(self, specs) -> list:
        return [self.register(s) for s in specs]

    def unregister(self, roth_id):
        with self._write_lock:
            if roth_id not in self._roths:
                raise RothNotFound(roth_id)
            roths = dict(self._roths)
            del roths[roth_id]
            self._roths = roths

    def lookup(self, roth_id) -> Roth:
        try:
            return self._roths[roth_id]
        except KeyError:
            raise RothNotFound(roth_id) from None

    def ids(self) -> list:
        return list(self._roths)

    def specs(self) -> list:
        return [r.spec for r in self._roths.values()]

    def __contains__(self, roth_id) -> bool:
        return roth_id in self._roths

    def __len__(self) -> int:
        return len(self._roths)

    def __iter__(self):
        return iter(list(self._roths.values()))

    def save(self, path: str):
        save_specs(self.specs(), path)

    def load(self, path: str) -> list:
        """Register every roth stored in a JSON file. Returns their ids."""
        roths = self.register_all(load_specs(path))
        logger.info("loaded %d roths from %s", len(roths), path)
        return [r.id for r in roths]
