"""
Reporting utilities: roths, structures and compiled relations.
"""

from .core.registry import Roth, RothRegistry
from .core.structure import format_structure
from .core.unification import format_expr


def format_roth(roth: Roth) -> str:
    spec = roth.spec
    given = " ".join(format_expr(t) for t in spec.given)
    conclusion = " ".join(format_expr(t) for t in spec.conclusion)
    line = f"{spec.id}: [{given}] => [{conclusion}]"
    if spec.extra:
        line += f"  extra [{' '.join(format_expr(t) for t in spec.extra)}]"
    if spec.prereq:
        line += f"  prereq [{' '.join(format_expr(t) for t in spec.prereq)}]"
    return line


def print_roth(roth: Roth, show_relation: bool = False):
    """Print one roth with its call structures."""
    print(f"  {format_roth(roth)}")
    print(f"      forward  {format_structure(roth.forward)}")
    print(f"      backward {format_structure(roth.backward)}")
    if show_relation:
        for line in roth.relation.describe().splitlines():
            print(f"      {line}")


def print_registry(registry: RothRegistry, show_relation: bool = False):
    """Print every registered roth."""
    print(f"\n{'='*60}")
    print(f"Roths ({len(registry)}):")
    print(f"{'='*60}")
    for roth in registry:
        print_roth(roth, show_relation=show_relation)
    print(f"{'='*60}")
