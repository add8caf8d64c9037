"""
CLI entry point. Run as: python -m natded --logic <name> ...

    python -m natded --logic prop --list
    python -m natded --logic prop --roth and-i --forward P Q ?
    python -m natded --logic prop --roth and-i --backward "(and P Q)" ? ?
"""

import argparse
import logging
import sys

from .core.errors import NaturalDeductionError
from .core.engine import apply_roth
from .core.structure import Direction
from .core.unification import format_expr
from .logics import LOGICS, make_registry
from .reader import parse_args
from .report import print_registry, print_roth


def main(argv=None):
    parser = argparse.ArgumentParser(description="Natural deduction inference engine")
    parser.add_argument("--logic", choices=list(LOGICS.keys()), default="prop",
                        help="Which rule catalogue to load")
    parser.add_argument("--load",  type=str, default=None,
                        help="Register additional roths from a JSON file")
    parser.add_argument("--save",  type=str, default=None,
                        help="Save the registry's roths to a JSON file")
    parser.add_argument("--list",  action="store_true", help="List the roths and their structures")
    parser.add_argument("--roth",  type=str, default=None, help="Roth to apply")
    direction = parser.add_mutually_exclusive_group()
    direction.add_argument("--forward",  action="store_true", help="Apply forward")
    direction.add_argument("--backward", action="store_true", help="Apply backward")
    parser.add_argument("--max-steps", type=int, default=None, help="Search step limit")
    parser.add_argument("--show-relation", action="store_true",
                        help="Print the compiled relation of the roth")
    parser.add_argument("--strict", action="store_true",
                        help="Reject roths with unreachable conclusion variables")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    parser.add_argument("--debug", action="store_true", help="Debug logging")
    parser.add_argument("args", nargs="*",
                        help='Step arguments as s-expressions, "?" for an unknown')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        registry = make_registry(args.logic, strict=args.strict)
        if args.load:
            loaded = registry.load(args.load)
            if not args.quiet:
                print(f"Loaded {len(loaded)} roths from {args.load}")

        if args.list:
            print(f"Logic: {args.logic} -- {LOGICS[args.logic]['description']}")
            print_registry(registry, show_relation=args.show_relation)

        if args.roth:
            roth = registry.lookup(args.roth)
            if not args.quiet:
                print_roth(roth, show_relation=args.show_relation)
            if args.forward:
                mode = Direction.FORWARD
            elif args.backward:
                mode = Direction.BACKWARD
            else:
                mode = None
            result = apply_roth(
                registry, args.roth, parse_args(args.args), mode,
                max_steps=args.max_steps,
                verbose=not args.quiet,
            )
            if isinstance(result, list):
                for value in result:
                    print(format_expr(value))
            else:
                print(format_expr(result))

        if args.save:
            registry.save(args.save)
            if not args.quiet:
                print(f"Roths saved to {args.save}")
    except NaturalDeductionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted.")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
