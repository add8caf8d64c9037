"""
Logic: classical propositional natural deduction.

Operators: not, and, or, impl, equiv. Reserved constants: truth,
contradiction. Boxes (sub-proofs) appear in rules as (infer A B):
"assuming A, B was derived".

Pattern variables are the uppercase atoms A, B, C. Concrete formulas in
proofs may use any atom, P and Q by convention.
"""

from ..core.spec import rule, theorem


PROP_RULES = [
    rule("and-i",    given=["A", "B"],                 conclusion=[("and", "A", "B")]),
    rule("and-e1",   given=[("and", "A", "B")],        conclusion=["A"]),
    rule("and-e2",   given=[("and", "A", "B")],        conclusion=["B"]),
    rule("or-i1",    given=["A"],                      conclusion=[("or", "A", "B")]),
    rule("or-i2",    given=["B"],                      conclusion=[("or", "A", "B")]),
    rule("or-e",
         given=[("or", "A", "B"), ("infer", "A", "C"), ("infer", "B", "C")],
         conclusion=["C"]),
    rule("impl-i",   given=[("infer", "A", "B")],      conclusion=[("impl", "A", "B")]),
    rule("impl-e",   given=["A", ("impl", "A", "B")],  conclusion=["B"]),
    rule("not-i",    given=[("infer", "A", "contradiction")], conclusion=[("not", "A")]),
    rule("not-e",    given=[("not", "A"), "A"],        conclusion=["contradiction"]),
    rule("efq",      given=["contradiction"],          conclusion=["A"]),
    rule("raa",      given=[("infer", ("not", "A"), "contradiction")], conclusion=["A"]),
    rule("tnd",      given=[],                         conclusion=[("or", "A", ("not", "A"))]),
    rule("truth",    given=[],                         conclusion=["truth"]),
    rule("notnot-i", given=["A"],                      conclusion=[("not", ("not", "A"))]),
    rule("equiv-i",
         given=[("impl", "A", "B"), ("impl", "B", "A")],
         conclusion=[("equiv", "A", "B")]),
    rule("equiv-e1", given=[("equiv", "A", "B")],      conclusion=[("impl", "A", "B")]),
    rule("equiv-e2", given=[("equiv", "A", "B")],      conclusion=[("impl", "B", "A")]),
]

# Proved once, exported, reused like rules.
PROP_THEOREMS = [
    theorem("notnot-e", given=[("not", ("not", "A"))], conclusion=["A"]),
    theorem("mt",
            given=[("impl", "A", "B"), ("not", "B")],
            conclusion=[("not", "A")]),
    theorem("contrap",
            given=[("impl", "A", "B")],
            conclusion=[("impl", ("not", "B"), ("not", "A"))]),
    theorem("and-comm", given=[("and", "A", "B")], conclusion=[("and", "B", "A")]),
    theorem("and-split",
            given=[("and", "A", "B")],
            conclusion=["A", "B"]),
]
