"""
Logic: linear temporal logic, labelled natural deduction.

Formulas are labelled with a state: (at [i] A) reads "A holds in
state i". The relational side conditions between states are
    (<= i j)     j is reachable from i
    (succ i j)   j is the direct successor of i
"""

from ..core.spec import rule


LTL_RULES = [
    # the relational frame
    rule("reflexiv",  given=[],                               conclusion=[("<=", "i", "i")]),
    rule("transitiv", given=[("<=", "i", "j"), ("<=", "j", "k")],
         conclusion=[("<=", "i", "k")]),
    rule("serial",    given=[],                               conclusion=[("<=", "i", "j")]),
    rule("succ",      given=[],                               conclusion=[("succ", "i", "j")]),
    rule("succ/<=",   given=[("succ", "i", "j")],             conclusion=[("<=", "i", "j")]),

    # propositional rules, labelled
    rule("and-i",  given=[("at", ["i"], "A"), ("at", ["i"], "B")],
         conclusion=[("at", ["i"], ("and", "A", "B"))]),
    rule("and-e1", given=[("at", ["i"], ("and", "A", "B"))], conclusion=[("at", ["i"], "A")]),
    rule("and-e2", given=[("at", ["i"], ("and", "A", "B"))], conclusion=[("at", ["i"], "B")]),
    rule("impl-i", given=[("infer", ("at", ["i"], "A"), ("at", ["i"], "B"))],
         conclusion=[("at", ["i"], ("impl", "A", "B"))]),
    rule("impl-e", given=[("at", ["i"], "A"), ("at", ["i"], ("impl", "A", "B"))],
         conclusion=[("at", ["i"], "B")]),
    rule("not-e",  given=[("at", ["i"], ("not", "A")), ("at", ["i"], "A")],
         conclusion=[("at", ["j"], "contradiction")]),
    rule("raa",    given=[("infer", ("at", ["i"], ("not", "A")), ("at", ["j"], "contradiction"))],
         conclusion=[("at", ["i"], "A")]),

    # temporal operators
    rule("always-i",
         given=[("infer", ("<=", "i", "j"), ("at", ["j"], "A"))],
         conclusion=[("at", ["i"], ("always", "A"))]),
    rule("always-e",
         given=[("at", ["i"], ("always", "A")), ("<=", "i", "j")],
         conclusion=[("at", ["j"], "A")]),
    rule("finally-i",
         given=[("at", ["j"], "A"), ("<=", "i", "j")],
         conclusion=[("at", ["i"], ("finally", "A"))]),
    rule("finally-e",
         given=[("at", ["i"], ("finally", "A")),
                ("infer", [("<=", "i", "j"), ("at", ["j"], "A")], ("at", ["k"], "B"))],
         conclusion=[("at", ["k"], "B")]),
    rule("atnext-i",
         given=[("at", ["j"], "A"), ("succ", "i", "j")],
         conclusion=[("at", ["i"], ("atnext", "A"))]),
    rule("atnext-e",
         given=[("at", ["i"], ("atnext", "A")), ("succ", "i", "j")],
         conclusion=[("at", ["j"], "A")]),
    rule("now",
         given=[("actual", "i"), ("at", ["i"], ("always", "A"))],
         conclusion=[("at", ["i"], "A")]),
]
