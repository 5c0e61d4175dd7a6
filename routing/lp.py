# Filename: lp.py

""" A tiny linear program language.

    An expression is a list of (coefficient, variable) terms, a
    constraint is an Eq or a Leq over an expression, and a program is
    an objective variable to minimize plus its constraints. string_of_lp
    renders a program in the CPLEX LP text format read by gurobi_cl.
"""

from collections import namedtuple

# name: str, expr: [(coef, var)], const: float
Eq = namedtuple("Eq", ["name", "expr", "const"])
Leq = namedtuple("Leq", ["name", "expr", "bound"])

LinearProgram = namedtuple("LinearProgram", ["objective", "constraints"])

def var(name):
    return [(1.0, name)]

def lp_sum(exprs):
    total = []
    for expr in exprs:
        total.extend(expr)
    return total

def minus(fst, sec):
    return list(fst) + [(-coef, name) for (coef, name) in sec]

def rhs(constraint):
    if isinstance(constraint, Eq):
        return constraint.const
    return constraint.bound

def sense(constraint):

    """ the CPLEX sense letter of a constraint """

    if isinstance(constraint, Eq):
        return "E"
    return "L"

def variables(lp):

    """ every variable of the program, objective first,
        in order of first appearance """

    seen = {lp.objective: None}
    for constraint in lp.constraints:
        for (coef, name) in constraint.expr:
            seen.setdefault(name, None)
    return list(seen)

def format_number(x):
    if x == int(x):
        return "%d" % x
    return repr(float(x))

def string_of_expr(expr, placeholder):

    """ render terms as "+ 1 a - 1 b"; an empty expression renders as a
        zero multiple of placeholder so the row stays well formed """

    if not expr:
        return "0 %s" % placeholder

    terms = []
    for (coef, name) in expr:
        if coef < 0:
            terms.append("- %s %s" % (format_number(-coef), name))
        else:
            terms.append("+ %s %s" % (format_number(coef), name))
    return " ".join(terms)

def string_of_constraint(constraint, placeholder):
    op = "=" if isinstance(constraint, Eq) else "<="
    return "%s: %s %s %s" % (constraint.name,
                             string_of_expr(constraint.expr, placeholder),
                             op, format_number(rhs(constraint)))

def string_of_lp(lp):
    lines = ["Minimize", "  obj: %s" % lp.objective, "Subject To"]
    for constraint in lp.constraints:
        lines.append("  " + string_of_constraint(constraint, lp.objective))
    lines.append("End")
    return "\n".join(lines) + "\n"
