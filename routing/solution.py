# Filename: solution.py

""" Reading back the solver's result file.

    The result is line based:
        # Objective value = 6     comment
        Z 6                       objective ratio
        f_h1--h2_s1--s2 1         flow of commodity h1->h2 on edge s1->s2

    classify_line sorts a line into one of the kinds below and
    parse_solution turns the lines into the objective and flow records.
    A blank line or the end of the input ends the result.
"""

import re
from collections import namedtuple

from routing.errors import ParseError, TopologyError

# the line kinds
Comment = namedtuple("Comment", ["line"])
Objective = namedtuple("Objective", ["ratio"])
FlowAssignment = namedtuple("FlowAssignment", ["demand_src", "demand_dst",
                                               "edge_src", "edge_dst",
                                               "amount"])
Unrecognized = namedtuple("Unrecognized", ["line"])

FlowRecord = namedtuple("FlowRecord", ["demand_src", "demand_dst",
                                       "edge_src", "edge_dst", "amount"])

Solution = namedtuple("Solution", ["objective", "flows", "feasible"])

NAME_REGEX = re.compile(r"^[a-zA-Z0-9]+$")

VAR_REGEX = re.compile(r"^f_([a-zA-Z0-9]+)--([a-zA-Z0-9]+)_"
                       r"([a-zA-Z0-9]+)--([a-zA-Z0-9]+)$")

AMOUNT_REGEX = re.compile(r"^[0-9.e+-]+$")

# "Z <ratio>"
OBJECTIVE_OFFSET = 2

def split_var_name(name):

    """ (demand_src, demand_dst, edge_src, edge_dst) names of a flow
        variable, None if name is not one """

    m = VAR_REGEX.match(name)
    if not m:
        return None
    return m.groups()

def classify_line(line):

    """ the kind of a non-empty result line """

    if line.startswith("#"):
        return Comment(line)
    if line.startswith("Z"):
        return Objective(line[OBJECTIVE_OFFSET:])
    word = line.split(" ")
    if len(word) == 2 and AMOUNT_REGEX.match(word[1]):
        names = split_var_name(word[0])
        if names is not None:
            return FlowAssignment(*(names + (word[1],)))
    return Unrecognized(line)

def parse_amount(token):

    """ float value of token, None if it is not a number """

    try:
        return float(token)
    except ValueError:
        return None

def build_name_table(topo):

    """ vertex name -> vertex, names must be unique and alphanumeric
        for the flow variable names to be read back """

    name_table = {}
    for v, name in topo.nodes(data="name"):
        if name is None or not NAME_REGEX.match(name):
            raise TopologyError("vertex %r has no usable name %r" % (v, name))
        if name in name_table:
            raise TopologyError("vertex name %s is not unique" % name)
        name_table[name] = v
    return name_table

def _resolve(name_table, token, line):
    v = name_table.get(token)
    if v is None:
        raise ParseError("unknown vertex %s" % token, line)
    return v

def parse_solution(lines, name_table, demand_divisor=1.0, cap_divisor=1.0):

    """ Read the objective value and the non-zero flows from the result
        lines. An empty result means the solver found no solution, which
        is reported as an infeasible Solution rather than an error.
    """

    objective = None
    flows = []
    feasible = False

    for line in lines:
        line = line.rstrip("\r\n")
        if line == "":
            break
        feasible = True
        kind = classify_line(line)
        if isinstance(kind, Objective):
            if objective is not None:
                continue
            ratio = parse_amount(kind.ratio)
            if ratio is None:
                raise ParseError("bad objective value", line)
            objective = ratio * demand_divisor / cap_divisor
        elif isinstance(kind, FlowAssignment):
            demand_src = _resolve(name_table, kind.demand_src, line)
            demand_dst = _resolve(name_table, kind.demand_dst, line)
            edge_src = _resolve(name_table, kind.edge_src, line)
            edge_dst = _resolve(name_table, kind.edge_dst, line)
            amount = parse_amount(kind.amount)
            if amount is None:
                raise ParseError("bad flow amount", line)
            if amount == 0.0:
                continue
            flows.append(FlowRecord(demand_src, demand_dst,
                                    edge_src, edge_dst, amount))
        # comments and solver chatter are skipped

    if objective is None:
        objective = 0.0

    return Solution(objective, flows, feasible)
