# Filename: cplex_solver.py

""" Solving the routing LP in process with CPLEX.

    The model is built straight from the LinearProgram, so no scratch
    file is needed, and the solution is rendered in the same text format
    gurobi_cl writes to its result file.
"""

import logging
from time import time

import cplex

from routing.errors import SolverError
from routing.lp import rhs, sense, variables
from routing.solver import Solver, SolverResponse

log = logging.getLogger(__name__)

def build_model(prob, lp):

    """ build the model for the linear program lp """

    prob.objective.set_sense(prob.objective.sense.minimize)

    colnames = variables(lp)
    column = dict((name, i) for i, name in enumerate(colnames))

    obj = [0.0] * len(colnames)
    obj[column[lp.objective]] = 1.0

    prob.variables.add(obj = obj, names = colnames)

    for constraint in lp.constraints:
        # merge repeated variables, CPLEX rejects duplicate entries in a row
        row = {}
        for (coef, name) in constraint.expr:
            row[column[name]] = row.get(column[name], 0.0) + coef
        rmatind = list(row)
        rmatval = [row[i] for i in rmatind]
        prob.linear_constraints.add(lin_expr = [[rmatind, rmatval]],
                                    senses = sense(constraint),
                                    rhs = [rhs(constraint)],
                                    names = [constraint.name])

    return colnames

def string_of_solution(sol, colnames):
    lines = ["# Objective value = %r" % sol.get_objective_value()]
    for name, x in zip(colnames, sol.get_values()):
        lines.append("%s %r" % (name, float(x)))
    return "\n".join(lines) + "\n"

class CplexSolver(Solver):

    def solve(self, request):
        prob = cplex.Cplex()

        # sys.stdout is the default output stream for log and results
        prob.set_results_stream(None)
        prob.set_log_stream(None)
        prob.set_warning_stream(None)

        colnames = build_model(prob, request.lp)

        start = time()
        try:
            prob.solve()
        except cplex.exceptions.CplexError as e:
            raise SolverError("cplex failed: %s" % e)
        solve_time = time() - start

        sol = prob.solution
        log.debug("solution status = %s", sol.status[sol.get_status()])

        if not sol.is_primal_feasible():
            return SolverResponse(None, solve_time)

        return SolverResponse(string_of_solution(sol, colnames), solve_time)
