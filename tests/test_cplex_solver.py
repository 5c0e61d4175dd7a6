import pytest

cplex = pytest.importorskip("cplex")

from routing.config import EdkspConfig
from routing.cplex_solver import CplexSolver
from routing.edge_disjoint_routing import lp_of_st, solve, solve_pair
from routing.solution import build_name_table, parse_solution
from routing.solver import SolverRequest

H1, H2, H3 = 4, 5, 6
S1, S3 = 0, 2


def test_cplex_minimizes_path_length(ring):
    response = CplexSolver().solve(SolverRequest(lp_of_st(ring, H1, H2, 2)))

    solution = parse_solution(response.lines(), build_name_table(ring))

    # a 3 hop and a 4 hop path
    assert solution.feasible
    assert solution.objective == pytest.approx(7.0)


def test_cplex_two_disjoint_paths(ring):
    entry = solve_pair(ring, H1, H2, EdkspConfig(budget=2), CplexSolver())

    assert entry is not None
    assert sum(entry.values()) == pytest.approx(1.0)
    assert ((H1, S1), (S1, S3), (S3, H2)) in entry
    for path in entry:
        assert path[0][0] == H1 and path[-1][1] == H2


def test_cplex_too_many_paths_is_infeasible(ring):
    # h3 hangs off s2, which has only two switch neighbors
    config = EdkspConfig(budget=3)

    response = CplexSolver().solve(SolverRequest(lp_of_st(ring, H1, H3, 3)))

    assert response.result_text is None
    assert solve(ring, [(H1, H3)], config, CplexSolver()) == {}
