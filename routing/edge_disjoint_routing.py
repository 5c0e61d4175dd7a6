# Filename: edge_disjoint_routing.py

""" k edge-disjoint shortest paths per src-dst pair.

    For one commodity (src, dst) the LP has a flow variable per directed
    edge, unit capacity on switch-to-switch edges, exactly k units
    leaving the ingress switch of src, flow conservation everywhere
    else, and the total flow (i.e. the summed path length) as objective.
"""

import logging

from routing.errors import RoutingError, TopologyError
from routing.lp import Eq, Leq, LinearProgram, var, lp_sum, minus
from routing.partition import partition_flows
from routing.recovery import recover_paths
from routing.solution import build_name_table, parse_solution
from routing.solver import SolverRequest
from topology.readtopo import edge_connects_switches, is_switch, \
                              name_of_vertex, neighboring_edges, \
                              string_of_edge

log = logging.getLogger(__name__)

OBJECTIVE = "Z"

def string_of_pair(topo, pair):
    (src, dst) = pair
    return "%s--%s" % (name_of_vertex(topo, src), name_of_vertex(topo, dst))

def var_name(topo, edge, pair):

    """ flow of commodity pair on edge, eg: f_h1--h2_s1--s2 """

    return "f_%s_%s" % (string_of_pair(topo, pair), string_of_pair(topo, edge))

def var_name_rev(topo, edge, pair):

    """ flow of commodity pair on the opposite direction of edge """

    (u, v) = edge
    return var_name(topo, (v, u), pair)

def ingress_switch(topo, src):

    """ the switch src hangs off """

    switches = [v for (u, v) in neighboring_edges(topo, src)
                if is_switch(topo, v)]
    if not switches:
        raise TopologyError("%s has no neighboring switch"
                            % name_of_vertex(topo, src))
    if len(switches) > 1:
        log.warning("%s has %d neighboring switches, using %s",
                    name_of_vertex(topo, src), len(switches),
                    name_of_vertex(topo, switches[0]))
    return switches[0]

def capacity_constraints(topo, src, dst, init_acc):

    """ every inter-switch edge carries at most one unit of flow """

    acc = list(init_acc)
    for edge in topo.edges():
        if edge_connects_switches(topo, edge):
            name = "cap-%s-%s_%s" % (name_of_vertex(topo, src),
                                     name_of_vertex(topo, dst),
                                     string_of_edge(topo, edge))
            acc.append(Leq(name, var(var_name(topo, edge, (src, dst))), 1.0))
    return acc

def num_path_constraints(topo, src, dst, k, init_acc):

    """ the net flow from the ingress switch of src into the rest of
        the switch fabric is exactly k """

    ingress = ingress_switch(topo, src)

    diffs = []
    for edge in neighboring_edges(topo, ingress):
        if edge_connects_switches(topo, edge):
            forward_amt = var(var_name(topo, edge, (src, dst)))
            reverse_amt = var(var_name_rev(topo, edge, (src, dst)))
            diffs.append(minus(forward_amt, reverse_amt))

    name = "num-%s-%s" % (name_of_vertex(topo, src), name_of_vertex(topo, dst))
    return list(init_acc) + [Eq(name, lp_sum(diffs), float(k))]

def conservation_constraints_st(topo, src, dst, init_acc):

    """ every vertex but src and dst forwards all it receives """

    acc = list(init_acc)
    for v in topo.nodes():
        if v == src or v == dst:
            continue
        edges = neighboring_edges(topo, v)
        outgoing = [var(var_name(topo, e, (src, dst))) for e in edges]
        incoming = [var(var_name_rev(topo, e, (src, dst))) for e in edges]
        net = minus(lp_sum(outgoing), lp_sum(incoming))
        name = "con-%s-%s_%s" % (name_of_vertex(topo, src),
                                 name_of_vertex(topo, dst),
                                 name_of_vertex(topo, v))
        acc.append(Eq(name, net, 0.0))
    return acc

def minimize_path_lengths(topo, src, dst, init_acc):

    """ Z equals the flow summed over all edges, i.e. the total length
        of the k paths """

    paths_list = [var(var_name(topo, e, (src, dst))) for e in topo.edges()]
    path_length_obj = minus(lp_sum(paths_list), var(OBJECTIVE))
    name = "obj-%s-%s" % (name_of_vertex(topo, src), name_of_vertex(topo, dst))
    return list(init_acc) + [Eq(name, path_length_obj, 0.0)]

def lp_of_st(topo, src, dst, k, init_acc=()):

    """ the complete LP of one commodity """

    constraints = capacity_constraints(topo, src, dst, init_acc)
    constraints = num_path_constraints(topo, src, dst, k, constraints)
    constraints = conservation_constraints_st(topo, src, dst, constraints)
    constraints = minimize_path_lengths(topo, src, dst, constraints)

    return LinearProgram(OBJECTIVE, constraints)

def solve_pair(topo, src, dst, config, solver, recover=recover_paths):

    """ route one commodity, return its {path: weight} entry or None
        when no k edge-disjoint paths exist """

    # rebuilt for every pair, nothing is shared between solves
    name_table = build_name_table(topo)

    lp = lp_of_st(topo, src, dst, config.budget)

    response = solver.solve(SolverRequest(lp))

    solution = parse_solution(response.lines(), name_table,
                              config.demand_divisor, config.cap_divisor)

    if not solution.feasible:
        log.info("no %d edge-disjoint paths from %s to %s", config.budget,
                 name_of_vertex(topo, src), name_of_vertex(topo, dst))

    log.debug("%s: objective %f, %d flows, solved in %f seconds",
              string_of_pair(topo, (src, dst)), solution.objective,
              len(solution.flows), response.solve_time)

    flow_groups = partition_flows(solution.flows, [(src, dst)])

    scheme = recover(topo, flow_groups)

    return scheme.get((src, dst))

def solve(topo, pairs, config, solver, recover=recover_paths, strict=False):

    """ Given a topology and the demand pairs, returns k edge-disjoint
        shortest paths per src-dst pair.

        scheme: dict eg: scheme[(src, dst)] = {((0, 2), (2, 1)): 1.0}

        A pair without k edge-disjoint paths, or whose solve failed, has
        no entry. Failures are logged and skipped unless strict is set.
    """

    scheme = {}

    for (src, dst) in pairs:
        try:
            entry = solve_pair(topo, src, dst, config, solver, recover)
        except RoutingError as e:
            if strict:
                raise
            log.error("routing %s failed (%s): %s",
                      string_of_pair(topo, (src, dst)), e.kind, e)
            continue
        if entry is not None:
            scheme[(src, dst)] = entry

    log.info("routed %d of %d pairs", len(scheme), len(pairs))

    return scheme
