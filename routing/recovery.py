# Filename: recovery.py

""" Path recovery: turning per-commodity edge flows into weighted paths.

    This is the decomposition service the edge-disjoint routing hands its
    flow table to; any callable with the signature of recover_paths can
    be used instead.
"""

import logging

from topology.readtopo import name_of_vertex

log = logging.getLogger(__name__)

# flows below this are solver noise
FLOW_EPSILON = 1e-6

def search_path(src, dst, residual):

    """ deep first search for a path from src to dst over the edges
        with residual flow, returned as a list of edges """

    out = {}
    for (u, v) in residual:
        out.setdefault(u, []).append(v)

    visited = set([src])
    stack = [(src, [])]
    while stack:
        (node, path) = stack.pop()
        if node == dst:
            return path
        for next_node in out.get(node, []):
            if next_node in visited:
                continue
            visited.add(next_node)
            stack.append((next_node, path + [(node, next_node)]))

    return None

def decompose(src, dst, edge_flows):

    """ {path: flow} for one commodity, paths are tuples of edges """

    residual = {}
    for (edge_src, edge_dst, amount) in edge_flows:
        edge = (edge_src, edge_dst)
        residual[edge] = residual.get(edge, 0.0) + amount

    for edge in [e for e in residual if residual[e] <= FLOW_EPSILON]:
        del residual[edge]

    paths = {}
    while True:
        path = search_path(src, dst, residual)
        if not path:
            break
        bottleneck = min(residual[edge] for edge in path)
        for edge in path:
            residual[edge] -= bottleneck
            if residual[edge] <= FLOW_EPSILON:
                del residual[edge]
        path = tuple(path)
        paths[path] = paths.get(path, 0.0) + bottleneck

    return paths

def recover_paths(topo, flow_groups):

    """ scheme: dict eg: scheme[(src, dst)] = {path: weight}
        weights of a pair sum to 1, pairs without a path are left out """

    scheme = {}

    for (src, dst), edge_flows in flow_groups.items():
        paths = decompose(src, dst, edge_flows)
        total = sum(paths.values())
        if not paths or total <= FLOW_EPSILON:
            continue
        scheme[(src, dst)] = dict((path, flow / total)
                                  for path, flow in paths.items())
        log.debug("%s -> %s: %d paths", name_of_vertex(topo, src),
                  name_of_vertex(topo, dst), len(paths))

    return scheme

def normalization_recovery(scheme, failed_edges):

    """ Drop every path crossing a failed link (in either direction) and
        renormalize the remaining weights of its pair. A pair left with
        no path loses its entry. """

    failed = set()
    for (u, v) in failed_edges:
        failed.add((u, v))
        failed.add((v, u))

    recovered = {}
    for pair, paths in scheme.items():
        alive = dict((path, weight) for path, weight in paths.items()
                     if not any(edge in failed for edge in path))
        total = sum(alive.values())
        if total <= 0:
            log.info("pair %r lost all its paths", pair)
            continue
        recovered[pair] = dict((path, weight / total)
                               for path, weight in alive.items())

    return recovered
