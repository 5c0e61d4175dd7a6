#!/usr/bin/env python
# edksp.py
#
# Compute k edge-disjoint shortest paths for every demand pair of a
# topology and write them in the path file format.
#
# $ python edksp.py topology/example.txt -d traffic/example_demands.txt -k 2
#
# gurobi_cl has to be on the PATH, or pass --solver cplex with the
# cplex extra installed.

import logging
import sys

from argparse import ArgumentParser

from routing.config import BUDGET, CAP_DIVISOR, DEMAND_DIVISOR, \
                           GUROBI_METHOD, LP_DIR, EdkspConfig
from routing.edge_disjoint_routing import solve
from routing.errors import RoutingError, TopologyError
from routing.recovery import normalization_recovery
from routing.scheme import write_scheme
from routing.solver import GurobiSolver
from topology.readtopo import read_topology, vertex_by_name
from traffic.readdemand import host_pairs, read_demands

log = logging.getLogger("edksp")

def parse_args(argv=None):
    parser = ArgumentParser(description='k edge-disjoint shortest paths routing')
    parser.add_argument('topology', type=str,
                        help='Topology file (switch/host/link lines)')
    parser.add_argument('-d', '--demands', type=str, default=None,
                        help='Demand pairs file, all host pairs by default')
    parser.add_argument('-k', '--budget', type=int, default=BUDGET,
                        help='Number of edge-disjoint paths per pair')
    parser.add_argument('-m', '--method', type=int, default=GUROBI_METHOD,
                        help='gurobi_cl Method parameter')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for the scratch file names')
    parser.add_argument('--demand-divisor', type=float, default=DEMAND_DIVISOR)
    parser.add_argument('--cap-divisor', type=float, default=CAP_DIVISOR)
    parser.add_argument('--lp-dir', type=str, default=LP_DIR,
                        help='Directory for the scratch LP files')
    parser.add_argument('--keep-files', action='store_true',
                        help='Keep the scratch LP and result files')
    parser.add_argument('--timeout', type=float, default=None,
                        help='Seconds before the solver is killed')
    parser.add_argument('--solver', type=str, choices=('gurobi', 'cplex'),
                        default='gurobi')
    parser.add_argument('--fail', type=str, action='append', default=[],
                        metavar='A-B',
                        help='Failed link, paths over it are dropped')
    parser.add_argument('--strict', action='store_true',
                        help='Stop at the first pair that fails')
    parser.add_argument('-o', '--output', type=str, default=None,
                        help='Path file to write, stdout by default')
    parser.add_argument('-v', '--verbose', action='store_true')
    return parser.parse_args(argv)

def make_solver(name, config):
    if name == 'cplex':
        from routing.cplex_solver import CplexSolver
        return CplexSolver()
    return GurobiSolver.from_config(config)

def failed_links(topo, specs):
    edges = []
    for spec in specs:
        names = spec.split("-")
        if len(names) != 2:
            raise TopologyError("bad link %s, expected A-B" % spec)
        ends = [vertex_by_name(topo, name) for name in names]
        if None in ends:
            raise TopologyError("unknown link %s" % spec)
        edges.append(tuple(ends))
    return edges

def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s")

    config = EdkspConfig(budget=args.budget, method=args.method,
                         seed=args.seed, demand_divisor=args.demand_divisor,
                         cap_divisor=args.cap_divisor, lp_dir=args.lp_dir,
                         keep_files=args.keep_files, timeout=args.timeout)
    log.info("%s", config)

    try:
        topo = read_topology(args.topology)
        if args.demands:
            pairs = list(read_demands(args.demands, topo))
        else:
            pairs = host_pairs(topo)
        failed = failed_links(topo, args.fail)
        solver = make_solver(args.solver, config)
        scheme = solve(topo, pairs, config, solver, strict=args.strict)
    except RoutingError as e:
        log.error("%s error: %s", e.kind, e)
        return 1

    if failed:
        scheme = normalization_recovery(scheme, failed)

    if args.output:
        with open(args.output, "w") as f:
            write_scheme(f, topo, scheme)
        log.info("paths written to %s", args.output)
    else:
        write_scheme(sys.stdout, topo, scheme)

    return 0

if __name__ == "__main__":
    sys.exit(main())
