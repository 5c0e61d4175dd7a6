# Filename: readdemand.py

import logging

from routing.errors import TopologyError
from topology.readtopo import is_host, vertex_by_name

log = logging.getLogger(__name__)

def read_demands(filename, topo):

    """ read demand pairs from filename
        each line is "src dst [volume]", names as in the topology file
        demands: dict eg: demands[(src, dst)] = 100.0 """

    demands = {}

    with open(filename) as f:
        for lineno, line in enumerate(f, 1):
            word = line.split()
            if not word or word[0].startswith("#"):
                continue
            if len(word) not in (2, 3):
                raise TopologyError("%s:%d: cannot parse %r"
                                    % (filename, lineno, line.rstrip("\n")))
            pair = []
            for name in word[:2]:
                v = vertex_by_name(topo, name)
                if v is None:
                    raise TopologyError("%s:%d: unknown vertex %s"
                                        % (filename, lineno, name))
                pair.append(v)
            volume = 1.0
            if len(word) == 3:
                try:
                    volume = float(word[2])
                except ValueError:
                    raise TopologyError("%s:%d: bad volume %s"
                                        % (filename, lineno, word[2]))
            # only the presence of the pair matters to the router
            demands[tuple(pair)] = demands.get(tuple(pair), 0.0) + volume

    log.info("read %d demand pairs from %s", len(demands), filename)

    return demands

def host_pairs(topo):

    """ every ordered pair of distinct hosts, used when no demand
        file is given """

    hosts = [v for v in topo.nodes() if is_host(topo, v)]

    return [(src, dst) for src in hosts for dst in hosts if src != dst]
