# Filename: readtopo.py

""" read a switch/host topology into a networkx graph """

import logging

import networkx as nx

from routing.errors import TopologyError

log = logging.getLogger(__name__)

SWITCH = "switch"
HOST = "host"

def read_topology(filename):

    """ Read topology from filename.

        The file is line based:
            # comment
            switch s1
            host h1
            link h1 s1 [capacity]

        Every link is stored as two directed edges, one per direction.
        Vertices are numbered from 0 in the order they are declared and
        carry their 'name' and 'kind' as node attributes.
    """

    topo = nx.DiGraph()
    vertex = {}

    with open(filename) as f:
        for lineno, line in enumerate(f, 1):
            word = line.split()
            if not word or word[0].startswith("#"): # this line is comment
                continue
            if word[0] in (SWITCH, HOST) and len(word) == 2:
                if word[1] in vertex:
                    raise TopologyError("%s:%d: vertex %s declared twice"
                                        % (filename, lineno, word[1]))
                vertex[word[1]] = add_vertex(topo, word[1], word[0])
            elif word[0] == "link" and len(word) in (3, 4):
                for name in word[1:3]:
                    if name not in vertex:
                        raise TopologyError("%s:%d: unknown vertex %s"
                                            % (filename, lineno, name))
                capacity = None
                if len(word) == 4:
                    try:
                        capacity = float(word[3])
                    except ValueError:
                        raise TopologyError("%s:%d: bad capacity %s"
                                            % (filename, lineno, word[3]))
                add_link(topo, vertex[word[1]], vertex[word[2]], capacity)
            else:
                raise TopologyError("%s:%d: cannot parse %r"
                                    % (filename, lineno, line.rstrip("\n")))

    log.info("read %d vertices and %d edges from %s",
             topo.number_of_nodes(), topo.number_of_edges(), filename)

    return topo

def add_vertex(topo, name, kind):

    """ add a vertex and return its id """

    v = topo.number_of_nodes()
    topo.add_node(v, name=name, kind=kind)
    return v

def add_link(topo, fst, sec, capacity=None):

    """ add both directions of a physical link """

    for (u, v) in ((fst, sec), (sec, fst)):
        if capacity is None:
            topo.add_edge(u, v)
        else:
            topo.add_edge(u, v, capacity=capacity)

def name_of_vertex(topo, v):
    return topo.nodes[v]["name"]

def is_switch(topo, v):
    return topo.nodes[v]["kind"] == SWITCH

def is_host(topo, v):
    return topo.nodes[v]["kind"] == HOST

def edge_connects_switches(topo, edge):
    (u, v) = edge
    return is_switch(topo, u) and is_switch(topo, v)

def neighboring_edges(topo, v):

    """ outgoing edges of v, in insertion order """

    return list(topo.out_edges(v))

def string_of_edge(topo, edge):
    (u, v) = edge
    return "%s--%s" % (name_of_vertex(topo, u), name_of_vertex(topo, v))

def vertex_by_name(topo, name):

    """ linear lookup of a vertex by its label, None when absent """

    for v, label in topo.nodes(data="name"):
        if label == name:
            return v
    return None
