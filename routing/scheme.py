# Filename: scheme.py

""" Saving and loading a routing scheme.

    Paths from h1 to h2
    Path 1     h1-s1-s2-h2     50.000000%
    Path 2     h1-s1-s3-s2-h2     50.000000%
"""

from routing.errors import TopologyError
from routing.solution import build_name_table
from topology.readtopo import name_of_vertex

SEP = "     "

def route_of_path(topo, path):

    """ "h1-s1-s2" from ((h1, s1), (s1, s2)) """

    if not path:
        return ""
    nodes = [path[0][0]] + [v for (u, v) in path]
    return "-".join(name_of_vertex(topo, v) for v in nodes)

def path_of_route(name_table, route):
    switch = route.split("-")
    nodes = []
    for name in switch:
        if name not in name_table:
            raise TopologyError("unknown vertex %s in route %s" % (name, route))
        nodes.append(name_table[name])
    return tuple((nodes[i], nodes[i + 1]) for i in range(len(nodes) - 1))

def write_scheme(f, topo, scheme):

    """ write the scheme to the open file f, pairs and paths sorted """

    for (src, dst) in sorted(scheme):
        f.write("Paths from %s to %s\n" % (name_of_vertex(topo, src),
                                          name_of_vertex(topo, dst)))
        count = 1
        for path in sorted(scheme[(src, dst)]):
            f.write("Path %d%s%s%s%f%%\n" % (count, SEP, route_of_path(topo, path),
                                           SEP, scheme[(src, dst)][path] * 100))
            count = count + 1
        f.write("\n")

def read_scheme(filename, topo):

    """ read a scheme written by write_scheme """

    name_table = build_name_table(topo)

    scheme = {}
    pair = None

    with open(filename) as f:
        for line in f:
            word = line.split(" ")
            if word[0] == "Paths":
                src = name_table.get(word[2])
                dst = name_table.get(word[4].rstrip("\n"))
                if src is None or dst is None:
                    raise TopologyError("unknown pair in %r" % line)
                pair = (src, dst)
                scheme[pair] = {}
            elif word[0] == "Path":
                if pair is None:
                    raise TopologyError("path before any pair in %s" % filename)
                field = line.rstrip("\n").split(SEP)
                path = path_of_route(name_table, field[1])
                percent = float(field[2].split("%")[0])
                scheme[pair][path] = percent / 100

    return scheme
