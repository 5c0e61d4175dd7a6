import os

import networkx as nx
import pytest

from topology.readtopo import add_link, add_vertex

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

def build_topology(switches, hosts, links):
    topo = nx.DiGraph()
    vertex = {}
    for name in switches:
        vertex[name] = add_vertex(topo, name, "switch")
    for name in hosts:
        vertex[name] = add_vertex(topo, name, "host")
    for (fst, sec) in links:
        add_link(topo, vertex[fst], vertex[sec])
    return topo

@pytest.fixture
def ring():
    """ s1..s4 in a ring with the chord s1-s3; h1 on s1, h2 on s3,
        h3 on s2. Vertex ids: s1=0 s2=1 s3=2 s4=3 h1=4 h2=5 h3=6 """
    return build_topology(
        ["s1", "s2", "s3", "s4"], ["h1", "h2", "h3"],
        [("s1", "s2"), ("s2", "s3"), ("s3", "s4"), ("s4", "s1"),
         ("s1", "s3"), ("h1", "s1"), ("h2", "s3"), ("h3", "s2")])

@pytest.fixture
def example_topology_file():
    return os.path.join(ROOT, "topology", "example.txt")

@pytest.fixture
def example_demands_file():
    return os.path.join(ROOT, "traffic", "example_demands.txt")

# two edge-disjoint paths from h1 to h2 on the ring:
# h1-s1-s3-h2 and h1-s1-s2-s3-h2
TWO_PATHS_RESULT = """\
# Solution for model obj
# Objective value = 7
Z 7
f_h1--h2_h1--s1 2
f_h1--h2_s1--h1 0
f_h1--h2_s1--s3 1
f_h1--h2_s3--s1 0
f_h1--h2_s3--h2 2
f_h1--h2_s1--s2 1
f_h1--h2_s2--s3 1
f_h1--h2_s1--s4 0
"""

@pytest.fixture
def two_paths_result():
    return TWO_PATHS_RESULT
