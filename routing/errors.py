# Filename: errors.py

""" exceptions raised while routing a commodity """

class RoutingError(Exception):

    """ base class, kind names the failure class in logs """

    kind = "routing"

class TopologyError(RoutingError):

    """ the topology (or a file describing it) is malformed """

    kind = "topology"

class SolverError(RoutingError):

    """ the external solver could not be run or exited abnormally """

    kind = "solver"

    def __init__(self, message, returncode=None):
        RoutingError.__init__(self, message)
        self.returncode = returncode

class ParseError(RoutingError):

    """ the solver result could not be interpreted """

    kind = "parse"

    def __init__(self, message, line=None):
        RoutingError.__init__(self, message)
        self.line = line

    def __str__(self):
        if self.line is None:
            return self.args[0]
        return "%s (line: %r)" % (self.args[0], self.line)
