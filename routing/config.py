# Filename: config.py

""" defaults for the edge-disjoint routing and the object carrying them """

import random

# Number of edge-disjoint paths per pair
BUDGET = 3

# gurobi_cl Method parameter, -1 lets gurobi choose
GUROBI_METHOD = -1

OPTIMALITY_TOL = "1e-9"

# The objective ratio reported by the solver is multiplied by
# DEMAND_DIVISOR and divided by CAP_DIVISOR
DEMAND_DIVISOR = 1.0
CAP_DIVISOR = 1.0

# Directory for the scratch .lp and .sol files
LP_DIR = "lp"

class EdkspConfig(object):

    def __init__(self, budget=BUDGET, method=GUROBI_METHOD, seed=None,
                 demand_divisor=DEMAND_DIVISOR, cap_divisor=CAP_DIVISOR,
                 lp_dir=LP_DIR, keep_files=False, timeout=None):
        self.budget = budget
        self.method = method
        self.seed = seed
        self.demand_divisor = demand_divisor
        self.cap_divisor = cap_divisor
        self.lp_dir = lp_dir
        self.keep_files = keep_files
        self.timeout = timeout

    def make_rng(self):

        """ a fresh generator, seeded when a seed was configured """

        return random.Random(self.seed)

    def __repr__(self):
        return ("EdkspConfig(budget=%r, method=%r, seed=%r, "
                "demand_divisor=%r, cap_divisor=%r, lp_dir=%r)"
                % (self.budget, self.method, self.seed,
                   self.demand_divisor, self.cap_divisor, self.lp_dir))
