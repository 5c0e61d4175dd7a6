""" k edge-disjoint shortest paths routing through an LP solver """
