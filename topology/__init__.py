""" reading switch/host topologies """
