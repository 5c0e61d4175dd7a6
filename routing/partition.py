# Filename: partition.py

def partition_flows(flows, pairs=()):

    """ Partition the edge flows based on which commodity they are.

        flow_groups: dict
            eg: flow_groups[(src, dst)] = [(edge_src, edge_dst, amount)]

        Every pair in pairs gets a group, empty if the solver assigned it
        no flow. The order inside a group carries no meaning.
    """

    flow_groups = {}

    for pair in pairs:
        flow_groups[pair] = []

    for flow in flows:
        pair = (flow.demand_src, flow.demand_dst)
        if pair not in flow_groups:
            flow_groups[pair] = []
        flow_groups[pair].append((flow.edge_src, flow.edge_dst, flow.amount))

    return flow_groups
