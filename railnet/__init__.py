"""Top-level package for the rail network route finder.

The network is loaded once from flat route-segment records, linked into
per-route chains, and then queried for termini, station listings and
paths between stations.
"""
