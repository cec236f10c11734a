"""Route graph construction and traversal.

This subpackage links flat segment records into per-route chains and
runs the endpoint, traversal and path-finding algorithms on top of them.
"""
