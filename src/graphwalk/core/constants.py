"""
Default settings for the graph traversal engine.

This module defines the defaults used when callers do not pass explicit values:
- Edge distances for shortest paths
- Graph export naming
- Memory guard sampling
"""

# Distance of an edge when no distance function is given
DEFAULT_EDGE_DISTANCE = 1

# Graph export
DEFAULT_GRAPH_NAME = "graph"
VERTEX_ID_PREFIX = "v"

# Seconds between two process memory samples
MEMORY_CHECK_INTERVAL = 0.1
