from .protocol import GraphBackend, NodeHandle, EdgeRef
from .adjlist import AdjListGraph
from .nxgraph import NetworkXBackend, WEIGHT_ATTR

__all__ = [
    "GraphBackend",
    "NodeHandle",
    "EdgeRef",
    "AdjListGraph",
    "NetworkXBackend",
    "WEIGHT_ATTR",
]
