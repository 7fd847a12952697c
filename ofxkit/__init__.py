"""Building blocks for OFX clients: aggregates, ordered trees and XML node queries."""

__version__ = "0.10.9"

__all__ = [
    "aggregate",
    "nodeparser",
    "traversal",
    "tree",
    "treenode",
]