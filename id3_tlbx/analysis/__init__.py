"""Entropy computations and analyzers for ID3 split selection."""

from .decision_tree import Leaf, Node, Split, count_leaves, predict, render_tree, tree_depth
from .entropy import PROBABILITY_SUM_TOLERANCE, calculate_average_information_entropy, calculate_entropy
from .information_gain import InformationGainAnalyzer, InformationGainResult
from .tree_builder import DecisionTreeResult, ID3TreeBuilder


__all__ = [
    "PROBABILITY_SUM_TOLERANCE",
    "DecisionTreeResult",
    "ID3TreeBuilder",
    "InformationGainAnalyzer",
    "InformationGainResult",
    "Leaf",
    "Node",
    "Split",
    "calculate_average_information_entropy",
    "calculate_entropy",
    "count_leaves",
    "predict",
    "render_tree",
    "tree_depth",
]
