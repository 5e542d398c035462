"""Recursive ID3 decision tree induction over :class:`~id3_tlbx.data.entries.Entries`."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from .base_analyser import BaseAnalyser
from .decision_tree import Leaf, Node, Split, count_leaves, predict, render_tree, tree_depth


if TYPE_CHECKING:
    from id3_tlbx.data.entries import Entries


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DecisionTreeResult:
    """Induced decision tree with presentation metadata.

    Attributes:
        tree: Root node.
        attribute_names: Attribute column names in attribute id order.
        class_labels: Class labels present in the training data, sorted.
        depth: Number of splits on the longest root-to-leaf path.
        n_leaves: Number of leaves.
        pretty_by_col: Mapping from attribute names to presentation labels.
    """

    tree: Node
    attribute_names: list[str]
    class_labels: list[str]
    depth: int
    n_leaves: int
    pretty_by_col: dict[str, str]

    def predict(self, attributes: Sequence[str]) -> str:
        """Classify one row of attribute values (class column excluded)."""
        if len(attributes) != len(self.attribute_names):
            raise ValueError(f"Expected {len(self.attribute_names)} attribute values, got {len(attributes)}")
        return predict(self.tree, attributes)

    def render(self) -> str:
        """Render the tree as indented text."""
        return render_tree(self.tree, self.pretty_by_col)


class ID3TreeBuilder(BaseAnalyser):
    """Greedy top-down tree induction choosing splits by maximum information gain.

    At every node the builder checks, in this order:

    1. ``is_empty()`` - an empty branch becomes a leaf labelled with the parent's majority class.
    2. ``are_all_entries_with_same_class()`` - a pure node becomes a leaf with that class.
    3. ``get_attribute_with_highest_information_gain()`` - the node splits on the chosen attribute, one
       branch per observed value. Only attributes with at least two observed values at the node are
       candidates; when none is left the node becomes a majority-class leaf.

    Example:
        >>> from id3_tlbx.data import Entries
        >>> res = ID3TreeBuilder(Entries.from_csv()).fit().result()
        >>> res.depth, res.n_leaves
        (2, 5)
    """

    def __init__(self, entries: "Entries") -> None:
        """Initialize the builder with the training table."""
        self._entries = entries
        self._tree: Node | None = None

    def fit(self) -> Self:
        """Induce the tree.

        Raises:
            ValueError: If the training table is empty.
        """
        if self._entries.is_empty():
            raise ValueError("Cannot build a decision tree from an empty dataset.")

        self._tree = self._grow(self._entries, fallback=self._entries.majority_class(), depth=0)
        logger.debug(
            "Built tree with depth %d and %d leaves from %d entries",
            tree_depth(self._tree),
            count_leaves(self._tree),
            len(self._entries),
        )
        return self

    def _grow(self, entries: "Entries", fallback: str, depth: int) -> Node:
        if entries.is_empty():
            return Leaf(label=fallback, n_entries=0)
        if entries.are_all_entries_with_same_class():
            (label,) = entries.get_classes()
            return Leaf(label=label, n_entries=len(entries))

        majority = entries.majority_class()
        candidates = entries.splittable_attributes()
        if not candidates:
            logger.debug("No splittable attribute at depth %d, %d entries -> %s", depth, len(entries), majority)
            return Leaf(label=majority, n_entries=len(entries))

        attribute_id = entries.get_attribute_with_highest_information_gain(candidates=candidates)
        values = sorted(entries.get_all_possible_attribute_values(attribute_id))

        attribute = entries.attribute_name(attribute_id)
        logger.debug("Depth %d: split %d entries on '%s' (%d values)", depth, len(entries), attribute, len(values))
        branches = {
            value: self._grow(entries.partition(attribute_id, value), fallback=majority, depth=depth + 1)
            for value in values
        }
        return Split(
            attribute_id=attribute_id,
            attribute=attribute,
            branches=branches,
            majority=majority,
            n_entries=len(entries),
        )

    def result(self) -> DecisionTreeResult:
        """Return the induced tree.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._tree is None:
            raise ValueError("Must call fit() before result()")

        return DecisionTreeResult(
            tree=self._tree,
            attribute_names=self._entries.attribute_names,
            class_labels=sorted(self._entries.get_classes()),
            depth=tree_depth(self._tree),
            n_leaves=count_leaves(self._tree),
            pretty_by_col={name: self._entries.get_pretty_name(name) for name in self._entries.attribute_names},
        )
