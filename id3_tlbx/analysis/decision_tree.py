"""Decision tree nodes produced by the ID3 tree builder."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Leaf:
    """Terminal node predicting a single class label.

    Attributes:
        label: Predicted class label.
        n_entries: Number of training entries that reached this leaf (0 for an empty branch).
    """

    label: str
    n_entries: int = 0


@dataclass(frozen=True)
class Split:
    """Internal node branching on the values of one attribute.

    Attributes:
        attribute_id: Attribute the node splits on (zero-based, class column excluded).
        attribute: Column name of that attribute.
        branches: Child node per observed attribute value, ordered by value.
        majority: Majority class of the entries at this node, used for unseen values.
        n_entries: Number of training entries that reached this node.
    """

    attribute_id: int
    attribute: str
    branches: Mapping[str, "Node"] = field(default_factory=dict)
    majority: str = ""
    n_entries: int = 0


Node = Leaf | Split


def predict(node: Node, attributes: Sequence[str]) -> str:
    """Classify one row of attribute values.

    Args:
        node: Root of the tree.
        attributes: Attribute values in attribute id order (class column excluded).

    Returns:
        The predicted class label. A value never seen during training resolves to the majority class
        of the split where it occurs.
    """
    while isinstance(node, Split):
        child = node.branches.get(attributes[node.attribute_id])
        if child is None:
            return node.majority
        node = child
    return node.label


def tree_depth(node: Node) -> int:
    """Number of splits on the longest root-to-leaf path."""
    if isinstance(node, Leaf):
        return 0
    return 1 + max((tree_depth(child) for child in node.branches.values()), default=0)


def count_leaves(node: Node) -> int:
    if isinstance(node, Leaf):
        return 1
    return sum(count_leaves(child) for child in node.branches.values())


def render_tree(node: Node, pretty_by_col: Mapping[str, str] | None = None, indent: str = "    ") -> str:
    """Render a tree as indented text.

    Example output for the PlayTennis dataset::

        Outlook
            = Overcast -> Yes (4)
            = Rain
                Wind
                    = Strong -> No (2)
                    = Weak -> Yes (3)
            = Sunny
                ...

    Args:
        node: Root of the tree.
        pretty_by_col: Optional mapping from attribute names to display labels.
        indent: Indentation added per tree level.

    Returns:
        Multi-line string without trailing newline.
    """
    pretty_by_col = pretty_by_col or {}
    lines: list[str] = []

    def _walk(current: Node, depth: int) -> None:
        pad = indent * depth
        if isinstance(current, Leaf):
            lines.append(f"{pad}{current.label} ({current.n_entries})")
            return
        lines.append(f"{pad}{pretty_by_col.get(current.attribute, current.attribute)}")
        for value, child in current.branches.items():
            if isinstance(child, Leaf):
                lines.append(f"{pad}{indent}= {value} -> {child.label} ({child.n_entries})")
            else:
                lines.append(f"{pad}{indent}= {value}")
                _walk(child, depth + 2)

    _walk(node, 0)
    return "\n".join(lines)


__all__ = ["Leaf", "Node", "Split", "count_leaves", "predict", "render_tree", "tree_depth"]
