"""Schema node kinds."""

from __future__ import annotations

from enum import Enum


class NodeKind(Enum):
    """Kinds of nodes in a compiled schema tree."""

    ROOT = "Root"
    PROPERTY = "Property"
    ACTION_STRING = "ActionString"
    ACTION_FUNCTION = "ActionFunction"
    ACTION_AGGREGATOR = "ActionAggregator"
    ACTION_SELECTOR = "ActionSelector"

    @property
    def is_action(self) -> bool:
        """True for kinds that carry a prepared action."""
        return self not in (NodeKind.ROOT, NodeKind.PROPERTY)
