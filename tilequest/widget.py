"""Tree of user-interface widgets such as menus and their options."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional


class WidgetNodeType(Enum):
    """Kind of widget a node represents."""

    MENU = auto()
    MENU_OPTION = auto()


@dataclass(eq=False)
class WidgetNode:
    """A node in the widget tree; nodes compare by identity."""

    type: WidgetNodeType
    parent: Optional[WidgetNode] = field(default=None, repr=False)
    children: List[WidgetNode] = field(default_factory=list, repr=False)

    def add_child(self, child: WidgetNode) -> None:
        """Attach ``child`` as the last child of this node."""
        child.parent = self
        self.children.append(child)

    def index(self) -> Optional[int]:
        """Position of this node among its parent's children, or None."""
        if self.parent is None:
            return None
        for position, sibling in enumerate(self.parent.children):
            if sibling is self:
                return position
        return None