"""Entity components: plain data attached to entities by their id."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, ClassVar, Optional, Protocol, Sequence, Tuple

from .actions import ActionID
from .events import MouseButton, MouseButtonPressed, MouseMoved
from .widget import WidgetNode, WidgetNodeType

EntityID = int
MAX_NUM_ENTITIES = 1024

Color = Tuple[int, int, int, int]
Vector = Tuple[float, float]


class ComponentType(Enum):
    """Kinds of component an entity may carry."""

    TEXT = auto()
    SPRITE = auto()
    TRANSFORM = auto()
    BOUNDING_BOX = auto()
    MOUSE_OVER = auto()
    LEFT_CLICK = auto()
    RIGHT_CLICK = auto()
    WIDGET = auto()
    CREATURE = auto()


class _SizedTexture(Protocol):
    @property
    def size(self) -> Tuple[int, int]: ...


class _TextMeasurer(Protocol):
    def size(self, text: str) -> Tuple[int, int]: ...


class _ScalableFont(Protocol):
    def sized(self, size: int) -> _TextMeasurer: ...


class _ActionTarget(Protocol):
    bounding_boxes: Sequence["BoundingBoxComponent"]

    def do_action(self, action: ActionID, owner_id: Optional[EntityID] = None) -> None: ...


@dataclass
class Rect:
    """Axis-aligned rectangle; contains its left and top edges only."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def contains(self, point: Tuple[float, float]) -> bool:
        """Whether ``point`` lies inside the rectangle."""
        px, py = point
        return self.x <= px < self.x + self.width and self.y <= py < self.y + self.height


@dataclass
class Transformable:
    """Position, scale and origin of a drawable."""

    position: Vector = (0.0, 0.0)
    scale: Vector = (1.0, 1.0)
    origin: Vector = (0.0, 0.0)


def _global_bounds(
    transformable: Transformable, left: float, top: float, width: float, height: float
) -> Rect:
    (px, py), (sx, sy), (ox, oy) = (
        transformable.position,
        transformable.scale,
        transformable.origin,
    )
    xs = [(lx - ox) * sx + px for lx in (left, left + width)]
    ys = [(ly - oy) * sy + py for ly in (top, top + height)]
    return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))


@dataclass
class Component:
    """Data shared by every component."""

    TYPE: ClassVar[ComponentType]

    owner_id: EntityID = 0
    enabled: bool = False

    def initialize(self, owner_id: EntityID) -> None:
        """Attach the component to ``owner_id`` and enable it."""
        self.owner_id = owner_id
        self.enabled = True


@dataclass
class TransformComponent(Component):
    """Placement of an entity on screen."""

    TYPE: ClassVar[ComponentType] = ComponentType.TRANSFORM

    transformable: Transformable = field(default_factory=Transformable)


@dataclass
class SpriteComponent(Component):
    """An entity drawn from a texture."""

    TYPE: ClassVar[ComponentType] = ComponentType.SPRITE

    texture: Optional[Any] = None


@dataclass
class TextComponent(Component):
    """An entity drawn as a line of text."""

    TYPE: ClassVar[ComponentType] = ComponentType.TEXT

    font: Optional[Any] = None
    character_size: int = 0
    outline_thickness: float = 0.0
    outline_color: Color = (0, 0, 0, 0)
    fill_color: Color = (0, 0, 0, 0)
    contents: str = ""

    def setup(
        self,
        font: _ScalableFont,
        character_size: int,
        outline_thickness: float,
        outline_color: Color,
        fill_color: Color,
        contents: str,
    ) -> None:
        """Set the font, styling and contents of the text."""
        self.font = font
        self.character_size = character_size
        self.outline_thickness = outline_thickness
        self.outline_color = outline_color
        self.fill_color = fill_color
        self.contents = contents


@dataclass
class BoundingBoxComponent(Component):
    """Screen-space bounds of an entity, used for mouse hit testing."""

    TYPE: ClassVar[ComponentType] = ComponentType.BOUNDING_BOX

    rect: Rect = field(default_factory=Rect)

    def update_from_sprite(self, transform: TransformComponent, sprite: SpriteComponent) -> None:
        """Recompute the bounds of a sprite placed by ``transform``."""
        width, height = sprite.texture.size
        self.rect = _global_bounds(transform.transformable, 0.0, 0.0, width, height)

    def update_from_text(self, transform: TransformComponent, text: TextComponent) -> None:
        """Recompute the bounds of a text placed by ``transform``; scale is ignored."""
        width, height = text.font.sized(text.character_size).size(text.contents)
        outline = text.outline_thickness
        placement = Transformable(
            position=transform.transformable.position,
            origin=transform.transformable.origin,
        )
        self.rect = _global_bounds(
            placement, -outline, -outline, width + 2 * outline, height + 2 * outline
        )


@dataclass
class WidgetComponent(Component):
    """Links an entity into the widget tree."""

    TYPE: ClassVar[ComponentType] = ComponentType.WIDGET

    node: WidgetNode = field(default_factory=lambda: WidgetNode(WidgetNodeType.MENU))


@dataclass
class CreatureComponent(Component):
    """A creature living on the map."""

    TYPE: ClassVar[ComponentType] = ComponentType.CREATURE

    name: str = ""
    location: Tuple[int, int] = (0, 0)
    texture: Optional[Any] = None

    def setup(self, name: str, location: Tuple[int, int], texture: Any) -> None:
        """Set the creature's name, map location and texture."""
        self.name = name
        self.location = location
        self.texture = texture


@dataclass
class MouseOverComponent(Component):
    """Triggers an action when the mouse moves over the entity."""

    TYPE: ClassVar[ComponentType] = ComponentType.MOUSE_OVER

    triggered_action: ActionID = ActionID.NULL

    def notify(self, game_state: _ActionTarget, event: Optional[Any] = None) -> None:
        """Perform the action if ``event`` is a move inside the entity's bounds."""
        if not isinstance(event, MouseMoved):
            return
        if game_state.bounding_boxes[self.owner_id].rect.contains(event.position):
            game_state.do_action(self.triggered_action, self.owner_id)


@dataclass
class LeftClickComponent(Component):
    """Triggers an action when the entity is left-clicked."""

    TYPE: ClassVar[ComponentType] = ComponentType.LEFT_CLICK

    triggered_action: ActionID = ActionID.NULL

    def notify(self, game_state: _ActionTarget, event: Optional[Any] = None) -> None:
        """Perform the action if ``event`` is a left click inside the entity's bounds."""
        if not isinstance(event, MouseButtonPressed) or event.button is not MouseButton.LEFT:
            return
        if game_state.bounding_boxes[self.owner_id].rect.contains(event.position):
            game_state.do_action(self.triggered_action, self.owner_id)