"""Loading, sharing and releasing of fonts, textures, sounds, music and documents."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import ClassVar, Dict, List, Optional, Tuple, Type, Union

import pygame

PathLike = Union[str, Path]

_PROBE_FONT_SIZE = 12


class ResourceType(Enum):
    """Kinds of resource the manager keeps."""

    FONT = auto()
    TEXTURE = auto()
    SOUND = auto()
    MUSIC = auto()
    DOCUMENT = auto()


class ResourceError(Exception):
    """A resource could not be loaded from its file."""

    def __init__(self, resource_id: str, path: PathLike, reason: str = "file not found") -> None:
        super().__init__(f"cannot load resource {resource_id!r} from {str(path)!r}: {reason}")
        self.resource_id = resource_id
        self.path = str(path)


@dataclass(eq=False)
class Resource:
    """Data shared by every resource: identity, origin and reference count."""

    TYPE: ClassVar[ResourceType]

    id: str = ""
    path: str = ""
    ref_count: int = 0

    @property
    def type(self) -> ResourceType:
        return self.TYPE

    def _open(self, path: str) -> None:
        raise NotImplementedError


def _ensure_font_module() -> None:
    if not pygame.font.get_init():
        pygame.font.init()


@dataclass(eq=False)
class Font(Resource):
    """A font file that can be rendered at any character size."""

    TYPE: ClassVar[ResourceType] = ResourceType.FONT

    _sizes: Dict[int, pygame.font.Font] = field(default_factory=dict, repr=False)

    def _open(self, path: str) -> None:
        _ensure_font_module()
        self._sizes = {_PROBE_FONT_SIZE: pygame.font.Font(path, _PROBE_FONT_SIZE)}

    def sized(self, size: int) -> pygame.font.Font:
        """Return this font at character size ``size``."""
        if size <= 0:
            raise ValueError(f"font size must be positive, got {size}")
        if size not in self._sizes:
            _ensure_font_module()
            self._sizes[size] = pygame.font.Font(self.path, size)
        return self._sizes[size]


@dataclass(eq=False)
class Texture(Resource):
    """An image loaded into a surface."""

    TYPE: ClassVar[ResourceType] = ResourceType.TEXTURE

    surface: Optional[pygame.Surface] = field(default=None, repr=False)

    def _open(self, path: str) -> None:
        self.surface = pygame.image.load(path)

    @property
    def size(self) -> Tuple[int, int]:
        """Width and height of the image in pixels."""
        if self.surface is None:
            return (0, 0)
        return self.surface.get_size()


@dataclass(eq=False)
class Sound(Resource):
    """A short sound held fully in memory."""

    TYPE: ClassVar[ResourceType] = ResourceType.SOUND

    data: bytes = field(default=b"", repr=False)

    def _open(self, path: str) -> None:
        self.data = Path(path).read_bytes()


@dataclass(eq=False)
class Music(Resource):
    """A piece of music streamed from its file when played."""

    TYPE: ClassVar[ResourceType] = ResourceType.MUSIC

    def _open(self, path: str) -> None:
        with open(path, "rb"):
            pass


@dataclass(eq=False)
class Document(Resource):
    """A text document kept as a list of lines."""

    TYPE: ClassVar[ResourceType] = ResourceType.DOCUMENT

    contents: List[str] = field(default_factory=list)

    def load_from_file(self, path: PathLike) -> None:
        """Read the lines of the text file at ``path``."""
        self.contents = Path(path).read_text(encoding="utf-8").splitlines()

    def _open(self, path: str) -> None:
        self.load_from_file(path)


_RESOURCE_CLASSES: Dict[ResourceType, Type[Resource]] = {
    ResourceType.FONT: Font,
    ResourceType.TEXTURE: Texture,
    ResourceType.SOUND: Sound,
    ResourceType.MUSIC: Music,
    ResourceType.DOCUMENT: Document,
}


class ResourceManager:
    """Keeps loaded resources by id and type, and counts who uses them."""

    def __init__(self) -> None:
        self._stores: Dict[ResourceType, Dict[str, Resource]] = {
            resource_type: {} for resource_type in ResourceType
        }

    def exists(self, resource_id: str, resource_type: ResourceType) -> bool:
        """Whether a resource of ``resource_type`` is loaded under ``resource_id``."""
        return resource_id in self._stores[resource_type]

    def load(self, resource_id: str, resource_type: ResourceType, path: PathLike) -> Resource:
        """Load the file at ``path`` as ``resource_id``; raise ResourceError on failure."""
        store = self._stores[resource_type]
        resource = _RESOURCE_CLASSES[resource_type]()
        try:
            resource._open(str(path))
        except (OSError, pygame.error, UnicodeDecodeError) as error:
            store.pop(resource_id, None)
            raise ResourceError(resource_id, path, str(error) or "file not found") from error
        resource.id = resource_id
        resource.path = str(path)
        resource.ref_count = 0
        store[resource_id] = resource
        return resource

    def _acquire(self, resource_id: str, resource_type: ResourceType) -> Optional[Resource]:
        resource = self._stores[resource_type].get(resource_id)
        if resource is not None:
            resource.ref_count += 1
        return resource

    def _release(self, resource: Resource) -> None:
        if resource.ref_count <= 0:
            raise ValueError(f"resource {resource.id!r} is not acquired")
        resource.ref_count -= 1
        if resource.ref_count == 0:
            store = self._stores[resource.type]
            if store.get(resource.id) is resource:
                del store[resource.id]

    def acquire_font(self, resource_id: str) -> Optional[Font]:
        """Return the font loaded as ``resource_id`` and count the use, or None."""
        font = self._acquire(resource_id, ResourceType.FONT)
        return font if isinstance(font, Font) else None

    def acquire_texture(self, resource_id: str) -> Optional[Texture]:
        """Return the texture loaded as ``resource_id`` and count the use, or None."""
        texture = self._acquire(resource_id, ResourceType.TEXTURE)
        return texture if isinstance(texture, Texture) else None

    def release_font(self, font: Font) -> None:
        """Give up one use of ``font``; the last release unloads it."""
        self._release(font)

    def release_texture(self, texture: Texture) -> None:
        """Give up one use of ``texture``; the last release unloads it."""
        self._release(texture)