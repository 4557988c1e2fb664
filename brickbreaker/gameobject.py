"""Base class for everything that moves or is hit on the playing field."""

from abc import ABC, abstractmethod
from typing import IO, ClassVar, Optional

from .defs import ObjectSubType, ObjectType
from .resources import ResourceError, Texture
from .utils import TokenReader


class GameObject(ABC):
    """A textured box with a position, a size and a sub-type."""

    object_type: ClassVar[ObjectType]

    def __init__(
        self,
        pos_x: float = 0.0,
        pos_y: float = 0.0,
        width: int = 0,
        height: int = 0,
        sub_type: Optional[ObjectSubType] = None,
    ) -> None:
        self.pos_x = pos_x
        self.pos_y = pos_y
        self.width = width
        self.height = height
        self.sub_type = sub_type
        self.texture: Optional[Texture] = None

    def _require_texture(self) -> Texture:
        if self.texture is None:
            raise ResourceError(f"{type(self).__name__} has no texture")
        return self.texture

    def render(self, target) -> None:
        """Draw the object's texture stretched over its box."""
        texture = self._require_texture()
        texture.render_scaled(target, (int(self.pos_x), int(self.pos_y), self.width, self.height))

    def render_at(self, target, x: int, y: int) -> None:
        """Draw the object's texture with its own size at the given point."""
        texture = self._require_texture()
        texture.render_scaled(target, (x, y, self.width, self.height))

    def set_texture(self, resources) -> None:
        """Pick the texture matching this object's type and sub-type."""
        self.texture = resources.get_object_texture(self.object_type, self.sub_type)

    @abstractmethod
    def on_collision(self, other: "GameObject", delta_time: int) -> None:
        """React to overlapping another object."""

    def save(self, out: IO[str]) -> None:
        out.write(f"{self.pos_x:g} {self.pos_y:g} {self.width} {self.height}")

    def load(self, reader: TokenReader) -> None:
        self.pos_x = reader.next_float()
        self.pos_y = reader.next_float()
        self.width = reader.next_int()
        self.height = reader.next_int()