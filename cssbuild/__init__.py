from __future__ import annotations

from cssbuild.css import CssSelectorBuilder, OrderError, SelectorBuilder, cssSelectorBuilder
from cssbuild.serial import from_json, get_json

__version__ = "0.1.0"

__all__ = [
    "Rectangle",
    "get_json",
    "from_json",
    "CssSelectorBuilder",
    "SelectorBuilder",
    "OrderError",
    "cssSelectorBuilder",
]

class Rectangle:
    __slots__ = ("width", "height")
    def __init__(self, width: int | float = 0, height: int | float = 0):
        self.width = width
        self.height = height

    @property
    def area(self) -> int | float:
        """Width multiplied by height."""
        return self.width * self.height

    def __eq__(self, __value: object) -> bool:
        if isinstance(__value, Rectangle):
            return self.width == __value.width and self.height == __value.height
        return False

    def __hash__(self) -> int:
        return hash((self.width, self.height))

    def __repr__(self) -> str:
        return f"Rectangle(width={self.width!r}, height={self.height!r})"

if __name__ == "__main__":
    rect = Rectangle(10, 20)
    print(rect, rect.area)

    text = get_json(rect)
    print(text)
    print(from_json(Rectangle, text).area)
