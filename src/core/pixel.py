# core/pixel.py
import numpy as np

CHANNEL_MAX = 255


class Pixel:
    """
    An 8-bit RGB pixel. Channels default to 0.
    """
    __slots__ = ("r", "g", "b")

    def __init__(self, r: int = 0, g: int = 0, b: int = 0):
        self.r = _channel(r, "r")
        self.g = _channel(g, "g")
        self.b = _channel(b, "b")

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b

    def __eq__(self, other):
        if not isinstance(other, Pixel):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def __hash__(self):
        return hash((self.r, self.g, self.b))

    def __repr__(self) -> str:
        return f"Pixel({self.r}, {self.g}, {self.b})"


def _channel(value, name: str) -> int:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"Pixel channel {name} must be an integer, got {value!r}")
    if not 0 <= value <= CHANNEL_MAX:
        raise ValueError(f"Pixel channel {name} out of range 0..{CHANNEL_MAX}: {value}")
    return int(value)
