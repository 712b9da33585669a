# core/vector.py
import math
import numpy as np

SCALAR_TYPES = (int, float, np.integer, np.floating)


class Vector3:
    """
    An immutable 3D vector of 32-bit floats supporting component-wise
    arithmetic, scalar broadcast, dot and cross products, and normalization.

    Division by zero and overflow follow IEEE-754: they produce inf or NaN
    components instead of raising.
    """
    __slots__ = ("x", "y", "z")
    # Make numpy scalars on the left defer to the reflected operators.
    __array_ufunc__ = None

    def __init__(self, x: float, y: float, z: float):
        with np.errstate(all="ignore"):
            object.__setattr__(self, "x", _float32(x))
            object.__setattr__(self, "y", _float32(y))
            object.__setattr__(self, "z", _float32(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vector3 is immutable; use with_x/with_y/with_z")

    def __delattr__(self, name):
        raise AttributeError("Vector3 is immutable")

    def __reduce__(self):
        return (Vector3, (self.x, self.y, self.z))

    @classmethod
    def splat(cls, value: float) -> "Vector3":
        return cls(value, value, value)

    @classmethod
    def from_array(cls, values) -> "Vector3":
        x, y, z = values
        return cls(x, y, z)

    def with_x(self, x: float) -> "Vector3":
        return Vector3(x, self.y, self.z)

    def with_y(self, y: float) -> "Vector3":
        return Vector3(self.x, y, self.z)

    def with_z(self, z: float) -> "Vector3":
        return Vector3(self.x, self.y, z)

    # Arithmetic
    def _apply(self, op, other):
        if isinstance(other, Vector3):
            ox, oy, oz = other.x, other.y, other.z
        elif isinstance(other, SCALAR_TYPES):
            ox = oy = oz = other
        else:
            return NotImplemented
        with np.errstate(all="ignore"):
            ox, oy, oz = _float32(ox), _float32(oy), _float32(oz)
            return Vector3(op(self.x, ox), op(self.y, oy), op(self.z, oz))

    def __add__(self, other):
        return self._apply(np.add, other)

    __radd__ = __add__

    def __sub__(self, other):
        return self._apply(np.subtract, other)

    # A scalar on the left is broadcast as if it were on the right:
    # s - v == v - s.
    __rsub__ = __sub__

    def __mul__(self, other):
        # Component-wise with another vector, not a dot product.
        return self._apply(np.multiply, other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        return self._apply(np.divide, other)

    # s / v == v / s, as with subtraction.
    __rtruediv__ = __truediv__

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def dot(self, other: "Vector3") -> np.float32:
        with np.errstate(all="ignore"):
            return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vector3") -> "Vector3":
        with np.errstate(all="ignore"):
            return Vector3(
                self.y * other.z - self.z * other.y,
                self.z * other.x - self.x * other.z,
                self.x * other.y - self.y * other.x
            )

    def length_squared(self) -> np.float32:
        return self.dot(self)

    def length(self) -> np.float32:
        return np.sqrt(self.length_squared())

    def normalize(self) -> "Vector3":
        """
        Returns this vector scaled to unit length. The zero vector is not
        special-cased and normalizes to NaN components.
        """
        return self / self.length()

    def min(self, other: "Vector3") -> "Vector3":
        """Component-wise minimum; a NaN component yields the other operand's."""
        return Vector3(np.fmin(self.x, other.x),
                       np.fmin(self.y, other.y),
                       np.fmin(self.z, other.z))

    def max(self, other: "Vector3") -> "Vector3":
        """Component-wise maximum; a NaN component yields the other operand's."""
        return Vector3(np.fmax(self.x, other.x),
                       np.fmax(self.y, other.y),
                       np.fmax(self.z, other.z))

    # Comparison
    def __eq__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return bool(self.x == other.x and self.y == other.y and self.z == other.z)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((float(self.x), float(self.y), float(self.z)))

    # Lexicographic on (x, y, z). A NaN component makes the vectors unordered.
    def _partial_cmp(self, other):
        for a, b in zip(self, other):
            if np.isnan(a) or np.isnan(b):
                return None
            if a < b:
                return -1
            if a > b:
                return 1
        return 0

    def __lt__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._partial_cmp(other) == -1

    def __le__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._partial_cmp(other) in (-1, 0)

    def __gt__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._partial_cmp(other) == 1

    def __ge__(self, other):
        if not isinstance(other, Vector3):
            return NotImplemented
        return self._partial_cmp(other) in (1, 0)

    # Conversion
    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float32)

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"

    def __str__(self) -> str:
        return "(" + ", ".join(_short(c) for c in self) + ")"


def _float32(value) -> np.float32:
    # Python ints can exceed the float range; they saturate to infinity.
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            value = float(value)
        except OverflowError:
            value = math.inf if value > 0 else -math.inf
    return np.float32(value)


def _short(component: np.float32) -> str:
    """Shortest round-tripping text; whole numbers print without ".0"."""
    return np.format_float_positional(component, trim="-")


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.ONE = Vector3(1.0, 1.0, 1.0)
