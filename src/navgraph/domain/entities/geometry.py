import math
from dataclasses import dataclass


# Core geometry type used by the graph and the search engines
@dataclass(frozen=True)
class Vec3:
    x: float = 0.0  # world units
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> "Vec3":
        return Vec3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def norm_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def distance_squared(self, other: "Vec3") -> float:
        dx, dy, dz = other.x - self.x, other.y - self.y, other.z - self.z
        return dx * dx + dy * dy + dz * dz

    def distance(self, other: "Vec3") -> float:
        return math.sqrt(self.distance_squared(other))

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


Pt = Vec3 | tuple[float, float, float]


def to_vec3(p: Pt) -> Vec3:
    return p if isinstance(p, Vec3) else Vec3(float(p[0]), float(p[1]), float(p[2]))
