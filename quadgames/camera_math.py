"""Small vector types and the maths behind the free-look and 2D camera controls."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

MOVE_SPEED = 0.1
LOOK_SPEED = 0.1
PITCH_LIMIT = 1.5


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> Vec2:
        return Vec2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Vec2:
        return Vec2(self.x / k, self.y / k)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vec2:
        """Unit vector in the same direction; a zero vector has none."""
        n = self.length()
        if n == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / n

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def distance(self, other: Vec2) -> float:
        return (self - other).length()

    def angle_between(self, other: Vec2) -> float:
        """Signed angle in radians turning this vector onto ``other``."""
        denom = self.length() * other.length()
        if denom == 0.0:
            raise ValueError("angle with a zero-length vector is undefined")
        cos = max(-1.0, min(1.0, self.dot(other) / denom))
        perp = self.x * other.y - self.y * other.x
        return math.acos(cos) * math.copysign(1.0, perp)


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, k: float) -> Vec3:
        return Vec3(self.x * k, self.y * k, self.z * k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> Vec3:
        return Vec3(self.x / k, self.y / k, self.z / k)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3:
        """Unit vector in the same direction; a zero vector has none."""
        n = self.length()
        if n == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / n

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


def short_angle_dist(a0: float, a1: float) -> float:
    """Signed shortest turn in degrees from ``a0`` to ``a1``."""
    full = 360.0
    da = math.fmod(a1 - a0, full)
    return math.fmod(2.0 * da, full) - da


def angle_lerp(a0: float, a1: float, t: float) -> float:
    """Interpolate between two angles in degrees along the shortest turn."""
    return a0 + short_angle_dist(a0, a1) * t


def wrap_rotation(angle: float) -> float:
    """Bring an angle that is at most one turn out of range back into 0..360."""
    if angle >= 360.0:
        return angle - 360.0
    if angle < 0.0:
        return angle + 360.0
    return angle


def polar_to_cartesian(rho: float, theta: float) -> Vec2:
    return Vec2(rho * math.cos(theta), rho * math.sin(theta))


def look_direction(yaw: float, pitch: float) -> Vec3:
    """Unit vector a camera with the given yaw and pitch (radians) looks along."""
    return Vec3(
        math.cos(yaw) * math.cos(pitch),
        math.sin(pitch),
        math.sin(yaw) * math.cos(pitch),
    ).normalize()


@dataclass
class FirstPersonCamera:
    """A free-look camera steered by mouse deltas and moved on its own axes."""

    position: Vec3 = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))
    yaw: float = 1.18
    pitch: float = 0.0
    world_up: Vec3 = Vec3(0.0, 1.0, 0.0)

    @property
    def front(self) -> Vec3:
        return look_direction(self.yaw, self.pitch)

    @property
    def right(self) -> Vec3:
        return self.front.cross(self.world_up).normalize()

    @property
    def up(self) -> Vec3:
        return self.right.cross(self.front).normalize()

    @property
    def target(self) -> Vec3:
        return self.position + self.front

    def look(self, mouse_dx: float, mouse_dy: float, dt: float) -> None:
        """Turn by a mouse movement; pitch stays within the limit."""
        self.yaw += mouse_dx * dt * LOOK_SPEED
        self.pitch += mouse_dy * dt * -LOOK_SPEED
        self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch))

    def move(self, forward: float, strafe: float) -> None:
        """Step along the view direction and sideways; signs choose the direction."""
        self.position = (
            self.position
            + self.front * (forward * MOVE_SPEED)
            + self.right * (strafe * MOVE_SPEED)
        )


@dataclass
class CameraControls:
    """State of a 2D camera: target, zoom, offset and a smoothed rotation."""

    target: Vec2 = Vec2()
    zoom: float = 1.0
    rotation: float = 0.0
    smooth_rotation: float = 0.0
    offset: Vec2 = Vec2()

    def apply_wheel(self, y: float, zoom_modifier: bool) -> None:
        """Zoom (with the modifier held) or rotate by a mouse-wheel step."""
        if y == 0.0:
            return
        if zoom_modifier:
            self.zoom *= 1.1**y
        else:
            self.rotation = wrap_rotation(self.rotation + 10.0 * y)

    def update(self) -> float:
        """Ease the smoothed rotation towards the target rotation and return it."""
        self.smooth_rotation = angle_lerp(self.smooth_rotation, self.rotation, 0.1)
        return self.smooth_rotation