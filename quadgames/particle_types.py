"""Building blocks for particle emitters: curves, shapes, atlases and blend modes."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from enum import Enum
from itertools import pairwise

Color = tuple[float, float, float, float]
Point = tuple[float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


class Interpolation(Enum):
    """How the key points of a curve are joined."""

    LINEAR = "linear"
    BEZIER = "bezier"


@dataclass(frozen=True)
class BatchedCurve:
    """A curve sampled at even steps, ready for fast lookups."""

    points: tuple[float, ...]

    def get(self, t: float) -> float:
        """Return the curve value at ``t`` in 0..1, interpolating between samples."""
        if not self.points:
            raise ValueError("cannot sample an empty curve")
        last = len(self.points) - 1
        t_scaled = t * len(self.points)
        previous_ix = min(max(0, int(t_scaled)), last)
        next_ix = min(previous_ix + 1, last)
        previous = self.points[previous_ix]
        following = self.points[next_ix]
        return previous + (following - previous) * (t_scaled - previous_ix)


@dataclass
class Curve:
    """Key points of a curve over 0..1 and the resolution used to sample it."""

    points: list[Point] = field(default_factory=list)
    interpolation: Interpolation = Interpolation.LINEAR
    resolution: int = 20

    def batch(self) -> BatchedCurve:
        """Sample the curve into a :class:`BatchedCurve`."""
        if self.interpolation is not Interpolation.LINEAR:
            raise ValueError(f"{self.interpolation.value} interpolation is not supported")
        if self.resolution <= 0:
            raise ValueError("curve resolution must be positive")

        step = 1.0 / self.resolution
        x = 0.0
        samples: list[float] = []
        for (start_x, start_y), (end_x, end_y) in pairwise(self.points):
            while x <= end_x:
                if end_x == start_x:
                    samples.append(end_y)
                else:
                    t = (x - start_x) / (end_x - start_x)
                    samples.append(start_y + (end_y - start_y) * t)
                x += step
        return BatchedCurve(tuple(samples))


class EmissionShape:
    """Region inside which new particles appear, relative to the emitter."""

    def random_point(self, rng: random.Random) -> Point:
        raise NotImplementedError


@dataclass(frozen=True)
class PointEmission(EmissionShape):
    """All particles appear exactly at the emitter position."""

    def random_point(self, rng: random.Random) -> Point:
        return (0.0, 0.0)


@dataclass(frozen=True)
class RectEmission(EmissionShape):
    """Particles appear uniformly inside a rectangle centred on the emitter."""

    width: float
    height: float

    def random_point(self, rng: random.Random) -> Point:
        return (
            rng.uniform(-self.width / 2.0, self.width / 2.0),
            rng.uniform(-self.height / 2.0, self.height / 2.0),
        )


@dataclass(frozen=True)
class SphereEmission(EmissionShape):
    """Particles appear uniformly inside a disc centred on the emitter."""

    radius: float

    def random_point(self, rng: random.Random) -> Point:
        rho = math.sqrt(rng.uniform(0.0, self.radius * self.radius))
        phi = rng.uniform(0.0, math.pi * 2.0)
        return (rho * math.cos(phi), rho * math.sin(phi))


def _mix(a: Color, b: Color, t: float) -> Color:
    r1, g1, b1, a1 = a
    r2, g2, b2, a2 = b
    return (
        r1 * (1.0 - t) + r2 * t,
        g1 * (1.0 - t) + g2 * t,
        b1 * (1.0 - t) + b2 * t,
        a1 * (1.0 - t) + a2 * t,
    )


@dataclass(frozen=True)
class ColorCurve:
    """Base colour of a particle at the start, middle and end of its life."""

    start: Color = WHITE
    mid: Color = WHITE
    end: Color = WHITE

    def sample(self, t: float) -> Color:
        """Colour at life fraction ``t``: start to mid over the first half, mid to end after."""
        if t < 0.5:
            return _mix(self.start, self.mid, t * 2.0)
        return _mix(self.mid, self.end, (t - 0.5) * 2.0)


class ParticleShape:
    """Mesh drawn for each particle.

    Vertices are flat lists of 9 floats each: position xyz, uv, colour rgba.
    """

    def geometry(self) -> tuple[list[float], list[int]]:
        raise NotImplementedError


@dataclass(frozen=True)
class RectangleMesh(ParticleShape):
    """A quad, stretched horizontally by ``aspect_ratio``."""

    aspect_ratio: float = 1.0

    def geometry(self) -> tuple[list[float], list[int]]:
        a = self.aspect_ratio
        vertices = [
            -a, -1.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            a, -1.0, 0.0, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0,
            a, 1.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0, 1.0,
            -a, 1.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0, 1.0,
        ]
        return vertices, [0, 1, 2, 0, 2, 3]


@dataclass(frozen=True)
class CircleMesh(ParticleShape):
    """A triangle fan approximating a unit circle."""

    subdivisions: int

    def geometry(self) -> tuple[list[float], list[int]]:
        vertices = [0.0, 0.0, 0.0, 0.0, 0.0, 1.0, 1.0, 1.0, 1.0]
        indices: list[int] = []
        for i in range(self.subdivisions + 1):
            angle = i / self.subdivisions * math.pi * 2.0
            rx, ry = math.cos(angle), math.sin(angle)
            vertices.extend((rx, ry, 0.0, rx, ry, 1.0, 1.0, 1.0, 1.0))
            if i != self.subdivisions:
                indices.extend((0, i + 1, i + 2))
        return vertices, indices


@dataclass(frozen=True)
class CustomMesh(ParticleShape):
    """A mesh given directly as vertex data and triangle indices."""

    vertices: tuple[float, ...]
    indices: tuple[int, ...]

    def geometry(self) -> tuple[list[float], list[int]]:
        return list(self.vertices), list(self.indices)


class BlendMode(Enum):
    """How overlapping particles combine."""

    ALPHA = "alpha"
    ADDITIVE = "additive"


@dataclass(frozen=True)
class AtlasConfig:
    """Sprite-sheet layout of ``n`` columns by ``m`` rows, animating over a frame range."""

    n: int
    m: int
    start_index: int
    end_index: int

    @classmethod
    def from_range(cls, n: int, m: int, start: int | None = None, stop: int | None = None) -> AtlasConfig:
        """Build an atlas animating frames ``start`` (inclusive) to ``stop`` (exclusive).

        A missing ``start`` means the first frame; a missing ``stop`` means past the last.
        """
        return cls(
            n=n,
            m=m,
            start_index=0 if start is None else start,
            end_index=n * m if stop is None else stop,
        )

    def frame_uv(self, frame: int) -> tuple[float, float, float, float]:
        """Return (u, v, width, height) of ``frame`` in texture coordinates."""
        x = frame % self.n
        y = frame // self.n
        return (x / self.n, y / self.m, 1.0 / self.n, 1.0 / self.m)


@dataclass(frozen=True)
class ParticleMaterial:
    """Custom vertex and fragment shader source used to shade particles."""

    vertex: str
    fragment: str