# quadgames

A handful of small games and visual toys drawn with pygame, plus the
pieces they are made of: a 2D particle system, vector and camera helpers,
and the game logic of each title, kept apart from the drawing code so it can
be driven and tested without opening a window.

## Playing

Each game has its own command:

| Command                      | What it starts                                     |
|------------------------------|----------------------------------------------------|
| `quadgames-snake`            | Snake on a 16×16 board; arrow keys steer, Enter restarts |
| `quadgames-arkanoid`         | Brick breaker; arrows move the paddle, Space launches |
| `quadgames-asteroids`        | Asteroids; Up thrusts, Left/Right steer, Space fires, Enter restarts |
| `quadgames-missile-command`  | Missile Command over three stages; aim with the mouse, click to fire |
| `quadgames-bunnymark`        | Hold the left mouse button to spawn bouncing critters, with an FPS counter |
| `quadgames-tree`             | A swaying recursive tree                           |
| `quadgames-particles`        | Particle emitters: smoke, fire and a one-shot explosion (Space); `--fountain` shows a single small fountain instead |

Escape closes every window. Most commands accept `--width`/`--height` (or
`--size`), and the games with randomness accept `--seed`.

## Using the building blocks

### Particles

`quadgames.particle_types` holds the plain descriptions an emitter is built
from: `Curve` and `BatchedCurve` for size over lifetime, `ColorCurve` for
start/mid/end colours, the emission shapes `PointEmission`, `RectEmission`
and `SphereEmission`, the particle meshes `RectangleMesh`, `CircleMesh` and
`CustomMesh`, `BlendMode`, and `AtlasConfig` for animated sprite sheets.
Only linear curves can be sampled; `Curve.batch` raises `ValueError` for
Bézier interpolation.

`quadgames.emitter` has `EmitterConfig`, `Emitter` and `EmittersCache`. An
emitter spawns and ages its particles on `update(dt)`; `draw(pos, dt)` moves
it, updates it and returns the live particles; `emit(pos, n)` spawns
particles at once regardless of the configured amount. `EmittersCache` reuses
finished emitters for short effects such as explosions.

Ready-made configurations live in `quadgames.effects`: `explosion()`,
`smoke()`, `fire()` and `fountain()`. `render_emitter(surface, emitter)`
draws an emitter's particles onto a pygame surface as flat squares or
circles.

### Game logic

Every game's rules are a plain object that can be stepped by hand:

```python
import random

from quadgames.snake import DOWN, SnakeGame

game = SnakeGame(rng=random.Random(1))
game.steer(DOWN)
game.tick()
print(game.head, game.score, game.game_over)
```

The same goes for `ArkanoidGame`, `AsteroidsGame`, `BunnyMark` and the
Missile Command `Game`, whose `update` methods take the input state and the
time step as arguments instead of reading the keyboard. `quadgames.tree`
gives the tree as a list of segments through `tree_segments(time)`.

`quadgames.inventory` models a drag-and-drop equipment screen:
`Inventory` with its `Slot`s, and the `Fit`, `Unfit` and `Refit` commands
applied by `Inventory.apply`. It has no window of its own.

### Maths

`quadgames.camera_math` provides `Vec2` and `Vec3`, `short_angle_dist` and
`angle_lerp` for turning the short way round, `wrap_rotation`,
`polar_to_cartesian`, `look_direction`, and the `FirstPersonCamera` and
`CameraControls` helpers.

## What is not included

- There is no Game of Life or other cellular automaton.
- Particles are drawn as plain coloured shapes: textures, sprite-sheet images,
  custom shader materials and post-processing set in `EmitterConfig` are kept
  in the configuration but not rendered.
- There is no 3D view; `FirstPersonCamera` only computes camera vectors.

## Tests

The test suite runs with pytest; install the package with its `test` extra to
get it.