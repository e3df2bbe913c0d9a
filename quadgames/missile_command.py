"""Missile command: defend a city from falling missiles with a turret."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass, field
from enum import Enum

import pygame

from quadgames.camera_math import Vec2

MISSILE_LENGTH = 4.0
TRACE_THICKNESS = 3.0
CURSOR_LENGTH = 10.0
MAX_MISSILE_COUNT_SAME_TIME = 5
MISSILE_SPEED_FACTOR = 0.35
BASE_LENGTH = 32.0
WINDOW_WIDTH = 1024
WINDOW_HEIGHT = 768
MAX_LIFT_OFF_TIME = 500
MAX_CITY_HEALTH = 1000
CITY_HEIGHT = 100.0
PENALTY_VALUE = 100
HIT_POINTS = 10
TURRET_MULTIPLIER = 30.0
TURRET_THICKNESS = 3.0
BULLET_WIDTH = 4.0
BULLET_SPEED_FACTOR = 2.0
MAX_BULLET_ON_GAME = 3
EXPLOSION_LIFE_TIME = 100
EXPLOSION_THICKNESS = 1.0
EXPLOSION_RADIUS_RATE = 0.25
BUILDING_HEIGHTS = (30.0, 25.0, 60.0, 40.0, 45.0, 55.0, 70.0, 20.0)

_RIGHT = Vec2(1.0, 0.0)


class State(Enum):
    MAIN = "main"
    PLAYING = "playing"
    DEAD = "dead"
    WIN = "win"
    END = "end"


@dataclass
class Score:
    total_hit: int = 0
    total_point: int = 0
    total_missed: int = 0
    city_health: int = MAX_CITY_HEALTH

    def __str__(self) -> str:
        return (
            f"City Health {self.city_health}, Player Hit/Missed"
            f"({self.total_hit}/{self.total_missed}) Point {self.total_point}"
        )


@dataclass(frozen=True)
class Stage:
    level: int
    max_missile_count: int
    total_missile_count: int
    missile_speed_factor: float
    max_bullet_count: int


_STAGE_NAMES = {0: "Rookie", 1: "Specialist", 2: "Veteran"}


def stage_name(level: int) -> str:
    """Display name of a stage level; unknown levels have an empty name."""
    return _STAGE_NAMES.get(level, "")


def load_stages() -> list[Stage]:
    """The three stages of the game, easiest first."""
    return [
        Stage(0, MAX_MISSILE_COUNT_SAME_TIME, 10, MISSILE_SPEED_FACTOR, MAX_BULLET_ON_GAME),
        Stage(1, MAX_MISSILE_COUNT_SAME_TIME + 5, 15, MISSILE_SPEED_FACTOR * 1.5, MAX_BULLET_ON_GAME + 1),
        Stage(2, MAX_MISSILE_COUNT_SAME_TIME, 15, MISSILE_SPEED_FACTOR * 3.0, MAX_BULLET_ON_GAME + 2),
    ]


@dataclass
class Bullet:
    position: Vec2
    velocity: Vec2
    target: Vec2
    is_alive: bool = True

    @classmethod
    def spawn(cls, location: Vec2, target: Vec2) -> Bullet:
        """A bullet leaving ``location`` heading for ``target``."""
        delta = target - location
        velocity = delta.normalize() if delta.length() > 0.0 else Vec2()
        return cls(position=location, velocity=velocity, target=target)


@dataclass
class Explosion:
    location: Vec2
    life_time: int = EXPLOSION_LIFE_TIME
    radius: float = 0.0
    is_alive: bool = True


@dataclass
class Missile:
    start_position: Vec2
    position: Vec2
    velocity: Vec2
    angle: float
    lift_off_time: int
    is_alive: bool = True

    @classmethod
    def spawn(cls, width: float, height: float, fps: int, rng: random.Random | None = None) -> Missile:
        """A missile starting at the top of the screen, aimed to land inside it."""
        rng = rng if rng is not None else random.Random()
        x = rng.uniform(width * 0.25, width - width * 0.25)
        c = Vec2(0.0, height)
        a = Vec2(-x, height)
        b = Vec2(width - x, height)
        left_angle = math.acos(a.dot(c) / (a.length() * c.length())) + math.pi / 2.0
        right_angle = math.pi / 2.0 - math.acos(b.dot(c) / (b.length() * c.length()))
        angle = rng.uniform(right_angle, left_angle)
        fps = max(0, int(fps))
        return cls(
            start_position=Vec2(x, 0.0),
            position=Vec2(x, 0.0),
            velocity=Vec2(math.cos(angle), math.sin(angle)),
            angle=angle,
            lift_off_time=rng.randrange(fps, fps + MAX_LIFT_OFF_TIME),
        )

    def __str__(self) -> str:
        return (
            f"Pos: [{self.position.x}, {self.position.y}], "
            f"Dir: [{self.velocity.x}, {self.velocity.y}], "
            f"Angle:{self.angle} rad,{math.degrees(self.angle)} deg, lift off {self.lift_off_time}"
        )


@dataclass(frozen=True)
class City:
    position: Vec2
    size: Vec2


def create_buildings(width: float, height: float, rng: random.Random | None = None) -> list[City]:
    """A row of buildings of random heights along the bottom of the screen."""
    rng = rng if rng is not None else random.Random()
    buildings = []
    x = 0.0
    for _ in range(int(width / BASE_LENGTH)):
        tall = rng.choice(BUILDING_HEIGHTS)
        buildings.append(City(Vec2(x, height - tall), Vec2(BASE_LENGTH, tall)))
        x += BASE_LENGTH
    return buildings


def create_missiles(
    quantity: int, width: float, height: float, fps: int, rng: random.Random | None = None
) -> list[Missile]:
    rng = rng if rng is not None else random.Random()
    return [Missile.spawn(width, height, fps, rng) for _ in range(quantity)]


def find_right_angle(unit_vector: Vec2) -> Vec2:
    """Clamp an aiming direction to the turret's allowed arc (y pointing up)."""
    angle = unit_vector.angle_between(_RIGHT)
    if 0.0 < angle <= math.pi / 6.0:
        return Vec2(math.cos(math.pi / 6.0), math.sin(math.pi / 6.0))
    if 5.0 * math.pi / 6.0 <= angle <= 2.0 * math.pi:
        return Vec2(math.cos(5.0 * math.pi / 6.0), math.sin(5.0 * math.pi / 6.0))
    if angle < 0.0:
        return Vec2(math.cos(math.pi / 2.0), math.sin(math.pi / 2.0))
    return Vec2(math.cos(angle), math.sin(angle))


@dataclass
class Turret:
    location: Vec2 = field(default_factory=Vec2)
    unit_vector: Vec2 = field(default_factory=Vec2)
    muzzle_point: Vec2 = field(default_factory=Vec2)

    def aim(self, mouse: Vec2) -> Vec2:
        """Point the barrel towards ``mouse`` and return the muzzle position."""
        delta = Vec2(mouse.x - self.location.x, mouse.y - self.location.y)
        if delta.length() == 0.0:
            return self.muzzle_point
        self.unit_vector = delta.normalize()
        barrel = find_right_angle(self.unit_vector) * TURRET_MULTIPLIER
        self.muzzle_point = Vec2(self.location.x + barrel.x, self.location.y - barrel.y)
        return self.muzzle_point

    def is_fire_suitable(self) -> bool:
        """Whether the turret points up at between 30 and 150 degrees."""
        if self.unit_vector.length() == 0.0:
            return False
        angle = self.unit_vector.angle_between(_RIGHT)
        return math.pi / 6.0 < angle < 5.0 * math.pi / 6.0


def _nearest_point(missile: Missile, point: Vec2) -> Vec2:
    return Vec2(
        max(missile.position.x, min(missile.position.x + MISSILE_LENGTH, point.x)),
        max(missile.position.y, min(missile.position.y + MISSILE_LENGTH, point.y)),
    )


@dataclass
class Game:
    score: Score = field(default_factory=Score)
    state: State = State.MAIN
    missiles: list[Missile] = field(default_factory=list)
    bullets: list[Bullet] = field(default_factory=list)
    explosions: list[Explosion] = field(default_factory=list)
    current_stage: int = 0
    stage: Stage | None = None
    turret: Turret = field(default_factory=Turret)

    @classmethod
    def start(
        cls, stage: Stage, width: float, height: float, fps: int, rng: random.Random | None = None
    ) -> Game:
        """A new game playing ``stage``."""
        return cls(
            state=State.PLAYING,
            missiles=create_missiles(stage.max_missile_count, width, height, fps, rng),
            current_stage=stage.level,
            stage=stage,
            turret=Turret(location=Vec2(width * 0.5, height - CITY_HEIGHT)),
        )

    def update(
        self,
        mouse: Vec2,
        fire: bool,
        width: float,
        height: float,
        fps: int,
        rng: random.Random | None = None,
    ) -> State:
        """Advance one frame of play and return the resulting state."""
        if self.state is not State.PLAYING or self.stage is None:
            return self.state
        rng = rng if rng is not None else random.Random()
        stage = self.stage
        mouse = Vec2(*mouse)

        if self.score.city_health <= 0:
            self.state = State.DEAD
        if self.score.total_hit >= stage.total_missile_count:
            self.state = State.WIN

        self.turret.aim(mouse)
        if fire and len(self.bullets) < stage.max_bullet_count and self.turret.is_fire_suitable():
            self.bullets.append(Bullet.spawn(self.turret.muzzle_point, mouse))

        for explosion in self.explosions:
            for missile in self.missiles:
                nearest = _nearest_point(missile, explosion.location)
                if explosion.location.distance(nearest) <= explosion.radius:
                    self.score.total_hit += 1
                    self.score.total_point += HIT_POINTS
                    missile.is_alive = False

        for bullet in self.bullets:
            if bullet.target.distance(bullet.position) < 1.0:
                bullet.is_alive = False
                self.explosions.append(Explosion(bullet.target))
            bullet.position = bullet.position + bullet.velocity * BULLET_SPEED_FACTOR

        for explosion in self.explosions:
            if explosion.life_time == 0:
                explosion.is_alive = False
            else:
                explosion.radius += EXPLOSION_RADIUS_RATE
                explosion.life_time -= 1

        for missile in self.missiles:
            if missile.lift_off_time == 0:
                missile.position = missile.position + missile.velocity * stage.missile_speed_factor
                if missile.position.y > height - CITY_HEIGHT:
                    missile.is_alive = False
                    self.score.city_health -= PENALTY_VALUE
            else:
                missile.lift_off_time -= 1

        self.explosions = [e for e in self.explosions if e.is_alive]
        self.bullets = [b for b in self.bullets if b.is_alive]
        self.missiles = [m for m in self.missiles if m.is_alive]

        if len(self.missiles) <= stage.max_missile_count:
            self.missiles.extend(
                create_missiles(stage.max_missile_count - len(self.missiles), width, height, fps, rng)
            )
        return self.state


_RED = (230, 41, 55)
_WHITE = (255, 255, 255)
_SKYBLUE = (102, 191, 255)
_LIGHTGRAY = (200, 200, 200)
_DARKGREEN = (0, 117, 44)
_BLACK = (0, 0, 0)


def _menu_lines(game: Game, first_stage: Stage) -> list[str]:
    score = str(game.score)
    if game.state is State.MAIN:
        return [
            "Wellcome Commander",
            "",
            f"Stage {stage_name(first_stage.level)}",
            "Are you ready! Press SPACE to start",
            "Press ESC to exit",
        ]
    if game.state is State.DEAD:
        return ["City down. Sorry Commander.", "", score, "Try again? Press SPACE", "Press ESC to exit"]
    if game.state is State.WIN:
        return [
            "Yow win Commander.",
            "",
            score,
            "Are you ready to next stage? Press SPACE",
            "Press ESC to exit",
        ]
    return [
        "Congratulaions Commander",
        "",
        "You finished the game. City is safe.",
        score,
        "Press ENTER for Credits",
        "Press ESC to exit",
    ]


def _draw_menu(screen: pygame.Surface, font: pygame.font.Font, lines: list[str]) -> None:
    width, height = screen.get_size()
    for i, line in enumerate(lines):
        text = font.render(line, True, _RED)
        screen.blit(text, (width * 0.5 - text.get_width() * 0.5, height * 0.5 - text.get_height() + 36 * i))


def _draw_play(
    screen: pygame.Surface,
    font: pygame.font.Font,
    game: Game,
    buildings: list[City],
    mouse: Vec2,
) -> None:
    width, height = screen.get_size()
    for city in buildings:
        pygame.draw.rect(screen, _LIGHTGRAY, (city.position.x, city.position.y, city.size.x, city.size.y))

    mx, my = mouse
    pygame.draw.line(screen, _RED, (mx - CURSOR_LENGTH, my), (mx + CURSOR_LENGTH, my), 1)
    pygame.draw.line(screen, _RED, (mx, my - CURSOR_LENGTH), (mx, my + CURSOR_LENGTH), 1)
    cursor_text = font.render(f"({mx}, {my})", True, _RED)
    screen.blit(cursor_text, (0, height - 5 - cursor_text.get_height()))

    turret = game.turret
    pygame.draw.line(
        screen, _DARKGREEN, tuple(turret.location), tuple(turret.muzzle_point), round(TURRET_THICKNESS)
    )

    hud = font.render(f"{game.score} STG {stage_name(game.current_stage)}", True, _RED)
    screen.blit(hud, (width * 0.5 - hud.get_width() * 0.5, height - hud.get_height() - 20))

    for bullet in game.bullets:
        p = bullet.position - Vec2(BULLET_WIDTH * 0.5, BULLET_WIDTH * 0.5)
        pygame.draw.rect(screen, _SKYBLUE, (p.x, p.y, BULLET_WIDTH, BULLET_WIDTH))
    for explosion in game.explosions:
        if explosion.radius >= 1.0:
            pygame.draw.circle(
                screen, _SKYBLUE, tuple(explosion.location), explosion.radius, round(EXPLOSION_THICKNESS)
            )
    for missile in game.missiles:
        if missile.lift_off_time == 0:
            pygame.draw.line(
                screen, _WHITE, tuple(missile.start_position), tuple(missile.position), round(TRACE_THICKNESS)
            )
            pygame.draw.rect(
                screen, _RED, (missile.position.x, missile.position.y, MISSILE_LENGTH, MISSILE_LENGTH)
            )


def main(argv: list[str] | None = None) -> int:
    """Play missile command in a window."""
    parser = argparse.ArgumentParser(prog="quadgames-missile-command", description="Missile Command.")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    stages = load_stages()
    width, height = WINDOW_WIDTH, WINDOW_HEIGHT
    buildings = create_buildings(width, height, rng)
    game = Game()

    pygame.init()
    try:
        pygame.display.set_caption("Missile Command")
        screen = pygame.display.set_mode((width, height))
        pygame.mouse.set_visible(False)
        menu_font = pygame.font.Font(None, 32)
        hud_font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        running = True
        while running:
            pressed: set[int] = set()
            clicked = False
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    pressed.add(event.key)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = True
            if not running:
                break
            fps = int(clock.get_fps())
            mx, my = pygame.mouse.get_pos()
            mouse = Vec2(float(mx), float(my))
            screen.fill(_BLACK)

            if game.state is State.MAIN:
                _draw_menu(screen, menu_font, _menu_lines(game, stages[0]))
                if pygame.K_SPACE in pressed:
                    game = Game.start(stages[0], width, height, fps, rng)
                elif pygame.K_ESCAPE in pressed:
                    running = False
            elif game.state is State.PLAYING:
                if pygame.K_ESCAPE in pressed:
                    running = False
                else:
                    game.update(mouse, clicked, width, height, fps, rng)
                    _draw_play(screen, hud_font, game, buildings, mouse)
            elif game.state is State.DEAD:
                _draw_menu(screen, menu_font, _menu_lines(game, stages[0]))
                if pygame.K_SPACE in pressed:
                    game = Game.start(stages[0], width, height, fps, rng)
                elif pygame.K_ESCAPE in pressed:
                    game.state = State.MAIN
            elif game.state is State.WIN:
                _draw_menu(screen, menu_font, _menu_lines(game, stages[0]))
                if pygame.K_SPACE in pressed:
                    following = game.current_stage + 1
                    if following >= len(stages):
                        game.state = State.END
                    else:
                        game = Game.start(stages[following], width, height, fps, rng)
                elif pygame.K_ESCAPE in pressed:
                    game.state = State.MAIN
            else:
                _draw_menu(screen, menu_font, _menu_lines(game, stages[0]))
                if pygame.K_RETURN in pressed:
                    print("Thanks for playing.")
                elif pygame.K_ESCAPE in pressed:
                    game.state = State.MAIN

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()
    return 0