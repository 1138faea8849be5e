"""Background scenery that drifts across the screen: the bee and the clouds."""

from __future__ import annotations

import random
from dataclasses import dataclass

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

BEE_START_X = 2000.0
BEE_EXIT_X = -100.0
BEE_MIN_SPEED = 200
BEE_SPEED_RANGE = 200
BEE_MIN_HEIGHT = 500
BEE_HEIGHT_RANGE = 500

CLOUD_START_X = -200.0
CLOUD_EXIT_X = float(SCREEN_WIDTH)
CLOUD_SPEED_RANGE = 200
CLOUD_HEIGHT_RANGE = 150


@dataclass
class Bee:
    """A bee that flies from the right edge to the left at a random speed and height."""

    x: float = 0.0
    y: float = 800.0
    speed: float = 0.0
    active: bool = False

    def update(self, dt: float, rng: random.Random) -> None:
        """Advance the bee by ``dt`` seconds, respawning it once it has left the screen.

        An inactive bee is placed at the right edge with a fresh speed and
        height and becomes active; the frame in which it respawns it does
        not move.
        """
        if not self.active:
            self.speed = float(rng.randrange(BEE_SPEED_RANGE) + BEE_MIN_SPEED)
            self.y = float(rng.randrange(BEE_HEIGHT_RANGE) + BEE_MIN_HEIGHT)
            self.x = BEE_START_X
            self.active = True
            return

        self.x -= self.speed * dt
        if self.x < BEE_EXIT_X:
            self.active = False


@dataclass
class Cloud:
    """A cloud that drifts from the left edge to the right.

    ``start_x`` is where the cloud reappears; ``lane`` is added to its
    random height so several clouds can keep to separate bands of sky.
    """

    x: float = 0.0
    y: float = 0.0
    start_x: float = CLOUD_START_X
    lane: float = 0.0
    speed: float = 0.0
    active: bool = False

    def update(self, dt: float, rng: random.Random) -> None:
        """Advance the cloud by ``dt`` seconds, respawning it once it has drifted off.

        An inactive cloud is placed at ``start_x`` with a fresh speed and
        height and becomes active; the frame in which it respawns it does
        not move.
        """
        if not self.active:
            self.speed = float(rng.randrange(CLOUD_SPEED_RANGE))
            self.y = float(rng.randrange(CLOUD_HEIGHT_RANGE)) + self.lane
            self.x = self.start_x
            self.active = True
            return

        self.x += self.speed * dt
        if self.x > CLOUD_EXIT_X:
            self.active = False