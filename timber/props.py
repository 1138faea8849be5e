"""Props around the player: the flying log, the axe and the gravestone."""

from __future__ import annotations

from dataclasses import dataclass

LOG_START_X = 810.0
LOG_START_Y = 720.0
LOG_START_SPEED_X = 1000.0
LOG_SPEED_Y = -1500.0
LOG_EXIT_LEFT_X = -100.0
LOG_EXIT_RIGHT_X = 2000.0
LOG_SPEED_WHEN_CHOPPED_RIGHT = -5000.0
LOG_SPEED_WHEN_CHOPPED_LEFT = 5000.0

AXE_POSITION_LEFT = 700.0
AXE_POSITION_RIGHT = 1075.0
AXE_HIDDEN_X = 2000.0
AXE_Y = 830.0

PLAYER_LEFT_POSITION = (580.0, 720.0)
PLAYER_RIGHT_POSITION = (1200.0, 720.0)
PLAYER_HIDDEN_POSITION = (2000.0, 660.0)

RIP_HIDDEN_POSITION = (675.0, 2000.0)
RIP_SHOWN_POSITION = (525.0, 760.0)


@dataclass
class FlyingLog:
    """A chopped log that flies off the side of the screen and then returns to the tree."""

    x: float = LOG_START_X
    y: float = LOG_START_Y
    speed_x: float = LOG_START_SPEED_X
    speed_y: float = LOG_SPEED_Y
    active: bool = False

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def _reset(self) -> None:
        self.x = LOG_START_X
        self.y = LOG_START_Y

    def launch(self, speed_x: float) -> None:
        """Send the log flying sideways at ``speed_x`` from the foot of the tree."""
        self._reset()
        self.speed_x = speed_x
        self.active = True

    def update(self, dt: float) -> None:
        """Move an active log by ``dt`` seconds; park it once it has left the screen."""
        if not self.active:
            return
        self.x += self.speed_x * dt
        self.y += self.speed_y * dt
        if self.x < LOG_EXIT_LEFT_X or self.x > LOG_EXIT_RIGHT_X:
            self.active = False
            self._reset()