"""The rules of a round: chopping, the clock, branches falling and the player's fate."""

from __future__ import annotations

import enum
import random
from typing import Optional

from timber.branches import BranchColumn, Side, START_TIME, TimeBar
from timber.hud import FpsCounter, format_score
from timber.props import (
    AXE_HIDDEN_X,
    AXE_POSITION_LEFT,
    AXE_POSITION_RIGHT,
    AXE_Y,
    LOG_SPEED_WHEN_CHOPPED_LEFT,
    LOG_SPEED_WHEN_CHOPPED_RIGHT,
    PLAYER_HIDDEN_POSITION,
    PLAYER_LEFT_POSITION,
    PLAYER_RIGHT_POSITION,
    RIP_HIDDEN_POSITION,
    RIP_SHOWN_POSITION,
    FlyingLog,
)
from timber.world import CLOUD_START_X, Bee, Cloud

NUM_CLOUDS = 6
CLOUD_LANE_SPACING = 150.0
CHOP_BONUS_SECONDS = 0.15

START_MESSAGE = "Press Enter to start!"
OUT_OF_TIME_MESSAGE = "Out of time!! Press Enter to restart."
SQUISHED_MESSAGE = "SQUISHED!! Press Enter to restart."


class GameEvent(enum.Enum):
    """Something that happened during a frame and that deserves a sound."""

    CHOP = "chop"
    DEATH = "death"
    OUT_OF_TIME = "out_of_time"


def _make_clouds() -> list[Cloud]:
    return [
        Cloud(
            x=CLOUD_START_X,
            y=index * CLOUD_LANE_SPACING,
            start_x=CLOUD_START_X,
            lane=index * CLOUD_LANE_SPACING,
        )
        for index in range(NUM_CLOUDS)
    ]


class Game:
    """The state of the game, advanced one frame at a time.

    The game starts paused. Each frame the caller reports any chop with
    :meth:`chop` and then calls :meth:`update` with the time that passed;
    both return the events that happened so that sounds can be played.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.paused = True
        self.player_dead = False
        self.score = 0
        self.time_remaining = START_TIME
        self.message = START_MESSAGE

        self.bee = Bee()
        self.clouds = _make_clouds()
        self.branches = BranchColumn()
        self.branches.clear()
        self.log = FlyingLog()
        self.time_bar = TimeBar()
        self.fps = FpsCounter()

        self.player_side = Side.LEFT
        self.player_position = PLAYER_LEFT_POSITION
        self.axe_position = (AXE_POSITION_LEFT, AXE_Y)
        self.rip_position = RIP_HIDDEN_POSITION
        self.accept_input = True

        self._bar_width = self.time_bar.start_width
        self._score_text = format_score(0)

    @property
    def message_visible(self) -> bool:
        """Whether the centred message is shown; it is while the game is paused."""
        return self.paused

    def press_enter(self) -> None:
        """Restart after a death, or otherwise toggle the pause."""
        if not self.player_dead:
            self.paused = not self.paused
            return

        self.player_dead = False
        self.paused = False
        self.rip_position = RIP_HIDDEN_POSITION
        self.player_position = PLAYER_LEFT_POSITION
        self.accept_input = True
        self.score = 0
        self.time_remaining = START_TIME
        self.branches.clear()
        self.message = START_MESSAGE

    def key_released(self) -> None:
        """Listen for chops again and put the axe away."""
        if self.paused:
            return
        self.accept_input = True
        self.axe_position = (AXE_HIDDEN_X, self.axe_position[1])

    def chop(self, side: Side) -> list[GameEvent]:
        """Chop the tree from ``side``, if a chop is being accepted.

        Each chop scores a point, buys some time (more for the first two
        chops), drops the branches one slot and sends a log flying away
        from the player.
        """
        if side is Side.NONE:
            raise ValueError("a chop must come from the left or the right")
        if self.paused or not self.accept_input:
            return []

        self.player_side = side
        self.score += 1
        self.time_remaining += 2 // self.score + CHOP_BONUS_SECONDS
        if side is Side.RIGHT:
            self.axe_position = (AXE_POSITION_RIGHT, self.axe_position[1])
            self.player_position = PLAYER_RIGHT_POSITION
            log_speed = LOG_SPEED_WHEN_CHOPPED_RIGHT
        else:
            self.axe_position = (AXE_POSITION_LEFT, self.axe_position[1])
            self.player_position = PLAYER_LEFT_POSITION
            log_speed = LOG_SPEED_WHEN_CHOPPED_LEFT
        self.branches.shift(self.rng)
        self.log.launch(log_speed)
        self.accept_input = False
        return [GameEvent.CHOP]

    def update(self, dt: float) -> list[GameEvent]:
        """Advance the game by ``dt`` seconds; nothing moves while paused."""
        if self.paused:
            return []

        events: list[GameEvent] = []
        self.fps.tick(dt)

        self.time_remaining -= dt
        if self.time_remaining <= 0.0:
            self.paused = True
            self.score = 0
            self.time_remaining = START_TIME
            self.message = OUT_OF_TIME_MESSAGE
            events.append(GameEvent.OUT_OF_TIME)

        self._bar_width = self.time_bar.width(self.time_remaining)

        self.bee.update(dt, self.rng)
        for cloud in self.clouds:
            cloud.update(dt, self.rng)

        self.log.update(dt)

        if self.branches.lowest == self.player_side and not self.player_dead:
            self.paused = True
            self.player_dead = True
            self.accept_input = False
            self.rip_position = RIP_SHOWN_POSITION
            self.player_position = PLAYER_HIDDEN_POSITION
            self.message = SQUISHED_MESSAGE
            events.append(GameEvent.DEATH)

        if self.fps.score_refresh_due:
            self._score_text = format_score(self.score)

        return events

    def time_bar_width(self) -> float:
        """The width of the time bar as last sized by :meth:`update`."""
        return self._bar_width

    def score_text(self) -> str:
        """The score line as last refreshed; it is redrawn every tenth frame."""
        return self._score_text