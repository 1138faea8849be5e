"""The column of branches on the tree and the time bar beneath it."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Iterator, Optional

NUM_BRANCHES = 6
BRANCH_SPACING = 150
BRANCH_LEFT_X = 610.0
BRANCH_RIGHT_X = 1330.0
BRANCH_HIDDEN_X = 3000.0
BRANCH_LEFT_ROTATION = 180.0
BRANCH_RIGHT_ROTATION = 0.0
BRANCH_ORIGIN = (220.0, 20.0)
BRANCH_CHOICES = 5

TIME_BAR_START_WIDTH = 400.0
TIME_BAR_HEIGHT = 80.0
TIME_BAR_Y = 980.0
START_TIME = 10.0
SCREEN_WIDTH = 1920


class Side(enum.Enum):
    """Which side of the tree something is on."""

    LEFT = 0
    RIGHT = 1
    NONE = 2


@dataclass(frozen=True)
class BranchPlacement:
    """Where a branch sprite is drawn.

    ``rotation`` is ``None`` for a hidden branch, whose rotation is left as it was.
    """

    x: float
    y: float
    rotation: Optional[float]


def branch_placement(side: Side, index: int) -> BranchPlacement:
    """Return where the branch at ``index`` (0 is the top) is drawn for ``side``."""
    height = float(index * BRANCH_SPACING)
    if side is Side.LEFT:
        return BranchPlacement(BRANCH_LEFT_X, height, BRANCH_LEFT_ROTATION)
    if side is Side.RIGHT:
        return BranchPlacement(BRANCH_RIGHT_X, height, BRANCH_RIGHT_ROTATION)
    return BranchPlacement(BRANCH_HIDDEN_X, height, None)


def _fresh_positions() -> list[Side]:
    # Branch slots start out zero-initialised, which is the left side.
    return [Side.LEFT] * NUM_BRANCHES


@dataclass
class BranchColumn:
    """The sides of the branches on the tree, from the top slot down."""

    positions: list[Side] = field(default_factory=_fresh_positions)

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[Side]:
        return iter(self.positions)

    def __getitem__(self, index: int) -> Side:
        return self.positions[index]

    @property
    def lowest(self) -> Side:
        """The side of the branch in the bottom slot, level with the player."""
        return self.positions[-1]

    def shift(self, rng: random.Random) -> None:
        """Move every branch down one slot and grow a new one at the top.

        The new branch is on the left one time in five, on the right one
        time in five, and absent otherwise.
        """
        roll = rng.randrange(BRANCH_CHOICES)
        if roll == 0:
            new = Side.LEFT
        elif roll == 1:
            new = Side.RIGHT
        else:
            new = Side.NONE
        self.positions = [new, *self.positions[:-1]]

    def clear(self) -> None:
        """Remove every branch except the one in the top slot."""
        self.positions = [self.positions[0]] + [Side.NONE] * (len(self.positions) - 1)

    def sprite_positions(self) -> list[BranchPlacement]:
        """Return the placement of every branch sprite, top slot first."""
        return [branch_placement(side, index) for index, side in enumerate(self.positions)]


@dataclass
class TimeBar:
    """The red bar that shrinks as the time left runs down."""

    start_width: float = TIME_BAR_START_WIDTH
    height: float = TIME_BAR_HEIGHT
    start_time: float = START_TIME

    @property
    def width_per_second(self) -> float:
        return self.start_width / self.start_time

    @property
    def position(self) -> tuple[float, float]:
        """The top-left corner of the bar, centred under the tree."""
        return (SCREEN_WIDTH // 2 - self.start_width / 2, TIME_BAR_Y)

    def width(self, time_remaining: float) -> float:
        """Return the bar's width for ``time_remaining`` seconds left."""
        return self.width_per_second * time_remaining