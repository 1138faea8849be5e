import pytest

from timber.branches import (
    NUM_BRANCHES,
    BranchColumn,
    BranchPlacement,
    Side,
    TimeBar,
    branch_placement,
)


class ScriptedRng:
    """Returns the given rolls in order and records the bounds asked for."""

    def __init__(self, *rolls):
        self.rolls = list(rolls)
        self.bounds = []

    def randrange(self, stop):
        self.bounds.append(stop)
        return self.rolls.pop(0)


def test_new_column_has_six_left_slots():
    column = BranchColumn()
    assert len(column) == NUM_BRANCHES == 6
    assert list(column) == [Side.LEFT] * 6


def test_shift_rolls_out_of_five():
    column = BranchColumn()
    rng = ScriptedRng(3)
    column.shift(rng)
    assert rng.bounds == [5]


@pytest.mark.parametrize(
    "roll, expected",
    [(0, Side.LEFT), (1, Side.RIGHT), (2, Side.NONE), (3, Side.NONE), (4, Side.NONE)],
)
def test_shift_spawns_side_from_roll(roll, expected):
    column = BranchColumn([Side.NONE] * 6)
    column.shift(ScriptedRng(roll))
    assert column[0] is expected


def test_shift_moves_branches_down_one_slot():
    before = [Side.RIGHT, Side.LEFT, Side.NONE, Side.RIGHT, Side.NONE, Side.LEFT]
    column = BranchColumn(list(before))
    column.shift(ScriptedRng(2))
    assert list(column)[1:] == before[:-1]
    assert len(column) == 6


def test_lowest_is_bottom_slot():
    column = BranchColumn([Side.NONE] * 6)
    column.shift(ScriptedRng(1))
    for _ in range(5):
        column.shift(ScriptedRng(4))
    assert column.lowest is Side.RIGHT


def test_clear_keeps_top_slot_only():
    column = BranchColumn([Side.RIGHT, Side.LEFT, Side.RIGHT, Side.LEFT, Side.RIGHT, Side.LEFT])
    column.clear()
    assert column[0] is Side.RIGHT
    assert list(column)[1:] == [Side.NONE] * 5


def test_branch_placement_left():
    assert branch_placement(Side.LEFT, 2) == BranchPlacement(610.0, 300.0, 180.0)


def test_branch_placement_right():
    assert branch_placement(Side.RIGHT, 0) == BranchPlacement(1330.0, 0.0, 0.0)


def test_branch_placement_none_is_hidden():
    placement = branch_placement(Side.NONE, 1)
    assert placement.x == 3000.0
    assert placement.y == 150.0
    assert placement.rotation is None


def test_sprite_positions_follow_sides():
    sides = [Side.LEFT, Side.NONE, Side.RIGHT, Side.NONE, Side.LEFT, Side.RIGHT]
    column = BranchColumn(list(sides))
    placements = column.sprite_positions()
    assert len(placements) == 6
    assert [p.y for p in placements] == sorted(p.y for p in placements)
    for index, (side, placement) in enumerate(zip(sides, placements)):
        assert placement == branch_placement(side, index)


def test_time_bar_full_and_empty():
    bar = TimeBar()
    assert bar.width(10.0) == 400.0
    assert bar.width(0.0) == 0.0


def test_time_bar_is_proportional():
    bar = TimeBar()
    assert bar.width(5.0) == pytest.approx(bar.width(10.0) / 2)
    assert bar.width(2.5) == pytest.approx(bar.width(5.0) / 2)


def test_time_bar_position_and_height():
    bar = TimeBar()
    x, y = bar.position
    assert y == 980.0
    assert x + bar.start_width / 2 == 960.0
    assert bar.height == 80.0