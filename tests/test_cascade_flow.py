import random

import pytest

from tilematch.engine.board import Board
from tilematch.engine.errors import BoardReentryError
from tilematch.engine.events import Match, MatchEvent, RefillEvent
from tilematch.engine.generators import CyclingGenerator, RandomTileGenerator
from tilematch.engine.position import Position
from tests.helpers import TWO_PASS_LAYOUT, TWO_PASS_REFILL, TWO_PASS_RESULT, board_from_rows


def test_single_match_then_single_refill():
    # Two values, no initial run; refill alternates b/a so nothing cascades.
    board = board_from_rows([
        ['a', 'a', 'b', 'a'],
        ['b', 'b', 'a', 'b'],
        ['a', 'a', 'b', 'a'],
        ['b', 'b', 'a', 'b'],
    ], refill=['b', 'a', 'b'])
    assert board.check_matches() == []
    events = []
    board.add_listener(events.append)
    passes = board.move(Position(0, 2), Position(0, 3))
    assert passes == 1
    assert events == [
        MatchEvent(Match(matched='a', positions=(Position(0, 0), Position(0, 1), Position(0, 2)))),
        RefillEvent(),
    ]
    assert board.snapshot()[0] == ['b', 'a', 'b', 'b']


def test_two_value_cycle_offset_per_row():
    # A period-2 cycle filled row-major on an even width makes constant columns,
    # so the cycle here shifts by one every row: rows alternate aaba / bbab.
    board = Board(CyclingGenerator(list('aababbab')), 4, 4)
    assert board.snapshot()[:2] == [['a', 'a', 'b', 'a'], ['b', 'b', 'a', 'b']]
    assert board.check_matches() == []
    events = []
    board.add_listener(events.append)
    assert board.move(Position(0, 2), Position(0, 3)) == 1
    assert events == [
        MatchEvent(Match(matched='a', positions=(Position(0, 0), Position(0, 1), Position(0, 2)))),
        RefillEvent(),
    ]
    # The refill continues the cycle: a, a, b.
    assert board.snapshot()[0] == ['a', 'a', 'b', 'b']
    assert board.check_matches() == []


def test_two_step_cascade():
    board = board_from_rows(TWO_PASS_LAYOUT, refill=TWO_PASS_REFILL)
    kinds = []
    board.add_listener(lambda event: kinds.append(event.kind))
    passes = board.move(Position(1, 1), Position(2, 1))
    assert passes == 2
    assert kinds == ['match', 'refill', 'match', 'refill']
    assert board.snapshot() == TWO_PASS_RESULT


def test_listeners_called_in_registration_order():
    board = board_from_rows(TWO_PASS_LAYOUT, refill=TWO_PASS_REFILL)
    calls = []
    board.add_listener(lambda event: calls.append(('first', event.kind)))
    board.add_listener(lambda event: calls.append(('second', event.kind)))
    board.move(Position(1, 1), Position(2, 1))
    assert calls[:4] == [('first', 'match'), ('second', 'match'), ('first', 'refill'), ('second', 'refill')]


def test_rejected_move_changes_nothing_and_emits_nothing():
    board = board_from_rows(TWO_PASS_LAYOUT, refill=TWO_PASS_REFILL)
    before = board.snapshot()
    events = []
    board.add_listener(events.append)
    assert board.move(Position(0, 0), Position(0, 1)) == 0
    assert board.move(Position(0, 0), Position(2, 2)) == 0
    assert board.move(Position(0, 0), Position(3, 0)) == 0
    assert events == []
    assert board.snapshot() == before


def test_listener_cannot_reenter_move():
    board = board_from_rows(TWO_PASS_LAYOUT, refill=TWO_PASS_REFILL)

    def meddle(event):
        board.move(Position(0, 0), Position(0, 1))

    board.add_listener(meddle)
    with pytest.raises(BoardReentryError):
        board.move(Position(1, 1), Position(2, 1))


def test_board_recovers_after_rejected_reentry():
    board = board_from_rows(TWO_PASS_LAYOUT, refill=TWO_PASS_REFILL)
    meddled = []

    def meddle_once(event):
        if not meddled:
            meddled.append(event)
            board.move(Position(0, 0), Position(0, 1))

    board.add_listener(meddle_once)
    with pytest.raises(BoardReentryError):
        board.move(Position(1, 1), Position(2, 1))
    # The swap stands and the bottom-row match is still pending.
    assert board.snapshot() == [['c', 'd', 'c'], ['d', 'b', 'd'], ['a', 'a', 'a']]
    assert len(board.check_matches()) == 1
    assert board.move(Position(2, 0), Position(2, 0)) == 2
    assert board.snapshot() == TWO_PASS_RESULT
    assert board.check_matches() == []


def test_listener_error_leaves_no_empty_cells():
    board = board_from_rows([['a', 'a', 'a', 'a']], refill=['b', 'c', 'd'])
    seen = []

    def fail_on_second_match(event):
        seen.append(event)
        if len(seen) == 2:
            raise ValueError("listener failed")

    board.add_listener(fail_on_second_match)
    with pytest.raises(ValueError):
        board.move(Position(0, 0), Position(0, 0))
    # The first overlapping match was cleared before the failure; its cells are refilled.
    assert board.snapshot() == [['b', 'c', 'd', 'a']]


def test_board_is_stable_after_every_move():
    rng = random.Random(1234)
    board = Board(RandomTileGenerator(['hex', 'nature', 'blood', 'spirit'], rng=rng), 6, 6)
    cleared_this_pass = set()

    def check_match_values(event):
        if isinstance(event, RefillEvent):
            cleared_this_pass.clear()
            return
        for p in event.match.positions:
            value = board.piece(p)
            # Overlapping matches share cells the previous match already emptied.
            assert value == event.match.matched or (value is None and p in cleared_this_pass)
        cleared_this_pass.update(event.match.positions)

    board.add_listener(check_match_values)
    for _ in range(15):
        moves = board.valid_moves()
        if not moves:
            break
        first, second = rng.choice(moves)
        assert board.move(first, second) >= 1
        assert board.check_matches() == []
        assert all(board.piece(p) is not None for p in board.positions())
