"""Tests for the Move type."""

from dataclasses import FrozenInstanceError

import pytest

from tilemax.board import Board
from tilemax.move import Direction, Move
from tilemax.tiles import create_letter_pool


class TestMoveIdentity:
    """Equality and hashing cover (word, x, y, direction) only."""

    def test_equal_proposals(self):
        assert Move("CASA", 1, 2, Direction.ACROSS) == Move("casa", 1, 2, Direction.ACROSS)

    def test_different_direction(self):
        assert Move("CASA", 1, 2, Direction.ACROSS) != Move("CASA", 1, 2, Direction.DOWN)

    def test_different_anchor(self):
        assert Move("CASA", 1, 2, Direction.ACROSS) != Move("CASA", 2, 1, Direction.ACROSS)

    def test_prepared_record_ignored(self):
        board = Board(create_letter_pool("CAAS"))
        prepared = Move("CASA", 0, 0, Direction.ACROSS)
        board.prepare(prepared)
        bare = Move("CASA", 0, 0, Direction.ACROSS)

        assert prepared.prepared and not bare.prepared
        assert prepared == bare
        assert hash(prepared) == hash(bare)
        assert len({prepared, bare}) == 1


class TestMoveGeometry:
    """Cells covered by a move."""

    def test_cells_across(self):
        move = Move("CAT", 2, 5, Direction.ACROSS)
        assert list(move.cells()) == [(2, 5), (3, 5), (4, 5)]
        assert move.end == (4, 5)

    def test_cells_down(self):
        move = Move("CAT", 2, 5, Direction.DOWN)
        assert list(move.cells()) == [(2, 5), (2, 6), (2, 7)]
        assert move.end == (2, 7)

    def test_direction_from_int(self):
        assert Move("AT", 0, 0, 1).direction is Direction.DOWN

    def test_cross_direction(self):
        assert Direction.ACROSS.cross is Direction.DOWN
        assert Direction.DOWN.cross is Direction.ACROSS

    def test_str(self):
        assert str(Move("CASA", 3, 4, Direction.DOWN)) == '"CASA" @ (3,4) going DOWN'

    def test_sort_key_orders_by_word_first(self):
        moves = [
            Move("CAT", 0, 0, Direction.ACROSS),
            Move("AT", 3, 1, Direction.DOWN),
            Move("AT", 4, 0, Direction.ACROSS),
        ]
        ordered = sorted(moves, key=lambda m: m.sort_key)
        assert [(m.word, m.direction) for m in ordered] == [
            ("AT", Direction.ACROSS),
            ("AT", Direction.DOWN),
            ("CAT", Direction.ACROSS),
        ]


class TestMoveImmutable:
    """Moves cannot change once created."""

    @pytest.mark.parametrize(
        "name, value", [("word", "DOG"), ("x", 3), ("y", 3), ("direction", Direction.DOWN)]
    )
    def test_identity_fields_read_only(self, name, value):
        move = Move("cat", 0, 0, Direction.ACROSS)
        moves = {move}
        with pytest.raises(FrozenInstanceError):
            setattr(move, name, value)
        assert move in moves
        assert move == Move("CAT", 0, 0, Direction.ACROSS)

    def test_record_set_only_by_prepare(self):
        move = Move("CAT", 0, 0, Direction.ACROSS)
        with pytest.raises(FrozenInstanceError):
            move.record = None
        Board(create_letter_pool("CAT")).prepare(move)
        assert move.prepared
