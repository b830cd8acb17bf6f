import pytest

from ttt_minimax.errors import InvalidPlayerError
from ttt_minimax.game_basics import (
    EMPTY,
    O,
    X,
    deserialize_board,
    is_draw,
    is_terminal,
    is_winning,
    other_player,
    serialize_board,
)
from ttt_minimax.geometry import BoardGeometry


def test_other_player_is_involution():
    assert other_player(X) == O
    assert other_player(O) == X
    for p in (X, O):
        assert other_player(other_player(p)) == p


def test_other_player_rejects_unknown():
    with pytest.raises(InvalidPlayerError):
        other_player("z")


def test_deserialize_both_forms():
    assert deserialize_board("xx0oo0000") == ("x", "x", "0", "o", "o", "0", "0", "0", "0")
    assert deserialize_board(" x, x,0,o,o,0,0,0,0\n") == deserialize_board("xx0oo0000")
    assert serialize_board(deserialize_board("x0o")) == "x0o"


@pytest.mark.parametrize("board,player", [
    ("xxx000000", X),
    ("o00o00o00", O),
    ("x000x000x", X),
    ("00o0o0o00", O),
])
def test_is_winning_lines(board: str, player: str):
    assert is_winning(player, board)
    assert not is_winning(other_player(player), board)


def test_is_winning_ignores_mismatched_length():
    assert not is_winning(X, "xxx00000")
    assert not is_winning(X, "")


def test_is_winning_4x4():
    g = BoardGeometry.for_side(4)
    assert is_winning(O, "0o000o000o000o00", g)
    assert not is_winning(O, "ooo0000000000000", g)


def test_draw_and_terminal():
    draw = "xoxoxooxo"
    assert is_draw(draw)
    assert not is_winning(X, draw) and not is_winning(O, draw)
    assert is_terminal(X, draw)
    assert not is_terminal(X, "xx0oo0000")
    assert is_terminal(O, "xxxoo0000")
    assert not is_draw(EMPTY * 9)


def test_deserialize_drops_inner_whitespace():
    assert deserialize_board("xx0 oo0 000") == deserialize_board("xx0oo0000")
    assert deserialize_board("xx0\too0\n000") == deserialize_board("xx0oo0000")
