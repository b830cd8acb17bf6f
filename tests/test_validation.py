import pytest

from ttt_minimax.errors import (
    ErrorKind,
    InvalidBoardSizeError,
    InvalidBoardSymbolsError,
    InvalidDepthError,
    InvalidInputError,
    InvalidPlayerError,
)
from ttt_minimax.geometry import BoardGeometry
from ttt_minimax.validation import check_input, validate_input


def test_valid_input_passes():
    assert check_input(1, "x", "xx0oo0000") is None
    validate_input(9, "o", "000000000")


@pytest.mark.parametrize("depth,player,board,kind", [
    (1, "x", "xx0oo000z", ErrorKind.INVALID_BOARD_SYMBOLS),
    (1, "x", "xx0oo000", ErrorKind.INVALID_BOARD_SIZE),
    (1, "z", "xx0oo0000", ErrorKind.INVALID_PLAYER),
    (0, "x", "xx0oo0000", ErrorKind.INVALID_DEPTH),
    (-3, "x", "xx0oo0000", ErrorKind.INVALID_DEPTH),
    (True, "x", "xx0oo0000", ErrorKind.INVALID_DEPTH),
    (2.0, "x", "xx0oo0000", ErrorKind.INVALID_DEPTH),
])
def test_check_input_kinds(depth, player, board, kind):
    assert check_input(depth, player, board) is kind


def test_first_failed_check_is_reported():
    # bad symbols, bad size, bad player and bad depth all at once
    assert check_input(0, "z", "q0") is ErrorKind.INVALID_BOARD_SYMBOLS
    assert check_input(0, "z", "00") is ErrorKind.INVALID_BOARD_SIZE
    assert check_input(0, "z", "0" * 9) is ErrorKind.INVALID_PLAYER


@pytest.mark.parametrize("depth,player,board,exc", [
    (1, "x", "xx0oo000z", InvalidBoardSymbolsError),
    (1, "x", "xx0oo000", InvalidBoardSizeError),
    (1, "z", "xx0oo0000", InvalidPlayerError),
    (0, "x", "xx0oo0000", InvalidDepthError),
])
def test_validate_input_raises_typed_errors(depth, player, board, exc):
    with pytest.raises(exc) as info:
        validate_input(depth, player, board)
    assert isinstance(info.value, InvalidInputError)
    assert isinstance(info.value, ValueError)
    assert info.value.kind.value in ("InvalidBoardSymbols", "InvalidBoardSize", "InvalidPlayer", "InvalidDepth")


def test_size_checked_against_geometry():
    g = BoardGeometry.for_side(4)
    assert check_input(1, "x", "0" * 16, g) is None
    assert check_input(1, "x", "0" * 9, g) is ErrorKind.INVALID_BOARD_SIZE
