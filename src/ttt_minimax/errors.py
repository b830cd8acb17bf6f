"""
Input validation errors.

Every failure carries an ``ErrorKind`` so callers can branch on the kind
without matching on messages.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_BOARD_SYMBOLS = "InvalidBoardSymbols"
    INVALID_BOARD_SIZE = "InvalidBoardSize"
    INVALID_PLAYER = "InvalidPlayer"
    INVALID_DEPTH = "InvalidDepth"


class InvalidInputError(ValueError):
    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidBoardSymbolsError(InvalidInputError):
    kind = ErrorKind.INVALID_BOARD_SYMBOLS


class InvalidBoardSizeError(InvalidInputError):
    kind = ErrorKind.INVALID_BOARD_SIZE


class InvalidPlayerError(InvalidInputError):
    kind = ErrorKind.INVALID_PLAYER


class InvalidDepthError(InvalidInputError):
    kind = ErrorKind.INVALID_DEPTH


ERRORS_BY_KIND = {
    ErrorKind.INVALID_BOARD_SYMBOLS: InvalidBoardSymbolsError,
    ErrorKind.INVALID_BOARD_SIZE: InvalidBoardSizeError,
    ErrorKind.INVALID_PLAYER: InvalidPlayerError,
    ErrorKind.INVALID_DEPTH: InvalidDepthError,
}
