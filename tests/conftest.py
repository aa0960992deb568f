"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessgate.core.board import Board


@pytest.fixture
def empty_board() -> Board:
    """A fresh board with no pieces, for hand-built positions."""
    return Board.empty()


@pytest.fixture
def start_board() -> Board:
    """A fresh board in the standard starting position."""
    return Board.set_up()
