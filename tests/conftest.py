"""
Shared test fixtures for minimax_engine tests.

Design principles:
- Toy game models with hand-checkable trees
- Real games only where the behaviour is game-specific
- Minimal, focused fixtures
"""

from typing import Any, List, Tuple

import pytest

from minimax_engine.core.types import MoveBuffer
from minimax_engine.games.game_logic import GameLogic
from minimax_engine.games.tic_tac_toe import TicTacToe
from minimax_engine.games.connect_four import ConnectFour


# =============================================================================
# Toy Game Models
# =============================================================================

class PathState:
    """State for toy games: the sequence of moves taken from the root."""

    __slots__ = ('path',)

    winner = 0  # toy games are never won

    def __init__(self, path: Tuple[int, ...] = ()):
        self.path = path

    def copy(self) -> "PathState":
        return PathState(self.path)

    @property
    def ply(self) -> int:
        return len(self.path)

    @property
    def current_player(self) -> int:
        return 1 + self.ply % 2


class TreeGame(GameLogic):
    """
    Game defined by an explicit nested-list tree.

    Ints are leaves (terminal, evaluated to themselves), lists are inner
    nodes whose items are the children in move order. An empty list is a
    non-terminal node without moves.
    """

    def __init__(self, tree: Any, root_maximizing: bool = True, cutoff_value: int = 0):
        self.tree = tree
        self.root_maximizing = root_maximizing
        self.cutoff_value = cutoff_value
        self.evaluated: List[Tuple[int, ...]] = []

    def node(self, state: PathState) -> Any:
        node = self.tree
        for i in state.path:
            node = node[i]
        return node

    def evaluate(self, state: PathState) -> int:
        self.evaluated.append(state.path)
        node = self.node(state)
        return node if isinstance(node, int) else self.cutoff_value

    def generate_moves(self, state: PathState, moves: MoveBuffer, max_moves: int) -> int:
        node = self.node(state)
        if isinstance(node, int):
            return 0
        count = min(len(node), max_moves)
        for i in range(count):
            moves[i] = i
        return count

    def apply_move(self, state: PathState, move: int) -> None:
        state.path = state.path + (move,)

    def is_terminal(self, state: PathState) -> bool:
        return isinstance(self.node(state), int)

    def is_maximizing_player(self, state: PathState) -> bool:
        return (state.ply % 2 == 0) == self.root_maximizing


class EndlessGame(GameLogic):
    """Never terminal, always `branching` moves; remembers the deepest ply reached."""

    def __init__(self, branching: int = 2, score: int = 0):
        self.branching = branching
        self.score = score
        self.deepest = 0

    def evaluate(self, state: PathState) -> int:
        return self.score

    def generate_moves(self, state: PathState, moves: MoveBuffer, max_moves: int) -> int:
        count = min(self.branching, max_moves)
        for i in range(count):
            moves[i] = i
        return count

    def apply_move(self, state: PathState, move: int) -> None:
        state.path = state.path + (move,)
        self.deepest = max(self.deepest, state.ply)

    def is_terminal(self, state: PathState) -> bool:
        return False

    def is_maximizing_player(self, state: PathState) -> bool:
        return state.ply % 2 == 0


class NoMoveGame(GameLogic):
    """Reports no moves and never terminates."""

    def evaluate(self, state: PathState) -> int:
        return 0

    def generate_moves(self, state: PathState, moves: MoveBuffer, max_moves: int) -> int:
        return 0

    def apply_move(self, state: PathState, move: int) -> None:
        raise AssertionError("no move should ever be applied")

    def is_terminal(self, state: PathState) -> bool:
        return False

    def is_maximizing_player(self, state: PathState) -> bool:
        return True


# Depth 3, branching 2. Minimax value 5 via move 0.
# With alpha-beta one leaf (9) is never visited.
HAND_TREE = [
    [[3, 5], [6, 9]],
    [[1, 2], [0, -1]],
]


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def root() -> PathState:
    return PathState()


@pytest.fixture
def tree_game():
    """Factory: tree_game(tree, root_maximizing=True)."""
    return TreeGame


@pytest.fixture
def hand_tree_game() -> TreeGame:
    return TreeGame(HAND_TREE)


@pytest.fixture
def endless_game():
    """Factory: endless_game(branching=2)."""
    return EndlessGame


@pytest.fixture
def no_move_game() -> NoMoveGame:
    return NoMoveGame()


@pytest.fixture
def ttt() -> TicTacToe:
    return TicTacToe()


@pytest.fixture
def c4() -> ConnectFour:
    return ConnectFour()


@pytest.fixture
def path_state():
    """Factory: path_state(path) for toy games."""
    return PathState
