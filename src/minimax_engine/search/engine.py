"""
Fixed-depth minimax search with alpha-beta pruning.

The engine is generic over any GameLogic. It explores every root move to
`max_depth` plies (modulo cutoffs) and returns the best one. It does no
move ordering, no transposition caching and no iterative deepening: the
only state kept between searches is the pair of counters below, reset at
the start of each find_best_move call.

Memory is bounded up front: one MoveBuffer per recursion level is
allocated at construction and reused by every search.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from minimax_engine.core.errors import ContractViolation
from minimax_engine.core.types import SCORE_MAX, SCORE_MIN, MoveBuffer, in_score_range
from minimax_engine.games.game_logic import GameLogic
from minimax_engine.games.game_state import GameState

logger = logging.getLogger(__name__)

DEFAULT_MAX_MOVES = 64
DEFAULT_MAX_DEPTH = 5


class Minimax:
    """
    Alpha-beta minimax over a pluggable GameLogic.

    Args:
        logic: Game model supplying evaluation, move generation and rules.
        max_moves: Move buffer capacity at every position. Must cover the
            game's worst-case branching factor.
        max_depth: Search depth in plies, counting the root move.
        pruning: If False, run plain minimax (no cutoffs).
        check_contracts: If True, raise ContractViolation when `logic`
            breaks its contract instead of silently producing sentinels.

    Not safe for concurrent searches: give each thread its own instance.
    """

    def __init__(
        self,
        logic: GameLogic,
        max_moves: int = DEFAULT_MAX_MOVES,
        max_depth: int = DEFAULT_MAX_DEPTH,
        *,
        pruning: bool = True,
        check_contracts: bool = False,
    ):
        if max_moves < 1:
            raise ValueError(f"max_moves must be >= 1, got {max_moves}")
        if max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {max_depth}")

        self._logic = logic
        self._max_moves = max_moves
        self._max_depth = max_depth
        self._pruning = pruning
        self._check_contracts = check_contracts

        # buffers[d] serves every node searched with `d` plies remaining
        self._buffers: List[MoveBuffer] = [MoveBuffer(max_moves) for _ in range(max_depth + 1)]

        self._best_score: Optional[int] = None
        self._nodes_searched = 0

    # ------------------------------------------------------------------
    # Read-only configuration and counters
    # ------------------------------------------------------------------

    @property
    def logic(self) -> GameLogic:
        return self._logic

    @property
    def max_moves(self) -> int:
        return self._max_moves

    @property
    def max_depth(self) -> int:
        return self._max_depth

    @property
    def pruning(self) -> bool:
        return self._pruning

    @property
    def best_score(self) -> Optional[int]:
        """Score of the move chosen by the last search (None before any)."""
        return self._best_score

    @property
    def nodes_searched(self) -> int:
        """Recursive evaluations made by the last search only."""
        return self._nodes_searched

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def find_best_move(self, state: GameState) -> Any:
        """
        Return the best move for the player to move in `state`.

        Root moves are tried in generation order and a later move only
        replaces the current best if it is strictly better, so the first
        of several equally good moves wins.

        Returns None if `state` has no legal moves. `state` is never
        modified.
        """
        self._nodes_searched = 0
        logic = self._logic
        moves = self._buffers[self._max_depth]
        moves.count = self._generate(state, moves)

        if moves.count == 0:
            self._best_score = None
            logger.debug("No legal moves at root; returning None")
            return None

        is_max = logic.is_maximizing_player(state)
        best_move = None
        best_score = SCORE_MIN if is_max else SCORE_MAX
        child_depth = self._max_depth - 1

        for i in range(moves.count):
            move = moves[i]
            child = state.copy()
            logic.apply_move(child, move)

            score = self._minimax(child, child_depth, SCORE_MIN, SCORE_MAX, not is_max)

            if is_max:
                if score > best_score:
                    best_score = score
                    best_move = move
            else:
                if score < best_score:
                    best_score = score
                    best_move = move

        self._best_score = best_score
        logger.debug(
            "Search done: move=%r score=%d nodes=%d depth=%d",
            best_move, best_score, self._nodes_searched, self._max_depth,
        )
        return best_move

    def _minimax(self, state: GameState, depth: int, alpha: int, beta: int, maximizing: bool) -> int:
        self._nodes_searched += 1
        logic = self._logic

        if depth == 0 or logic.is_terminal(state):
            return self._evaluate(state)

        moves = self._buffers[depth]
        moves.count = self._generate(state, moves)

        if self._check_contracts and moves.count == 0:
            raise ContractViolation(
                "generate_moves() returned no moves for a state is_terminal() "
                "reports as ongoing"
            )

        if maximizing:
            best = SCORE_MIN
            for i in range(moves.count):
                child = state.copy()
                logic.apply_move(child, moves[i])
                score = self._minimax(child, depth - 1, alpha, beta, False)

                best = max(best, score)
                alpha = max(alpha, score)
                if self._pruning and beta <= alpha:
                    break  # Beta cutoff
            return best

        best = SCORE_MAX
        for i in range(moves.count):
            child = state.copy()
            logic.apply_move(child, moves[i])
            score = self._minimax(child, depth - 1, alpha, beta, True)

            best = min(best, score)
            beta = min(beta, score)
            if self._pruning and beta <= alpha:
                break  # Alpha cutoff
        return best

    # ------------------------------------------------------------------
    # Contract boundary
    # ------------------------------------------------------------------

    def _generate(self, state: GameState, moves: MoveBuffer) -> int:
        moves.clear()
        count = self._logic.generate_moves(state, moves, self._max_moves)
        if self._check_contracts and not 0 <= count <= self._max_moves:
            raise ContractViolation(
                f"generate_moves() reported {count} moves, capacity is {self._max_moves}"
            )
        return count

    def _evaluate(self, state: GameState) -> int:
        score = self._logic.evaluate(state)
        if self._check_contracts and not in_score_range(score):
            raise ContractViolation(
                f"evaluate() returned {score}, outside ({SCORE_MIN}, {SCORE_MAX})"
            )
        return score
