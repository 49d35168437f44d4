"""
UCI (Universal Chess Interface) protocol handler.

UCI is the standard text-based protocol that allows chess GUIs and testing
tools (like cutechess-cli) to communicate with chess engines. The engine
reads commands from stdin and writes responses to stdout. All output lines
must be flushed immediately — GUI programs won't block waiting for a newline.

Protocol overview:
    GUI → Engine: uci, isready, ucinewgame, setoption, position, go, stop, quit
    Engine → GUI: id name, id author, option, uciok, readyok, info, bestmove

The difficulty tier is exposed as a combo option:
    setoption name Difficulty value hard

Threading model:
    None. Move selection is one ply deep and finishes in milliseconds, so
    "go" is answered synchronously and "stop" has nothing to interrupt.

Critical rule: NEVER print to stdout except for valid UCI responses.
Debug output must go to stderr or be suppressed entirely.
"""

from __future__ import annotations

import sys
import os
from typing import Callable, TextIO

# ---------------------------------------------------------------------------
# Path setup: make 'opponent' importable when this script is run directly
# from a source checkout (python interface/uci.py).
# ---------------------------------------------------------------------------
_REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if _REPO_ROOT not in sys.path:
    sys.path.insert(0, _REPO_ROOT)

import chess
from opponent.config import SETTINGS
from opponent.constants import CENTIPAWNS_PER_PAWN
from opponent.difficulty import Difficulty
from opponent.errors import InvalidDifficulty
from opponent.selector import RandomSource, rank_moves, select_move


def _log(message: str) -> None:
    """
    Write a debug/error message to stderr.

    In UCI mode, stdout is reserved for valid protocol messages.
    """
    print(message, file=sys.stderr, flush=True)


def _stdout_send(line: str) -> None:
    print(line, flush=True)


class UciHandler:
    """
    Stateful handler for the UCI protocol.

    Holds the current board position and the selected difficulty. The main
    UCI loop creates one instance and dispatches commands to it.

    Attributes:
        board:      The current board position, updated by "position" commands.
        difficulty: Tier used by "go", changed with "setoption".
        rng:        Random source handed to the selector (None = module default).
        send:       Callable that writes one protocol line.
    """

    def __init__(
        self,
        difficulty: Difficulty = SETTINGS.default_difficulty,
        rng: RandomSource | None = None,
        send: Callable[[str], None] = _stdout_send,
    ) -> None:
        self.board: chess.Board = chess.Board()
        self.difficulty: Difficulty = difficulty
        self.rng = rng
        self.send = send

    # -----------------------------------------------------------------------
    # Command handlers
    # -----------------------------------------------------------------------

    def handle_uci(self) -> None:
        """Identify the engine and advertise the Difficulty option."""
        self.send("id name ChessOpponent")
        self.send("id author Chess Opponent Project")
        tiers = " ".join(f"var {name}" for name in Difficulty.names())
        self.send(f"option name Difficulty type combo default {self.difficulty.value} {tiers}")
        self.send("uciok")

    def handle_isready(self) -> None:
        self.send("readyok")

    def handle_ucinewgame(self) -> None:
        """Reset the board. The difficulty survives across games."""
        self.board = chess.Board()

    def handle_setoption(self, tokens: list[str]) -> None:
        """
        Parse a "setoption" command.

        Format:
            setoption name <id> [value <x>]

        Only the Difficulty option is recognised. Option names are matched
        case-insensitively, as GUIs differ in how they echo them back.

        Args:
            tokens: The command tokens with "setoption" already stripped.
        """
        if "name" not in tokens:
            _log("uci: setoption without name")
            return

        name_idx = tokens.index("name")
        if "value" in tokens:
            value_idx = tokens.index("value")
            name = " ".join(tokens[name_idx + 1:value_idx])
            value = " ".join(tokens[value_idx + 1:])
        else:
            name = " ".join(tokens[name_idx + 1:])
            value = ""

        if name.lower() != "difficulty":
            _log(f"uci: ignoring unknown option: {name!r}")
            return

        try:
            self.difficulty = Difficulty.parse(value)
        except InvalidDifficulty as e:
            _log(f"uci: {e}")

    def handle_position(self, tokens: list[str]) -> None:
        """
        Parse and apply a "position" command.

        Command formats:
            position startpos
            position startpos moves e2e4 e7e5 ...
            position fen <FEN>
            position fen <FEN> moves e2e4 e7e5 ...

        Args:
            tokens: The command tokens with "position" already stripped.
                    tokens[0] is "startpos" or "fen".
        """
        try:
            if not tokens:
                return

            if tokens[0] == "startpos":
                self.board = chess.Board()
                move_tokens = tokens[2:] if len(tokens) > 1 and tokens[1] == "moves" else []
            elif tokens[0] == "fen":
                # FEN strings have 6 space-separated fields; find where "moves" appears
                if "moves" in tokens:
                    moves_idx = tokens.index("moves")
                    fen = " ".join(tokens[1:moves_idx])
                    move_tokens = tokens[moves_idx + 1:]
                else:
                    fen = " ".join(tokens[1:])
                    move_tokens = []
                self.board = chess.Board(fen)
            else:
                _log(f"uci: unknown position type: {tokens[0]}")
                return

            for uci_move in move_tokens:
                move = chess.Move.from_uci(uci_move)
                if move in self.board.legal_moves:
                    self.board.push(move)
                else:
                    _log(f"uci: illegal move in position command: {uci_move}")
                    break

        except ValueError as e:
            _log(f"uci: error in position command: {e}")

    def handle_go(self, tokens: list[str]) -> None:
        """
        Choose a move for the current position and reply with bestmove.

        Clock parameters (movetime, wtime, ...) are accepted and ignored.
        The info line reports depth 1, the material score after the move
        in centipawns from the mover's side, and the number of candidate
        moves examined.

        Args:
            tokens: The command tokens with "go" already stripped.
        """
        move = select_move(self.board, self.difficulty, self.rng)
        if move is None:
            # No legal moves: the game is over (checkmate or stalemate).
            # UCI requires a bestmove response; "(none)" is the standard.
            self.send("bestmove (none)")
            return

        ranked = dict(rank_moves(self.board))
        score_cp = ranked[move] * CENTIPAWNS_PER_PAWN
        self.send(f"info depth 1 score cp {score_cp} nodes {len(ranked)}")
        self.send(f"bestmove {move.uci()}")

    def handle_stop(self) -> None:
        """Nothing to interrupt: "go" has already replied."""

    def handle_quit(self) -> None:
        sys.exit(0)


def run_uci_loop(stream: TextIO | None = None, handler: UciHandler | None = None) -> None:
    """
    Main UCI protocol loop.

    Reads lines from stream (stdin by default) and dispatches each command
    to the UciHandler. Runs until "quit" is received or the stream ends.

    Error handling:
        Each command is wrapped in a try/except so that a bug in one
        command handler does not crash the engine. Errors are logged to
        stderr and the loop continues.
    """
    handler = handler or UciHandler()
    stream = stream or sys.stdin

    for raw_line in stream:
        line = raw_line.strip()
        if not line:
            continue

        tokens = line.split()
        command = tokens[0]
        args = tokens[1:]

        try:
            if command == "uci":
                handler.handle_uci()
            elif command == "isready":
                handler.handle_isready()
            elif command == "ucinewgame":
                handler.handle_ucinewgame()
            elif command == "setoption":
                handler.handle_setoption(args)
            elif command == "position":
                handler.handle_position(args)
            elif command == "go":
                handler.handle_go(args)
            elif command == "stop":
                handler.handle_stop()
            elif command == "quit":
                handler.handle_quit()
            else:
                # Unknown commands are ignored per the UCI specification.
                _log(f"uci: ignoring unknown command: {command!r}")

        except Exception as e:
            _log(f"uci: unhandled error for command {command!r}: {e}")


if __name__ == "__main__":
    run_uci_loop()
