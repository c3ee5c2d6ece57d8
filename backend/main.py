import argparse
import json
import logging
import os
import random
import sys
import time
import uuid
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from domain.constants import (
    BORDER_COLLISION,
    DEFAULT_BOARD_HEIGHT,
    DEFAULT_BOARD_WIDTH,
    DEFAULT_MAX_FRAMES,
    DEFAULT_TICK_RATE_MS,
    TAIL_COLLISION,
)
from domain.direction import steer, direction_of
from domain.food import place_food
from domain.game_state import GameState
from domain.geometry import Point, Position, Size
from domain.snake import Snake
from players import InputSource, ScriptedPlayer, get_player_class, list_players, AVAILABLE_PLAYERS
from services.renderers import MultiRenderer, Renderer, TextRenderer, render_state
from services.tick_timer import TickTimer

load_dotenv()

logger = logging.getLogger(__name__)

LOOP_SLEEP_SECONDS = 0.01


@dataclass
class RoundResult:
    """How a round ended."""
    round_number: int
    reason: str
    score: int
    ticks: int


class SnakeGame:
    """
    Manages one game session:
      - Board bounds
      - Snake and food (replaced on every restart)
      - Tick timer and tick counter
      - Input subscription and renderer
      - History of finished rounds (in memory only)
    """
    def __init__(
        self,
        width: int = DEFAULT_BOARD_WIDTH,
        height: int = DEFAULT_BOARD_HEIGHT,
        tick_rate_ms: int = DEFAULT_TICK_RATE_MS,
        renderer: Optional[Renderer] = None,
        input_source: Optional[InputSource] = None,
        timer: Optional[TickTimer] = None,
        rng: Optional[random.Random] = None,
        start_position: Optional[Position] = None,
        game_id: str = None
    ):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board size must be positive, got {width}x{height}.")
        if tick_rate_ms <= 0:
            raise ValueError(f"Tick rate must be positive, got {tick_rate_ms}ms.")

        self.size = Size(width, height)
        self.width = width
        self.height = height
        self.tick_rate_ms = tick_rate_ms

        if renderer is not None and renderer.size != self.size:
            raise ValueError(
                f"Renderer size {renderer.size.x}x{renderer.size.y} does not match board {width}x{height}."
            )
        self.renderer = renderer
        self.input_source = input_source
        self.timer = timer or TickTimer()
        self.rng = rng or random.Random()

        if start_position is None:
            start_position = Point(width // 2, height // 2)
        self.start_position = Point(*start_position)
        if not self.start_position.within(self.size):
            raise ValueError(f"Start position {tuple(self.start_position)} is outside the board.")

        if game_id is None:
            self.game_id = str(uuid.uuid4())
        else:
            self.game_id = game_id

        self.snake: Optional[Snake] = None
        self.food: Optional[Position] = None
        self.tick_count = 0
        self.total_ticks = 0
        self.round_number = 0
        self.running = False
        self.history: List[RoundResult] = []
        self._subscribed = False

    @property
    def score(self) -> int:
        return len(self.snake) - 1 if self.snake is not None else 0

    # -------------------------------
    # Session control
    # -------------------------------

    def start(self) -> GameState:
        """Begin a fresh round: new snake, new food, tick counter at zero."""
        # Never let two tick streams overlap
        self.timer.cancel()

        self.snake = Snake([self.start_position])
        self.food = None
        self._spawn_food()
        self.tick_count = 0

        if self.input_source is not None and not self._subscribed:
            self.input_source.subscribe(self.handle_input)
            self._subscribed = True

        self.timer.start(self.tick_rate_ms, self._on_timer)
        self.running = True
        logger.info(
            f"Round {self.round_number} started on {self.width}x{self.height} board "
            f"(snake at {tuple(self.start_position)}, food at {tuple(self.food)}, tick rate {self.tick_rate_ms}ms)"
        )
        return self.get_current_state()

    def stop(self) -> None:
        """Cancel the tick timer. Safe to call when already stopped."""
        if self.running:
            logger.info(f"Game {self.game_id} stopped after {self.total_ticks} ticks")
        self._halt()

    def _halt(self) -> None:
        self.timer.cancel()
        self.running = False

    def restart(self) -> GameState:
        self._halt()
        if self.snake is not None:
            self.round_number += 1
        return self.start()

    def set_tick_rate(self, ms: int) -> None:
        """Change the tick interval; a running game is rescheduled at the new rate."""
        if ms <= 0:
            raise ValueError(f"Tick rate must be positive, got {ms}ms.")
        self.tick_rate_ms = ms
        if self.running:
            self.timer.start(ms, self._on_timer)
        logger.info(f"Tick rate set to {ms}ms")

    def handle_input(self, direction: str) -> None:
        """Apply a direction event right away so the next tick reads it."""
        if self.snake is None:
            return
        # Checked against the pending vector, so two quick turns between ticks can reverse
        self.snake.vector = steer(self.snake.vector, direction)

    # -------------------------------
    # Simulation
    # -------------------------------

    def _on_timer(self) -> None:
        self.tick()

    def tick(self) -> GameState:
        """
        Execute one tick:
          1) Clear the previous frame
          2) Advance the snake
          3) Check tail, food and border collisions (in that order)
          4) Render and return the new snapshot
        """
        if self.snake is None:
            raise RuntimeError("Game has not been started.")

        self.tick_count += 1
        self.total_ticks += 1

        if self.renderer is not None:
            self.renderer.clear()

        self.snake.advance()
        self._detect_collision()

        state = self.get_current_state()
        if self.renderer is not None:
            render_state(self.renderer, state)
        return state

    def _detect_collision(self) -> None:
        head = self.snake.head

        if head in self.snake.body():
            self._on_tail_collision()
            return

        if head == self.food:
            self._on_food_collision()

        if not head.within(self.size):
            self._on_border_collision()

    def _on_food_collision(self) -> None:
        self.snake.grow()
        logger.debug(f"Food eaten at {tuple(self.food)}; length is now {len(self.snake)}")
        self._spawn_food()

    def _on_tail_collision(self) -> None:
        self._end_round(TAIL_COLLISION)

    def _on_border_collision(self) -> None:
        self._end_round(BORDER_COLLISION)

    def _end_round(self, reason: str) -> None:
        result = RoundResult(
            round_number=self.round_number,
            reason=reason,
            score=self.score,
            ticks=self.tick_count
        )
        self.history.append(result)
        logger.info(
            f"Round {result.round_number} over: {reason} collision at {tuple(self.snake.head)}, "
            f"score {result.score} after {result.ticks} ticks"
        )
        self.restart()

    def _spawn_food(self) -> None:
        self.food = place_food(self.snake.positions, self.size, rng=self.rng)

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        snake_positions = []
        vector = (0, 0)
        if self.snake is not None:
            snake_positions = [tuple(p) for p in self.snake.positions]
            vector = tuple(self.snake.vector)

        return GameState(
            tick_count=self.tick_count,
            snake_positions=snake_positions,
            food=tuple(self.food) if self.food is not None else None,
            score=self.score,
            width=self.width,
            height=self.height,
            vector=vector,
            running=self.running,
            round_number=self.round_number
        )

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        state = self.get_current_state()
        heading = direction_of(Point(*state.vector)) or "idle"
        print(f"\nTick {state.tick_count} ({heading}), score {state.score}")
        print(state.print_board() + "\n")


# -------------------------------
# Session loop
# -------------------------------

def run_session(
    game: SnakeGame,
    max_rounds: Optional[int] = None,
    max_ticks: Optional[int] = None,
    loop_sleep: float = LOOP_SLEEP_SECONDS
) -> Dict[str, Any]:
    """
    Run a game on the current thread until a limit is reached.

    The loop fires due ticks, lets the input source react to every new tick
    and sleeps in between. Without limits it runs until interrupted.

    Args:
        game: The session to drive (started here).
        max_rounds: Stop after this many rounds have ended.
        max_ticks: Stop after this many ticks in total.
        loop_sleep: Upper bound on each sleep between timer checks.

    Returns:
        A dictionary summarizing the session.
    """
    state = game.start()
    if game.input_source is not None:
        game.input_source.poll(state)
    last_tick = game.total_ticks

    try:
        while game.running:
            game.timer.run_pending()

            if game.total_ticks != last_tick:
                last_tick = game.total_ticks
                if game.input_source is not None:
                    game.input_source.poll(game.get_current_state())

            if max_ticks is not None and game.total_ticks >= max_ticks:
                break
            if max_rounds is not None and len(game.history) >= max_rounds:
                break

            idle = game.timer.idle_seconds
            if idle is None or idle > loop_sleep:
                idle = loop_sleep
            if idle > 0:
                time.sleep(idle)
    finally:
        game.stop()

    final_state = game.get_current_state()
    return {
        "game_id": game.game_id,
        "rounds_played": len(game.history),
        "total_ticks": game.total_ticks,
        "best_score": max([r.score for r in game.history] + [final_state.score]),
        "round_results": [asdict(r) for r in game.history],
        "final_state": final_state.to_dict()
    }


# -------------------------------
# Command line
# -------------------------------

def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def parse_moves(script: str) -> Dict[int, str]:
    """
    Parse a move script like "0:RIGHT,4:DOWN" into {tick_count: direction}.
    """
    moves: Dict[int, str] = {}
    if not script:
        return moves
    for item in script.split(","):
        item = item.strip()
        if not item:
            continue
        tick, sep, direction = item.partition(":")
        if not sep:
            raise ValueError(f"Invalid move '{item}', expected TICK:DIRECTION")
        moves[int(tick)] = direction.strip().upper()
    return moves


def build_input_source(player: str, seed: Optional[int], moves: str) -> InputSource:
    player_class = get_player_class(player)
    if player_class is ScriptedPlayer:
        return ScriptedPlayer(parse_moves(moves))
    if player_class is InputSource:
        return InputSource()
    return player_class(rng=random.Random(seed))


def main():
    parser = argparse.ArgumentParser(
        description="Run a headless Snake session driven by an autopilot or a move script."
    )
    parser.add_argument("--width", type=int, default=_env_int("SNAKE_BOARD_WIDTH", DEFAULT_BOARD_WIDTH),
                        help="Width of the board")
    parser.add_argument("--height", type=int, default=_env_int("SNAKE_BOARD_HEIGHT", DEFAULT_BOARD_HEIGHT),
                        help="Height of the board")
    parser.add_argument("--tick-rate", type=int, default=_env_int("SNAKE_TICK_RATE_MS", DEFAULT_TICK_RATE_MS),
                        help="Milliseconds between ticks")
    parser.add_argument("--player", type=str, default="random", choices=AVAILABLE_PLAYERS,
                        help="Input source steering the snake: " + "; ".join(
                            f"{p['key']} = {p['description']}" for p in list_players()))
    parser.add_argument("--moves", type=str, default="",
                        help="Move script for the scripted player, e.g. '0:RIGHT,4:DOWN'")
    parser.add_argument("--max-rounds", type=int, default=3,
                        help="Stop after this many rounds have ended (0 = no limit)")
    parser.add_argument("--max-ticks", type=int, default=0,
                        help="Stop after this many ticks in total (0 = no limit)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and the random player")
    parser.add_argument("--record", type=str, default=None,
                        help="Write the session as a video to this path (e.g. session.mp4)")
    parser.add_argument("--fps", type=int, default=None,
                        help="Frames per second for --record (defaults to the tick rate)")
    parser.add_argument("--max-frames", type=int, default=_env_int("SNAKE_MAX_FRAMES", DEFAULT_MAX_FRAMES),
                        help="Keep at most this many frames for --record (0 = no limit)")
    parser.add_argument("--quiet", action="store_true",
                        help="Do not print the board every tick")
    parser.add_argument("--log-level", type=str, default=os.getenv("LOG_LEVEL", "INFO"),
                        help="Logging level")

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    size = Size(args.width, args.height)
    renderers: List[Renderer] = []
    if not args.quiet:
        renderers.append(TextRenderer(size, sys.stdout))

    recorder = None
    if args.record:
        # Imported here so text-only runs do not need Pillow/MoviePy
        from services.frame_renderer import FrameRenderer
        recorder = FrameRenderer(size, max_frames=args.max_frames or None)
        renderers.append(recorder)

    renderer = None
    if len(renderers) == 1:
        renderer = renderers[0]
    elif renderers:
        renderer = MultiRenderer(size, renderers)

    game = SnakeGame(
        width=args.width,
        height=args.height,
        tick_rate_ms=args.tick_rate,
        renderer=renderer,
        input_source=build_input_source(args.player, args.seed, args.moves),
        rng=random.Random(args.seed)
    )

    try:
        result = run_session(
            game,
            max_rounds=args.max_rounds or None,
            max_ticks=args.max_ticks or None
        )
    except KeyboardInterrupt:
        print("\nInterrupted.")
        result = {
            "game_id": game.game_id,
            "rounds_played": len(game.history),
            "total_ticks": game.total_ticks,
            "round_results": [asdict(r) for r in game.history]
        }

    if recorder is not None and recorder.frames:
        fps = args.fps or max(1, round(1000 / args.tick_rate))
        result["video_path"] = recorder.write_video(args.record, fps=fps)

    print("\nSession Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
