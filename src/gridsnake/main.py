# main.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT, Config
from .events import (
    DirectionRequested, InputEvent, InputSource, Restart, TogglePause, direction_toward,
)
from .grid import Cell, cell_center_px
from .render import PygameSurface, draw_frame
from .session import GameSession, Phase
from .storage import JsonScoreStore, MemoryScoreStore, ScoreStore

logger = logging.getLogger(__name__)

KEY_DIRECTIONS = {
    pygame.K_UP: UP, pygame.K_w: UP,
    pygame.K_DOWN: DOWN, pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT, pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}


def translate_event(event, head: Cell, cfg: Config,
                    buttons: Dict[str, pygame.Rect]) -> Optional[InputEvent]:
    """Turn one pygame event into a game input event (or None)."""
    if event.type == pygame.KEYDOWN:
        if event.key in (pygame.K_SPACE, pygame.K_p):
            return TogglePause()
        if event.key == pygame.K_r:
            return Restart()
        if event.key in KEY_DIRECTIONS:
            return DirectionRequested(KEY_DIRECTIONS[event.key], InputSource.KEYBOARD)
        return None

    pos = pointer_pos(event, cfg)
    if pos is not None:
        return _pointer_event(pos, head, cfg, buttons)
    return None


def pointer_pos(event, cfg: Config) -> Optional[Tuple[float, float]]:
    """Window pixel of a left click or finger touch, else None."""
    if event.type == pygame.MOUSEBUTTONDOWN:
        # SDL mirrors touches as mouse clicks; the FINGERDOWN already covered those
        if getattr(event, "touch", False) or event.button != 1:
            return None
        return event.pos

    if event.type == pygame.FINGERDOWN:
        w, h = cfg.window_size
        return (event.x * w, event.y * h)

    return None


def _pointer_event(pos, head: Cell, cfg: Config,
                   buttons: Dict[str, pygame.Rect]) -> Optional[InputEvent]:
    if buttons["start"].collidepoint(pos):
        return TogglePause()
    if buttons["restart"].collidepoint(pos):
        return Restart()
    if pos[1] >= cfg.board_px:
        return None
    direction = direction_toward(cell_center_px(head, cfg.cell_size), pos)
    return DirectionRequested(direction, InputSource.TOUCH)


def handle_events(session: GameSession, cfg: Config, buttons: Dict[str, pygame.Rect]) -> bool:
    """Drain pygame events into the session. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            return False
        pos = pointer_pos(event, cfg)
        if pos is not None and pos[1] < cfg.board_px and session.phase is not Phase.RUNNING:
            # a board touch starts the game first, then steers from the head it starts with
            session.start()
        game_event = translate_event(event, session.snake.head, cfg, buttons)
        if game_event is not None:
            session.handle_input(game_event)
    return True


def run(cfg: Config, store: ScoreStore) -> int:
    pygame.init()
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption("Snake")
    font = pygame.font.SysFont(None, 22)
    clock = pygame.time.Clock()

    session = GameSession(cfg, store=store)
    surface = PygameSurface(screen, cfg, font)
    running = True

    while running:
        # 1) input
        running = handle_events(session, cfg, surface.buttons)
        if not running:
            break

        # 2) update (zero or more ticks)
        session.on_frame(pygame.time.get_ticks() / 1000.0)

        # 3) render, every frame regardless of phase
        draw_frame(surface, session.snapshot())
        pygame.display.flip()
        clock.tick(cfg.fps)

    pygame.quit()
    return session.high_score


def build_parser() -> argparse.ArgumentParser:
    defaults = Config()
    parser = argparse.ArgumentParser(prog="gridsnake", description="Single-screen snake.")
    parser.add_argument("--grid", type=int, default=defaults.grid_count,
                        help="cells per side of the square board")
    parser.add_argument("--cell-size", type=int, default=defaults.cell_size,
                        help="pixels per cell")
    parser.add_argument("--fps", type=int, default=defaults.fps,
                        help="display frame rate cap")
    parser.add_argument("--speed", type=float, default=defaults.initial_speed,
                        help="starting speed in cells per second")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for food placement")
    parser.add_argument("--high-score-file", type=Path, default=defaults.high_score_path,
                        help="where the best score is kept")
    parser.add_argument("--no-save", action="store_true",
                        help="keep the best score in memory only")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def config_from_args(args: argparse.Namespace) -> Config:
    return Config(
        grid_count=args.grid,
        cell_size=args.cell_size,
        fps=args.fps,
        initial_speed=args.speed,
        seed=args.seed,
        high_score_path=None if args.no_save else args.high_score_file,
    ).validate()


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        cfg = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))

    store: ScoreStore
    if cfg.high_score_path is None:
        store = MemoryScoreStore()
    else:
        store = JsonScoreStore(cfg.high_score_path)

    best = run(cfg, store)
    print(f"Best score: {best}")


if __name__ == "__main__":
    main()
