# render.py
from __future__ import annotations

from typing import Dict, Optional

import pygame  # type: ignore

from .config import (
    HUD_HEIGHT,
    BG, GRID_LINE, SNAKE, FOOD, HUD_BG, TEXT, BUTTON,
    Config, CFG,
)
from .grid import Cell, cell_center_px
from .session import Phase, Snapshot

HEAD, BODY = "head", "body"


class RenderSurface:
    """Drawing primitives the frame is built from."""

    def clear(self) -> None:
        raise NotImplementedError

    def draw_grid(self) -> None:
        raise NotImplementedError

    def draw_snake_segment(self, cell: Cell, role: str) -> None:
        raise NotImplementedError

    def draw_food(self, cell: Cell) -> None:
        raise NotImplementedError

    def draw_hud(self, snap: Snapshot) -> None:
        raise NotImplementedError


def draw_frame(surface: RenderSurface, snap: Snapshot) -> None:
    """Draw one full frame from a snapshot. Runs every frame, whatever the phase."""
    surface.clear()
    surface.draw_grid()
    if snap.food is not None:
        surface.draw_food(snap.food)
    for i, cell in enumerate(snap.snake):
        surface.draw_snake_segment(cell, HEAD if i == 0 else BODY)
    surface.draw_hud(snap)


def hud_buttons(cfg: Config = CFG) -> Dict[str, pygame.Rect]:
    """Start/pause and restart buttons, right-aligned in the HUD strip."""
    w, h = 84, HUD_HEIGHT - 16
    top = cfg.board_px + 8
    right = cfg.board_px - 8
    return {
        "restart": pygame.Rect(right - w, top, w, h),
        "start": pygame.Rect(right - 2 * w - 8, top, w, h),
    }


class PygameSurface(RenderSurface):
    """Draws onto a pygame Surface laid out as board on top, HUD strip below."""

    def __init__(self, screen: pygame.Surface, cfg: Config = CFG,
                 font: Optional[pygame.font.Font] = None):
        self.screen = screen
        self.cfg = cfg
        self.font = font
        self.buttons = hud_buttons(cfg)

    def clear(self) -> None:
        self.screen.fill(BG)

    def draw_grid(self) -> None:
        size, px = self.cfg.cell_size, self.cfg.board_px
        for i in range(1, self.cfg.grid_count):
            offset = i * size
            pygame.draw.line(self.screen, GRID_LINE, (offset, 0), (offset, px - 1))
            pygame.draw.line(self.screen, GRID_LINE, (0, offset), (px - 1, offset))

    def draw_snake_segment(self, cell: Cell, role: str) -> None:
        size = self.cfg.cell_size
        # corner radius scales with the cell: 8px head / 6px body at 20px cells
        radius = max(1, size * (8 if role == HEAD else 6) // 20)
        rect = pygame.Rect(cell[0] * size, cell[1] * size, size, size)
        pygame.draw.rect(self.screen, SNAKE, rect, border_radius=radius)

    def draw_food(self, cell: Cell) -> None:
        cx, cy = cell_center_px(cell, self.cfg.cell_size)
        pygame.draw.circle(self.screen, FOOD, (int(cx), int(cy)), int(self.cfg.cell_size / 2.4))

    def draw_hud(self, snap: Snapshot) -> None:
        hud = pygame.Rect(0, self.cfg.board_px, self.cfg.board_px, HUD_HEIGHT)
        pygame.draw.rect(self.screen, HUD_BG, hud)
        for rect in self.buttons.values():
            pygame.draw.rect(self.screen, BUTTON, rect, border_radius=6)

        if self.font is None:
            return

        labels = {
            "start": "Pause" if snap.phase is Phase.RUNNING else "Start",
            "restart": "Restart",
        }
        for name, rect in self.buttons.items():
            txt = self.font.render(labels[name], True, TEXT)
            self.screen.blit(txt, txt.get_rect(center=rect.center))

        score = self.font.render(f"Score: {snap.score}   Best: {snap.high_score}", True, TEXT)
        status = self.font.render(snap.status, True, TEXT)
        self.screen.blit(score, (8, self.cfg.board_px + 6))
        self.screen.blit(status, (8, self.cfg.board_px + 26))
