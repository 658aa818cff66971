
"""
Rendering helpers for the Tetris game.

- One pre-rendered cell sprite per tag; pieces and locked cells are blits.
- Static background (board frame, grid, panel) built once per cell size.
- Locked cells live on a cached board surface, rebuilt only after a lock.
- Panel text is re-rendered only when a stat changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from tetris_board import Board, COLS, ROWS, EMPTY
from tetris_config import CONFIG
from tetris_game import Game, GameState
from tetris_piece import COLORS, TAGS, piece_cells

MARGIN = 16
PANEL_W = 200
GRID_COLOR = (51,51,51)
BG_COLOR = (17,17,17)
TEXT_COLOR = (220,220,220)
DIM_TEXT_COLOR = (150,150,150)

STATUS_TEXT = {
    GameState.READY: "Ready - press any key",
    GameState.PLAYING: "Playing",
    GameState.PAUSED: "Paused",
    GameState.GAME_OVER: "Game Over - press R",
}

CONTROLS = [
    "←/→ Move",
    "↓ Soft drop",
    "↑/X Rot CW",
    "Z Rot CCW",
    "Space Hard drop",
    "P Pause",
    "R Restart",
]


@dataclass
class Layout:
    cell: int
    board_rect: pygame.Rect
    panel_rect: pygame.Rect
    size: Tuple[int,int]

    @classmethod
    def from_config(cls) -> "Layout":
        cell = int(CONFIG["CELL_SIZE"])
        board = pygame.Rect(MARGIN, MARGIN, COLS * cell, ROWS * cell)
        panel = pygame.Rect(board.right + MARGIN, MARGIN, PANEL_W, board.height)
        return cls(cell, board, panel, (panel.right + MARGIN, board.bottom + MARGIN))

    def cell_rect(self, col: int, row: int) -> pygame.Rect:
        return pygame.Rect(self.board_rect.x + col*self.cell, self.board_rect.y + row*self.cell, self.cell, self.cell)


@dataclass
class StatsCache:
    values: Tuple = ()
    lines: List[pygame.Surface] = field(default_factory=list)


class RenderAssets:
    """Holds pre-rendered assets and paints a Game onto a screen surface."""
    def __init__(self, layout: Layout, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.layout = layout
        self.font = font
        self.big_font = big_font or font
        self._make_static()
        self._make_cells()
        self.stats = StatsCache()
        self.board_surface = pygame.Surface(layout.board_rect.size, pygame.SRCALPHA)
        self.controls = [font.render(s, True, DIM_TEXT_COLOR) for s in CONTROLS]

    def _make_static(self):
        lo = self.layout
        self.bg = pygame.Surface(lo.size)
        self.bg.fill(BG_COLOR)
        pygame.draw.rect(self.bg, COLORS[EMPTY], lo.board_rect)
        for x in range(COLS+1):
            X = lo.board_rect.x + x*lo.cell
            pygame.draw.line(self.bg, GRID_COLOR, (X, lo.board_rect.top), (X, lo.board_rect.bottom))
        for y in range(ROWS+1):
            Y = lo.board_rect.y + y*lo.cell
            pygame.draw.line(self.bg, GRID_COLOR, (lo.board_rect.left, Y), (lo.board_rect.right, Y))
        pygame.draw.rect(self.bg, (30,30,30), lo.panel_rect)
        pygame.draw.rect(self.bg, GRID_COLOR, lo.panel_rect, 1)

    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        c = self.layout.cell
        for tag, col in COLORS.items():
            if tag == EMPTY: continue
            s = pygame.Surface((c-1, c-1))
            s.fill(col)
            self.cell_surf[tag] = s

    # ---------- Board surface cache ----------
    def rebuild_board_surface(self, board: Board):
        """Rebuilds the locked-cells surface from board contents."""
        self.board_surface.fill((0,0,0,0))
        c = self.layout.cell
        for y, row in enumerate(board.rows()):
            for x, tag in enumerate(row):
                if tag != EMPTY:
                    self.board_surface.blit(self.cell_surf[tag], (x*c + 1, y*c + 1))

    # ---------- Stats panel ----------
    def _stats_lines(self, game: Game) -> List[pygame.Surface]:
        values = (game.score, game.lines, game.level, game.state)
        if values != self.stats.values:
            self.stats.values = values
            self.stats.lines = [self.font.render(s, True, TEXT_COLOR) for s in (
                f"Score: {game.score}",
                f"Lines: {game.lines}",
                f"Level: {game.level}",
                STATUS_TEXT[game.state],
            )]
        return self.stats.lines

    def draw_panel(self, screen: pygame.Surface, game: Game):
        x, y = self.layout.panel_rect.x + 12, self.layout.panel_rect.y + 12
        for surf in self._stats_lines(game):
            screen.blit(surf, (x, y)); y += 24
        y += 24
        for surf in self.controls:
            screen.blit(surf, (x, y)); y += 20

    def draw_banner(self, screen: pygame.Surface, text: str):
        msg = self.big_font.render(text, True, (255,255,255))
        rect = msg.get_rect(center=self.layout.board_rect.center)
        shade = pygame.Surface(rect.inflate(24, 16).size, pygame.SRCALPHA)
        shade.fill((0,0,0,180))
        screen.blit(shade, rect.inflate(24, 16).topleft)
        screen.blit(msg, rect)

    # ---------- Full frame ----------
    def draw(self, screen: pygame.Surface, game: Game):
        screen.blit(self.bg, (0,0))
        screen.blit(self.board_surface, self.layout.board_rect.topleft)
        p = game.current
        if p is not None:
            for cx, cy in piece_cells(p):
                screen.blit(self.cell_surf[TAGS[p.t]], self.layout.cell_rect(cx, cy).move(1, 1).topleft)
        self.draw_panel(screen, game)
        if game.state is GameState.PAUSED:
            self.draw_banner(screen, "PAUSED")
        elif game.state is GameState.GAME_OVER:
            self.draw_banner(screen, "GAME OVER")
