"""Pygame GUI frontend — drag photo tiles into the gap.

Includes the size menu, the puzzle itself and a solved screen.  Mouse
drags are forwarded to the engine as gesture translations; the tile under
the cursor follows the clamped offset and is committed on release.
"""

from __future__ import annotations

import enum
import logging
import random
from pathlib import Path

import pygame
from PIL import Image

from photofinish.backend.engine.gameplay import PuzzleEngine
from photofinish.backend.engine.gameplay.engine import MAX_SIZE, MIN_SIZE, SIZE_LABELS
from photofinish.backend.imaging.splitter import crop_to_square, load_image, puzzle_tiles
from photofinish.backend.models.board import Direction, Offset

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Catppuccin Mocha palette
# ---------------------------------------------------------------------------
COL_BASE = (30, 30, 46)
COL_MANTLE = (24, 24, 37)
COL_SURFACE0 = (49, 50, 68)
COL_SURFACE1 = (69, 71, 90)
COL_OVERLAY0 = (108, 112, 134)
COL_TEXT = (205, 214, 244)
COL_SUBTEXT = (166, 173, 200)
COL_BLUE = (137, 180, 250)
COL_LAVENDER = (180, 190, 254)
COL_GREEN = (166, 227, 161)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 500, 680
TILE_GAP = 2
MARGIN = 20
BOARD_TOP = 76
BOARD_MAX = WIN_W - 2 * MARGIN  # max board width/height in px


class _Screen(enum.Enum):
    MENU = "menu"
    PLAYING = "playing"
    SOLVED = "solved"


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_SURFACE0,
        hover: tuple = COL_SURFACE1,
        fg: tuple = COL_TEXT,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        c = self.hover if self._hot else self.bg
        pygame.draw.rect(surf, c, self.rect, border_radius=8)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _to_surface(image: Image.Image) -> pygame.Surface:
    return pygame.image.frombytes(image.tobytes(), image.size, "RGB")


def tile_px(size: int) -> int:
    """Side length in px of one tile on a *size* × *size* board."""
    return (BOARD_MAX - (size - 1) * TILE_GAP) // size


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(
        self,
        default_size: int,
        photo: Image.Image | None = None,
        photo_name: str = "",
        seed: int | None = None,
    ) -> None:
        self._sel_size = default_size if MIN_SIZE <= default_size <= MAX_SIZE else MIN_SIZE
        self._rng = random.Random(seed) if seed is not None else None
        self._photo = photo
        self._photo_name = photo_name if photo is not None else "no photo, numbered tiles"

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("PhotoFinish")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 38, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._screen = _Screen.MENU
        self._engine: PuzzleEngine[int] | None = None
        self._tiles: list[pygame.Surface] = []
        self._full: pygame.Surface | None = None

        # drag gesture: Idle when _drag_index is None
        self._drag_index: int | None = None
        self._drag_start: tuple[int, int] = (0, 0)
        self._drag_offset = Offset()

        self._build_menu_btns()
        self._build_solved_btns()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        bw, bh, gap = 84, 46, 6
        sizes = range(MIN_SIZE, MAX_SIZE + 1)
        total_w = len(sizes) * bw + (len(sizes) - 1) * gap
        sx = _cx(total_w)

        self._size_btns: dict[int, _Btn] = {}
        for i, s in enumerate(sizes):
            self._size_btns[s] = _Btn(
                (sx + i * (bw + gap), 250, bw, bh),
                f"{SIZE_LABELS[s]} {s}",
                self._f_btn_sm,
            )

        bw_lg = 220
        self._start_btn = _Btn(
            (_cx(bw_lg), 340, bw_lg, 50),
            "S T A R T",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._quit_btn = _Btn(
            (_cx(bw_lg), 406, bw_lg, 42),
            "Q U I T",
            self._f_btn_sm,
            bg=COL_RED,
            hover=(255, 170, 185),
            fg=COL_BASE,
        )
        self._menu_all = [*self._size_btns.values(), self._start_btn, self._quit_btn]

    def _build_solved_btns(self) -> None:
        bw = 220
        self._again_btn = _Btn(
            (_cx(bw), WIN_H - 130, bw, 50),
            "PLAY AGAIN",
            self._f_btn,
            bg=COL_GREEN,
            hover=(190, 240, 190),
            fg=COL_BASE,
        )
        self._menu_btn = _Btn((_cx(bw), WIN_H - 66, bw, 46), "M E N U", self._f_btn_sm)

    # ── layout ──────────────────────────────────────────────────────────────

    def _origin(self, size: int) -> tuple[int, int]:
        tpx = tile_px(size)
        total = size * tpx + (size - 1) * TILE_GAP
        return _cx(total), BOARD_TOP

    def _tile_rect(self, index: int) -> pygame.Rect:
        engine = self._engine
        assert engine is not None
        tpx = tile_px(engine.size)
        ox, oy = self._origin(engine.size)
        r, c = engine.board.position(index)
        return pygame.Rect(ox + c * (tpx + TILE_GAP), oy + r * (tpx + TILE_GAP), tpx, tpx)

    def _index_at(self, pos: tuple[int, int]) -> int | None:
        engine = self._engine
        assert engine is not None
        for i in range(engine.size * engine.size):
            if self._tile_rect(i).collidepoint(pos):
                return i
        return None

    # ── session ─────────────────────────────────────────────────────────────

    def _prepare_tiles(self, size: int) -> None:
        """Slice the photo into per-tile surfaces for a *size* board."""
        self._tiles = []
        self._full = None
        if self._photo is None:
            return
        tpx = tile_px(size)
        square = crop_to_square(self._photo).resize((size * tpx, size * tpx))
        self._full = _to_surface(square)
        self._tiles = [_to_surface(piece) for piece in puzzle_tiles(square, size)]

    def _start_game(self) -> None:
        size = self._sel_size
        self._prepare_tiles(size)
        self._engine = PuzzleEngine(
            size,
            list(range(size * size - 1)),
            tile_size=tile_px(size),
            spacing=TILE_GAP,
            rng=self._rng,
        )
        self._drag_index = None
        self._drag_offset = Offset()
        logger.info("Started %d×%d puzzle (%s)", size, size, self._photo_name)
        self._screen = _Screen.PLAYING

    def _check_solved(self) -> None:
        engine = self._engine
        if engine is not None and engine.is_solved:
            logger.info("Puzzle solved")
            self._screen = _Screen.SOLVED

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(self._surf, self._f_big.render("PHOTO  FINISH", True, COL_TEXT), 80)
        _blit_center(
            self._surf, self._f_body.render(self._photo_name, True, COL_SUBTEXT), 150
        )
        _blit_center(
            self._surf, self._f_body.render("Select size", True, COL_SUBTEXT), 210
        )
        for s, btn in self._size_btns.items():
            btn.bg = COL_GREEN if s == self._sel_size else COL_SURFACE0
            btn.fg = COL_BASE if s == self._sel_size else COL_TEXT
            btn.draw(self._surf)
        self._start_btn.draw(self._surf)
        self._quit_btn.draw(self._surf)

    def _draw_tile(self, tile: int, rect: pygame.Rect, font: pygame.font.Font) -> None:
        if self._tiles:
            self._surf.blit(self._tiles[tile], rect.topleft)
            return
        pygame.draw.rect(self._surf, COL_BLUE, rect, border_radius=6)
        lbl = font.render(str(tile + 1), True, COL_BASE)
        self._surf.blit(
            lbl,
            (rect.centerx - lbl.get_width() // 2, rect.centery - lbl.get_height() // 2),
        )

    def _draw_game(self) -> None:
        self._surf.fill(COL_BASE)
        engine = self._engine
        assert engine is not None
        sz = engine.size
        tpx = tile_px(sz)
        f_tile = pygame.font.SysFont("Helvetica", max(14, tpx // 3), bold=True)

        _blit_center(
            self._surf,
            self._f_title.render(f"PhotoFinish  {sz}×{sz}", True, COL_TEXT),
            24,
        )

        ox, oy = self._origin(sz)
        total = sz * tpx + (sz - 1) * TILE_GAP
        pygame.draw.rect(
            self._surf,
            COL_MANTLE,
            pygame.Rect(ox - TILE_GAP, oy - TILE_GAP, total + 2 * TILE_GAP, total + 2 * TILE_GAP),
            border_radius=6,
        )

        # the dragged tile goes last so it slides over its neighbours
        for i, tile in enumerate(engine.slots):
            if tile is None or i == self._drag_index:
                continue
            self._draw_tile(tile, self._tile_rect(i), f_tile)

        if self._drag_index is not None:
            tile = engine.slots[self._drag_index]
            if tile is not None:
                rect = self._tile_rect(self._drag_index).move(
                    round(self._drag_offset.dx), round(self._drag_offset.dy)
                )
                self._draw_tile(tile, rect, f_tile)

        _blit_center(
            self._surf,
            self._f_small.render(
                "Drag or Arrows / WASD  slide     R  reshuffle     M  menu",
                True,
                COL_OVERLAY0,
            ),
            oy + total + 24,
        )

    def _draw_solved(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(
            self._surf,
            self._f_big.render("★  PHOTO FINISH  ★", True, COL_GREEN),
            20,
        )
        engine = self._engine
        assert engine is not None
        if self._full is not None:
            _, oy = self._origin(engine.size)
            self._surf.blit(self._full, (_cx(self._full.get_width()), oy))
        else:
            _blit_center(
                self._surf,
                self._f_title.render(f"{engine.size}×{engine.size} solved", True, COL_TEXT),
                200,
            )
        self._again_btn.draw(self._surf)
        self._menu_btn.draw(self._surf)

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for s, b in self._size_btns.items():
                if b.hit(ev.pos):
                    self._sel_size = s
                    return True
            if self._start_btn.hit(ev.pos):
                self._start_game()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._start_game()
            elif ev.key == pygame.K_LEFT:
                self._sel_size = max(MIN_SIZE, self._sel_size - 1)
            elif ev.key == pygame.K_RIGHT:
                self._sel_size = min(MAX_SIZE, self._sel_size + 1)
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_game(self, ev: pygame.event.Event) -> bool:
        engine = self._engine
        assert engine is not None
        if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            index = self._index_at(ev.pos)
            if index is not None and engine.slots[index] is not None:
                self._drag_index = index
                self._drag_start = ev.pos
                self._drag_offset = Offset()
        elif ev.type == pygame.MOUSEMOTION and self._drag_index is not None:
            sx, sy = self._drag_start
            self._drag_offset = engine.get_constrained_offset(
                self._drag_index, (ev.pos[0] - sx, ev.pos[1] - sy)
            )
        elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1:
            if self._drag_index is not None:
                engine.commit_if_threshold_crossed(self._drag_index, self._drag_offset)
                self._drag_index = None
                self._drag_offset = Offset()
                self._check_solved()
        elif ev.type == pygame.KEYDOWN and self._drag_index is None:
            _dirs = {
                pygame.K_UP: Direction.UP,
                pygame.K_w: Direction.UP,
                pygame.K_DOWN: Direction.DOWN,
                pygame.K_s: Direction.DOWN,
                pygame.K_LEFT: Direction.LEFT,
                pygame.K_a: Direction.LEFT,
                pygame.K_RIGHT: Direction.RIGHT,
                pygame.K_d: Direction.RIGHT,
            }
            if ev.key in _dirs:
                engine.move(_dirs[ev.key])
                self._check_solved()
            elif ev.key == pygame.K_r:
                engine.shuffle()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    def _ev_solved(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._again_btn.motion(ev.pos)
            self._menu_btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._again_btn.hit(ev.pos):
                self._start_game()
            elif self._menu_btn.hit(ev.pos):
                self._screen = _Screen.MENU
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_r, pygame.K_RETURN):
                self._start_game()
            elif ev.key in (pygame.K_m, pygame.K_ESCAPE):
                self._screen = _Screen.MENU
        return True

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.MENU: self._ev_menu,
            _Screen.PLAYING: self._ev_game,
            _Screen.SOLVED: self._ev_solved,
        }
        _draw = {
            _Screen.MENU: self._draw_menu,
            _Screen.PLAYING: self._draw_game,
            _Screen.SOLVED: self._draw_solved,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if not _dispatch[self._screen](ev):
                    running = False
                    break

            _draw[self._screen]()
            pygame.display.flip()
            self._clock.tick(60)

        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    size: int = MIN_SIZE,
    image_path: Path | None = None,
    seed: int | None = None,
) -> None:
    """Launch the Pygame GUI (opens on the size menu)."""
    photo = load_image(image_path) if image_path is not None else None
    name = image_path.name if image_path is not None else ""
    app = PygameApp(size, photo, name, seed)
    app.run_loop()
