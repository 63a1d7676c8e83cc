"""Pygame GUI frontend — fully self-contained.

Start screen, loading screen and a clickable board.  Builds run on a
background executor; the main loop polls them each frame and installs a
finished board only if its session token is still current.
"""

from __future__ import annotations

import asyncio
import enum
from concurrent.futures import Future, ThreadPoolExecutor

import pygame

from jeopardy.backend.engine.gameplay import GamePlay
from jeopardy.backend.engine.gamestate import SessionManager
from jeopardy.backend.errors import DataSourceError
from jeopardy.backend.models.board import Board, RevealState
from jeopardy.backend.models.commands import AdvanceClue
from jeopardy.config import GameConfig

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
COL_YELLOW = (249, 226, 175)
COL_RED = (243, 139, 168)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 1000, 680
CELL_GAP = 6
MARGIN = 20
HEADER_H = 56
BOARD_TOP = 20
FOOTER_H = 90


class _Screen(enum.Enum):
    START = "start"
    LOADING = "loading"
    BOARD = "board"


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
        pygame.draw.rect(surf, self.hover if self._hot else self.bg, self.rect, border_radius=8)
        lbl = self.font.render(self.text, True, self.fg)
        surf.blit(lbl, lbl.get_rect(center=self.rect.center))

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Text helpers
# ---------------------------------------------------------------------------
def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


def _wrap(font: pygame.font.Font, text: str, width: int) -> list[str]:
    """Greedy word wrap to *width* pixels."""
    lines: list[str] = []
    line = ""
    for word in text.split():
        trial = f"{line} {word}".strip()
        if font.size(trial)[0] <= width or not line:
            line = trial
        else:
            lines.append(line)
            line = word
    if line:
        lines.append(line)
    return lines


def _blit_wrapped(
    surf: pygame.Surface,
    font: pygame.font.Font,
    text: str,
    rect: pygame.Rect,
    colour: tuple,
) -> None:
    """Draw *text* word-wrapped and centred inside *rect*, clipping overflow."""
    lines = _wrap(font, text, rect.width - 10)
    line_h = font.get_linesize()
    max_lines = max(1, rect.height // line_h)
    if len(lines) > max_lines:
        lines = lines[:max_lines]
        lines[-1] = lines[-1] + "…"
    y = rect.centery - len(lines) * line_h // 2
    for ln in lines:
        rendered = font.render(ln, True, colour)
        surf.blit(rendered, (rect.centerx - rendered.get_width() // 2, y))
        y += line_h


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, config: GameConfig) -> None:
        self._config = config
        self._builder = config.make_builder()
        self._sessions = SessionManager()
        self._executor = ThreadPoolExecutor(max_workers=2)
        self._pending: dict[int, Future[Board]] = {}

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption("Jeopardy!")
        self._clock = pygame.time.Clock()

        self._f_big = pygame.font.SysFont("Helvetica", 44, bold=True)
        self._f_title = pygame.font.SysFont("Helvetica", 22, bold=True)
        self._f_body = pygame.font.SysFont("Helvetica", 16)
        self._f_head = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_clue = pygame.font.SysFont("Helvetica", 13)
        self._f_mark = pygame.font.SysFont("Helvetica", 34, bold=True)
        self._f_btn = pygame.font.SysFont("Helvetica", 17, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Helvetica", 14, bold=True)
        self._f_small = pygame.font.SysFont("Helvetica", 13)

        self._screen = _Screen.START
        self._game: GamePlay | None = None
        self._status_msg: str = ""

        self._build_btns()

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_btns(self) -> None:
        bw = 240
        self._start_btn = _Btn(
            (_cx(bw), 300, bw, 54),
            "S T A R T",
            self._f_btn,
            bg=COL_BLUE,
            hover=COL_LAVENDER,
            fg=COL_BASE,
        )
        self._quit_btn = _Btn(
            (_cx(bw), 370, bw, 44),
            "Q U I T",
            self._f_btn_sm,
            bg=COL_RED,
            hover=(255, 170, 185),
            fg=COL_BASE,
        )
        self._start_all = [self._start_btn, self._quit_btn]

        sw, gap = 180, 12
        y = WIN_H - FOOTER_H + 14
        self._restart_btn = _Btn(
            (_cx(2 * sw + gap), y, sw, 40), "RESTART (R)", self._f_btn_sm
        )
        self._menu_btn = _Btn(
            (_cx(2 * sw + gap) + sw + gap, y, sw, 40), "MENU (M)", self._f_btn_sm
        )
        self._board_all = [self._restart_btn, self._menu_btn]

    # ── layout ──────────────────────────────────────────────────────────────

    def _cell_rect(self, col: int, row: int) -> pygame.Rect:
        game = self._game
        assert game is not None
        cats, clues = game.size
        cw = (WIN_W - 2 * MARGIN - (cats - 1) * CELL_GAP) // cats
        top = BOARD_TOP + HEADER_H + CELL_GAP
        ch = (WIN_H - FOOTER_H - top - (clues - 1) * CELL_GAP) // clues
        return pygame.Rect(
            MARGIN + col * (cw + CELL_GAP),
            top + row * (ch + CELL_GAP),
            cw,
            ch,
        )

    def _cell_at(self, pos: tuple[int, int]) -> tuple[int, int] | None:
        game = self._game
        assert game is not None
        cats, clues = game.size
        for c in range(cats):
            for r in range(clues):
                if self._cell_rect(c, r).collidepoint(pos):
                    return c, r
        return None

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_start(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(
            self._surf, self._f_big.render("J E O P A R D Y !", True, COL_TEXT), 120
        )
        cfg = self._config
        _blit_center(
            self._surf,
            self._f_body.render(
                f"{cfg.category_count} categories × {cfg.clue_count} clues",
                True,
                COL_SUBTEXT,
            ),
            200,
        )
        for btn in self._start_all:
            btn.draw(self._surf)
        if self._status_msg:
            rect = pygame.Rect(MARGIN, 440, WIN_W - 2 * MARGIN, 80)
            _blit_wrapped(self._surf, self._f_small, self._status_msg, rect, COL_RED)

    def _draw_loading(self) -> None:
        self._surf.fill(COL_BASE)
        dots = "." * (pygame.time.get_ticks() // 400 % 4)
        _blit_center(
            self._surf,
            self._f_title.render(f"Fetching categories{dots}", True, COL_YELLOW),
            WIN_H // 2 - 20,
        )
        _blit_center(
            self._surf,
            self._f_small.render("Esc  cancel", True, COL_OVERLAY0),
            WIN_H // 2 + 20,
        )

    def _draw_board(self) -> None:
        self._surf.fill(COL_BASE)
        game = self._game
        assert game is not None
        cats, clues = game.size

        for c, title in enumerate(game.board.titles):
            top = self._cell_rect(c, 0)
            head = pygame.Rect(top.x, BOARD_TOP, top.width, HEADER_H)
            pygame.draw.rect(self._surf, COL_MANTLE, head, border_radius=6)
            _blit_wrapped(self._surf, self._f_head, title.upper(), head, COL_YELLOW)

        for c in range(cats):
            for r in range(clues):
                clue = game.board.get_clue(c, r)
                rect = self._cell_rect(c, r)
                if clue.reveal_state is RevealState.HIDDEN:
                    pygame.draw.rect(self._surf, COL_BLUE, rect, border_radius=8)
                    mark = self._f_mark.render("?", True, COL_BASE)
                    self._surf.blit(mark, mark.get_rect(center=rect.center))
                    continue
                answer = clue.reveal_state is RevealState.ANSWER
                border = COL_GREEN if answer else COL_RED
                pygame.draw.rect(self._surf, COL_SURFACE0, rect, border_radius=8)
                pygame.draw.rect(self._surf, border, rect, width=2, border_radius=8)
                _blit_wrapped(
                    self._surf,
                    self._f_clue,
                    clue.display_text,
                    rect.inflate(-6, -6),
                    COL_GREEN if answer else COL_TEXT,
                )

        for btn in self._board_all:
            btn.draw(self._surf)

        _blit_center(
            self._surf,
            self._f_small.render(
                f"Answered {game.revealed_count}/{cats * clues}"
                "     Click a clue: question, then answer     Esc  quit",
                True,
                COL_OVERLAY0,
            ),
            WIN_H - 26,
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_start(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._start_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._start_btn.hit(ev.pos):
                self._begin_build()
            elif self._quit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_RETURN:
                self._begin_build()
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_loading(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
            # A fresh token makes the in-flight build stale.
            self._sessions.begin()
            self._screen = _Screen.START
        return True

    def _ev_board(self, ev: pygame.event.Event) -> bool:
        game = self._game
        assert game is not None
        if ev.type == pygame.MOUSEMOTION:
            for b in self._board_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._restart_btn.hit(ev.pos):
                self._begin_build()
            elif self._menu_btn.hit(ev.pos):
                self._screen = _Screen.START
            else:
                cell = self._cell_at(ev.pos)
                if cell is not None:
                    game.dispatch(AdvanceClue(*cell))
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_r:
                self._begin_build()
            elif ev.key == pygame.K_m:
                self._screen = _Screen.START
            elif ev.key == pygame.K_ESCAPE:
                return False
        return True

    # ── sessions ────────────────────────────────────────────────────────────

    def _build(self) -> Board:
        cfg = self._config
        return asyncio.run(
            self._builder.build_board(cfg.category_count, cfg.clue_count)
        )

    def _begin_build(self) -> None:
        token = self._sessions.begin()
        self._pending[token] = self._executor.submit(self._build)
        self._status_msg = ""
        self._screen = _Screen.LOADING

    def _poll_builds(self) -> None:
        for token, fut in list(self._pending.items()):
            if not fut.done():
                continue
            del self._pending[token]
            try:
                board = fut.result()
            except DataSourceError as exc:
                if self._sessions.is_current(token):
                    self._status_msg = f"Could not build a board: {exc}"
                    self._screen = _Screen.START
                continue
            game = self._sessions.accept(token, board)
            if game is not None:
                self._game = game
                self._screen = _Screen.BOARD

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            _Screen.START: self._ev_start,
            _Screen.LOADING: self._ev_loading,
            _Screen.BOARD: self._ev_board,
        }
        _draw = {
            _Screen.START: self._draw_start,
            _Screen.LOADING: self._draw_loading,
            _Screen.BOARD: self._draw_board,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                handler = _dispatch.get(self._screen)
                if handler and not handler(ev):
                    running = False
                    break

            self._poll_builds()

            drawer = _draw.get(self._screen)
            if drawer:
                drawer()
            pygame.display.flip()
            self._clock.tick(30)

        self._executor.shutdown(wait=False, cancel_futures=True)
        pygame.quit()


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig) -> None:
    """Launch the Pygame GUI (opens on the start screen)."""
    app = PygameApp(config)
    app.run_loop()
