"""PyQt6 GUI frontend — fully self-contained.

Start screen, loading screen and a clickable board.  The board is built on
a worker thread; results come back to the UI thread through queued signals
and are installed only if their session token is still current.
"""

from __future__ import annotations

import asyncio
import sys
import threading

from PyQt6.QtCore import QObject, Qt, pyqtSignal
from PyQt6.QtGui import QFont, QKeyEvent, QMouseEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from jeopardy.backend.engine.boardbuilder import BoardBuilder
from jeopardy.backend.engine.gameplay import GamePlay
from jeopardy.backend.engine.gamestate import SessionManager
from jeopardy.backend.errors import DataSourceError
from jeopardy.backend.models.board import Board, RevealState
from jeopardy.backend.models.commands import AdvanceClue
from jeopardy.config import GameConfig

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_SUBTEXT = "#a6adc8"
_BLUE = "#89b4fa"
_GREEN = "#a6e3a1"
_YELLOW = "#f9e2af"
_RED = "#f38ba8"
_RED_H = "#f5a0b8"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
"""

_CELL_CSS = {
    RevealState.HIDDEN: (
        f"background:{_BLUE}; color:{_BASE}; border-radius:8px;"
        f" font-size:28px; font-weight:bold;"
    ),
    RevealState.QUESTION: (
        f"background:{_SURFACE0}; color:{_TEXT}; border:2px solid {_RED};"
        f" border-radius:8px; padding:6px;"
    ),
    RevealState.ANSWER: (
        f"background:{_SURFACE0}; color:{_GREEN}; border:2px solid {_GREEN};"
        f" border-radius:8px; padding:6px; font-weight:bold;"
    ),
}


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 14,
    min_w: int = 0,
    min_h: int = 44,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:8px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


def _label(text: str, size: int, colour: str = _TEXT, bold: bool = False) -> QLabel:
    lbl = QLabel(text)
    lbl.setFont(QFont("Helvetica", size, QFont.Weight.Bold if bold else QFont.Weight.Normal))
    lbl.setStyleSheet(f"color:{colour};")
    lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
    lbl.setWordWrap(True)
    return lbl


# ═══════════════════════════════════════════════════════════════════════════
# Background board builds
# ═══════════════════════════════════════════════════════════════════════════


class _BuildWorker(QObject):
    """Runs ``BoardBuilder.build_board`` on a daemon thread.

    Signals carry the session token so the window can drop stale results.
    """

    built = pyqtSignal(int, object)
    failed = pyqtSignal(int, str)

    def __init__(self, builder: BoardBuilder, config: GameConfig) -> None:
        super().__init__()
        self._builder = builder
        self._config = config

    def start(self, token: int) -> None:
        threading.Thread(target=self._run, args=(token,), daemon=True).start()

    def _run(self, token: int) -> None:
        try:
            board = asyncio.run(
                self._builder.build_board(
                    self._config.category_count, self._config.clue_count
                )
            )
        except DataSourceError as exc:
            self.failed.emit(token, str(exc))
            return
        self.built.emit(token, board)


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _StartPage(QWidget):
    """Title, board size, start and quit buttons, and the last error."""

    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(12)
        root.setContentsMargins(30, 30, 30, 30)

        root.addWidget(_label("J E O P A R D Y !", 34, bold=True))
        root.addSpacerItem(QSpacerItem(0, 16))
        root.addWidget(
            _label(
                f"{config.category_count} categories × {config.clue_count} clues",
                15,
                _SUBTEXT,
            )
        )
        root.addSpacerItem(QSpacerItem(0, 18))

        self.start_btn = _styled_btn(
            "S T A R T", bg=_BLUE, hover=_LAVENDER, fg=_BASE,
            font_size=16, min_w=240, min_h=52,
        )
        root.addWidget(self.start_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 6))

        self.quit_btn = _styled_btn(
            "Q U I T", bg=_RED, hover=_RED_H, fg=_BASE, min_w=240, font_size=13
        )
        root.addWidget(self.quit_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 12))

        self.status = _label("", 12, _RED)
        root.addWidget(self.status)


class _LoadingPage(QWidget):
    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")
        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(_label("Fetching categories…", 22, _YELLOW, bold=True))
        root.addWidget(_label("Esc  cancel", 11, _OVERLAY0))


class _Cell(QLabel):
    """A clickable, word-wrapping board cell."""

    clicked = pyqtSignal()

    def mousePressEvent(self, ev: QMouseEvent | None) -> None:  # noqa: N802
        if ev is not None and ev.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit()


class _BoardPage(QWidget):
    """Category headers over a grid of clue cells."""

    def __init__(self, game: GamePlay) -> None:
        super().__init__()
        self.setObjectName("page")
        self.game = game
        cats, clues = game.size

        root = QVBoxLayout(self)
        root.setSpacing(6)
        root.setContentsMargins(16, 10, 16, 10)

        frame = QFrame()
        frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        grid = QGridLayout(frame)
        grid.setSpacing(6)
        grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(frame, stretch=1)

        for c, title in enumerate(game.board.titles):
            head = _label(title.upper(), 12, _YELLOW, bold=True)
            head.setMinimumHeight(48)
            grid.addWidget(head, 0, c)

        self._cells: list[list[_Cell]] = []
        for c in range(cats):
            column: list[_Cell] = []
            for r in range(clues):
                cell = _Cell()
                cell.setAlignment(Qt.AlignmentFlag.AlignCenter)
                cell.setWordWrap(True)
                cell.setMinimumSize(120, 80)
                cell.setCursor(Qt.CursorShape.PointingHandCursor)
                cell.clicked.connect(lambda cc=c, rr=r: self._click(cc, rr))
                grid.addWidget(cell, r + 1, c)
                column.append(cell)
            self._cells.append(column)

        bar = QHBoxLayout()
        bar.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.restart_btn = _styled_btn("R E S T A R T", min_w=180, font_size=13)
        self.menu_btn = _styled_btn("M E N U", min_w=180, font_size=13)
        bar.addWidget(self.restart_btn)
        bar.addWidget(self.menu_btn)
        root.addLayout(bar)

        self._hint = _label(
            "Click a clue  question, then answer     R  restart     M  menu     Esc  quit",
            11,
            _OVERLAY0,
        )
        root.addWidget(self._hint)

        for c in range(cats):
            for r in range(clues):
                self._sync(c, r)

    def _sync(self, c: int, r: int) -> None:
        clue = self.game.board.get_clue(c, r)
        cell = self._cells[c][r]
        cell.setText(clue.display_text or "?")
        cell.setStyleSheet(_CELL_CSS[clue.reveal_state])

    def _click(self, c: int, r: int) -> None:
        if self.game.dispatch(AdvanceClue(c, r)).changed:
            self._sync(c, r)


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════

_IDX_START = 0
_IDX_LOADING = 1
_IDX_BOARD = 2


class _MainWindow(QMainWindow):
    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        self._sessions = SessionManager()
        self._worker = _BuildWorker(config.make_builder(), config)
        self._worker.built.connect(self._on_built)
        self._worker.failed.connect(self._on_failed)

        self.setWindowTitle("Jeopardy!")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(960, 640)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        self._start = _StartPage(config)
        self._start.start_btn.clicked.connect(self._begin_build)
        self._start.quit_btn.clicked.connect(self.close)
        self._stack.addWidget(self._start)  # 0

        self._stack.addWidget(_LoadingPage())  # 1

        # placeholder (replaced per session)
        self._board_page: _BoardPage | None = None
        self._stack.addWidget(QWidget())  # 2

        self._stack.setCurrentIndex(_IDX_START)

    # -- sessions ---

    def _begin_build(self) -> None:
        token = self._sessions.begin()
        self._start.status.setText("")
        self._stack.setCurrentIndex(_IDX_LOADING)
        self._worker.start(token)

    def _on_built(self, token: int, board: Board) -> None:
        game = self._sessions.accept(token, board)
        if game is None:
            return
        page = _BoardPage(game)
        page.restart_btn.clicked.connect(self._begin_build)
        page.menu_btn.clicked.connect(self._show_start)
        self._board_page = page

        old = self._stack.widget(_IDX_BOARD)
        self._stack.removeWidget(old)
        old.deleteLater()
        self._stack.insertWidget(_IDX_BOARD, page)
        self._stack.setCurrentIndex(_IDX_BOARD)

    def _on_failed(self, token: int, message: str) -> None:
        if not self._sessions.is_current(token):
            return
        self._start.status.setText(f"Could not build a board: {message}")
        self._stack.setCurrentIndex(_IDX_START)

    def _show_start(self) -> None:
        self._stack.setCurrentIndex(_IDX_START)

    def _cancel_build(self) -> None:
        # A fresh token makes the in-flight build stale.
        self._sessions.begin()
        self._show_start()

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        idx = self._stack.currentIndex()

        if idx == _IDX_START:
            if key == Qt.Key.Key_Return:
                self._begin_build()
            elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()

        elif idx == _IDX_LOADING:
            if key == Qt.Key.Key_Escape:
                self._cancel_build()

        elif idx == _IDX_BOARD:
            if key == Qt.Key.Key_R:
                self._begin_build()
            elif key == Qt.Key.Key_M:
                self._show_start()
            elif key == Qt.Key.Key_Escape:
                self.close()

        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig) -> None:
    """Launch the PyQt6 GUI (opens on the start screen)."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(config)
    window.show()
    qapp.exec()
