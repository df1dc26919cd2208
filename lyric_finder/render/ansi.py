from __future__ import annotations

import shutil
import sys
from dataclasses import dataclass
from typing import Iterable, TextIO

import colorama

from lyric_finder.recent import RecentSearch


CSI = "\x1b["


def _sgr(*codes: int) -> str:
    return CSI + ";".join(str(c) for c in codes) + "m"


@dataclass(frozen=True, slots=True)
class Theme:
    title: str = _sgr(36, 1)  # cyan bold
    heading: str = _sgr(1)
    body: str = ""
    link: str = _sgr(34)  # blue
    dim: str = _sgr(90)  # bright black
    warning: str = _sgr(33, 1)  # yellow bold
    error: str = _sgr(31, 1)  # red bold
    reset: str = _sgr(0)


PLAIN = Theme(**{name: "" for name in Theme.__dataclass_fields__})


class LyricsRenderer:
    def __init__(self, stream: TextIO | None = None, theme: Theme | None = None):
        self.stream = stream or sys.stdout
        if theme is None:
            theme = Theme() if self.stream.isatty() else PLAIN
        self.theme = theme
        # Windows consoles need VT processing switched on; no-op elsewhere
        colorama.just_fix_windows_console()

    def _write(self, lines: Iterable[str]) -> None:
        self.stream.write("\n".join(lines) + "\n")
        self.stream.flush()

    def render_lyrics(self, title: str, text: str) -> None:
        cols, _rows = shutil.get_terminal_size(fallback=(80, 24))
        out = [f"{self.theme.title}♫ {title} ♫{self.theme.reset}", self.theme.dim + "─" * min(cols, 40) + self.theme.reset]
        out.extend(f"{self.theme.body}{ln.rstrip()}{self.theme.reset}" for ln in text.splitlines())
        self._write(out)

    def render_status(self, message: str, *, error: bool = False) -> None:
        style = self.theme.error if error else self.theme.warning
        self._write([f"{style}{message}{self.theme.reset}"])

    def render_recent(self, entries: Iterable[RecentSearch]) -> None:
        entries = list(entries)
        if not entries:
            return
        out = ["", f"{self.theme.heading}Recent Searches{self.theme.reset}"]
        for i, e in enumerate(entries, 1):
            out.append(f"  {self.theme.dim}#{i}{self.theme.reset} {self.theme.link}{e.display}{self.theme.reset}")
        self._write(out)
