"""
Terminal table of root move evaluations.

Shows every legal color the search considered, its minimax value from the
maximizing player's point of view, and which one was selected.
"""

from __future__ import annotations

import re
from typing import List, Optional, Sequence, Tuple

from filler.core.types import PLAYER_SYMBOLS

# ═══════════════════════════════════════════════════════════════════════════════
# ANSI Colors & Styling
# ═══════════════════════════════════════════════════════════════════════════════

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

FG = {
    "green": "\033[38;5;28m",
    "red": "\033[38;5;124m",
    "yellow": "\033[38;5;142m",
    "gray": "\033[38;5;245m",
}


def value_color(value: int) -> str:
    if value > 0:
        return FG["green"]
    if value < 0:
        return FG["red"]
    return FG["yellow"]


# ═══════════════════════════════════════════════════════════════════════════════
# Text utilities
# ═══════════════════════════════════════════════════════════════════════════════

_ANSI_RE = re.compile(r"\033\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)


def visible_len(text: str) -> int:
    return len(strip_ansi(text))


def pad(text: str, width: int, align: str = "left") -> str:
    gap = max(0, width - visible_len(text))
    if align == "right":
        return " " * gap + text
    if align == "center":
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


# ═══════════════════════════════════════════════════════════════════════════════
# Table rendering
# ═══════════════════════════════════════════════════════════════════════════════

H, V = "─", "│"
TABLE_W = 30


def hline(left: str, right: str) -> str:
    return f"{left}{H * TABLE_W}{right}"


def trow(content: str) -> str:
    padding = " " * max(0, TABLE_W - visible_len(content))
    return f"{V}{content}{padding}{V}"


def format_move_scores(
    scored: Sequence[Tuple[str, int]],
    selected: Optional[str],
    maximizing_player: int,
) -> str:
    """
    Render (color, value) pairs as a boxed table, best value first.

    The selected color is marked with ◀. Returns the rendered string.
    """
    if not scored:
        return f"{DIM}No legal colors{RESET}"

    symbol = PLAYER_SYMBOLS.get(maximizing_player, str(maximizing_player))
    lines: List[str] = [
        hline("┌", "┐"),
        trow(f" {BOLD}Search for player {symbol}{RESET}"),
        hline("├", "┤"),
        trow(f"{DIM} {pad('Color', 8)}{V}{pad('Value', 8, 'right')} {V}{RESET}"),
        hline("├", "┤"),
    ]

    # Stable sort keeps palette order among equal values
    ranked = sorted(scored, key=lambda item: item[1], reverse=True)
    for color, value in ranked:
        mark = f"{FG['green']}◀{RESET}" if color == selected else " "
        shown = value_color(value) + f"{value:+d}" + RESET
        lines.append(trow(f" {pad(color, 8)}{V}{pad(shown, 8, 'right')} {V} {mark}"))

    lines.append(hline("└", "┘"))
    return "\n".join(lines)
