"""Color & style helpers for the shell output.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides come from TODO_DONE_COLOR / TODO_PENDING_COLOR
  (environment or project .env file).
"""
from __future__ import annotations
import os, sys

from config import load_env, truthy_env

load_env()

_FORCE = truthy_env(os.environ.get("FORCE_COLOR"))
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))


def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''


def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    return f"\033[38;5;{16 + 36 * r6 + 6 * g6 + b6}m"


def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)


def _palette(var: str, default: str) -> str:
    value = os.environ.get(var, '').strip()
    return '#' + value.lstrip('#') if _is_hex(value) else default


RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_DONE = _palette('TODO_DONE_COLOR', '#A7E399')
HEX_PENDING = _palette('TODO_PENDING_COLOR', '#48B3AF')

DONE_COLOR = _from_hex(HEX_DONE)
PENDING_COLOR = _from_hex(HEX_PENDING)
HEADER_COLOR = BOLD
INDEX_COLOR = DIM


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET


__all__ = [
    'color', 'RESET', 'BOLD', 'DIM', 'DONE_COLOR', 'PENDING_COLOR', 'HEADER_COLOR',
    'INDEX_COLOR', 'HEX_DONE', 'HEX_PENDING',
]
