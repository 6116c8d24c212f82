"""
Colour identity.

Collaborators store the same logical colour either as a display name
("Vermelho", "navy") or as a hex code ("#F00", "ff0000"). Everything is
normalised here, once, into a ColorKey. Nothing downstream compares raw
colour strings.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_HEX = re.compile(r"^#?([0-9a-f]{3}|[0-9a-f]{6})$")
_SPACES = re.compile(r"\s+")

# ═══════════════════════════════════════════════════════════════════════════════
# Name Table
# ═══════════════════════════════════════════════════════════════════════════════

NAMED_COLORS: dict[str, str] = {
    # English
    "black": "#000000",
    "white": "#ffffff",
    "red": "#ff0000",
    "green": "#008000",
    "blue": "#0000ff",
    "yellow": "#ffff00",
    "orange": "#ffa500",
    "purple": "#800080",
    "pink": "#ffc0cb",
    "brown": "#a52a2a",
    "gray": "#808080",
    "grey": "#808080",
    "beige": "#f5f5dc",
    "navy": "#000080",
    "gold": "#ffd700",
    "silver": "#c0c0c0",
    # Portuguese
    "preto": "#000000",
    "branco": "#ffffff",
    "vermelho": "#ff0000",
    "verde": "#008000",
    "azul": "#0000ff",
    "amarelo": "#ffff00",
    "laranja": "#ffa500",
    "roxo": "#800080",
    "rosa": "#ffc0cb",
    "castanho": "#a52a2a",
    "marrom": "#a52a2a",
    "cinza": "#808080",
    "bege": "#f5f5dc",
    "azul marinho": "#000080",
    "dourado": "#ffd700",
    "prata": "#c0c0c0",
}


# ═══════════════════════════════════════════════════════════════════════════════
# ColorKey
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ColorKey:
    """
    Canonical colour identity.

    value is lowercase "#rrggbb" when the colour is known, otherwise the
    lowercased, whitespace-collapsed name (still comparable, just opaque).
    """

    value: str

    @classmethod
    def parse(cls, raw: str) -> ColorKey:
        return normalize_color(raw)

    @property
    def is_hex(self) -> bool:
        return self.value.startswith("#") and _HEX.match(self.value) is not None

    def __str__(self) -> str:
        return self.value


def normalize_color(raw: str) -> ColorKey:
    """
    Normalise a colour name or hex code into a ColorKey.

    Example:
        normalize_color("#F00")      -> ColorKey("#ff0000")
        normalize_color("Vermelho")  -> ColorKey("#ff0000")
        normalize_color("decade")    -> ColorKey("decade")
        normalize_color("Oat Milk")  -> ColorKey("oat milk")
    """
    text = _SPACES.sub(" ", raw.strip().lower())
    if not text:
        raise ValueError("colour must not be empty")

    if text in NAMED_COLORS:
        return ColorKey(NAMED_COLORS[text])

    match = _HEX.match(text)
    # bare hex needs a digit: "bad" and "decade" are names
    if match is not None and (text.startswith("#") or not match.group(1).isalpha()):
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return ColorKey(f"#{digits}")

    return ColorKey(text)


def optional_color(raw: object) -> ColorKey | None:
    """Normalise a possibly-missing colour field. Empty means "no colour"."""
    if raw is None:
        return None
    if isinstance(raw, ColorKey):
        return raw
    text = str(raw).strip()
    return normalize_color(text) if text else None


def hex_to_rgb(key: ColorKey) -> tuple[int, int, int] | None:
    """RGB triple for hex keys, None for opaque names."""
    if not key.is_hex:
        return None
    digits = key.value[1:]
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


__all__ = (
    "NAMED_COLORS",
    "ColorKey",
    "normalize_color",
    "optional_color",
    "hex_to_rgb",
)
