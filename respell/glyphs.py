"""Glyphs: spelling letters, phonetic symbols and synthetic placeholders."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Union

MAX_SYN = 1000

_U32_LIMIT = 2**32
_NUMBER_RE = re.compile(r"\+?[0-9]+")


@functools.total_ordering
class Glyph(Enum):
    """A real glyph; its value is the character used in the compact encoding."""

    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"  # noqa: E741
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"  # noqa: E741
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"
    CH = "ʧ"
    TH = "θ"
    SH = "ʃ"
    JH = "ʒ"
    NG = "ŋ"
    ER = "ʳ"
    EH = "ε"
    AH = "ɑ"
    OI = "ꭢ"
    OW = "ʊ"
    AW = "ɔ"
    EU = "ɜ"
    UH = "ʌ"
    EE = "ɩ"
    EI = "ϵ"
    YU = "\u016b"
    DH = "ϑ"
    AE = "æ"
    IH = "ɪ"
    SCHWA = "ə"
    APOS = "'"
    HYPHEN = "-"

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Glyph):
            return NotImplemented
        return _ORDER[self] < _ORDER[other]

    def fea_name(self) -> str:
        """The name used for this glyph in feature files."""
        return _NAMES[self]

    @classmethod
    def from_name(cls, text: str) -> Optional[Glyph]:
        """Look up a glyph by its feature-file name."""
        return _FROM_NAMES.get(text)

    def char(self) -> str:
        """The single character that stands for this glyph."""
        return self.value

    @classmethod
    def from_char(cls, text: str) -> Optional[tuple[Glyph, str]]:
        """Split a leading glyph off ``text``, returning it and the rest."""
        found = _glyph_at(text, 0)
        if found is None:
            return None
        glyph, length = found
        return glyph, text[length:]

    def is_vowel(self) -> bool:
        return self in _VOWELS

    def is_letter_or_phonetic(self) -> bool:
        return self not in (Glyph.APOS, Glyph.HYPHEN)

    @classmethod
    def all(cls) -> list[Glyph]:
        return list(cls)


_ORDER = {g: i for i, g in enumerate(Glyph)}

_NAMES = {
    **{g: g.value for g in Glyph if len(g.name) == 1},
    Glyph.CH: "ch",
    Glyph.TH: "th",
    Glyph.SH: "sh",
    Glyph.JH: "ju",
    Glyph.EH: "eh",
    Glyph.AH: "ah",
    Glyph.OI: "oi",
    Glyph.OW: "ow",
    Glyph.AW: "aw",
    Glyph.EU: "eu",
    Glyph.UH: "uh",
    Glyph.EE: "ee",
    Glyph.EI: "ei",
    Glyph.YU: "yu",
    Glyph.DH: "dh",
    Glyph.NG: "ng",
    Glyph.AE: "ae",
    Glyph.IH: "ih",
    Glyph.SCHWA: "*",
    Glyph.HYPHEN: "hyphen",
    Glyph.ER: "er",
    Glyph.APOS: "apos",
}

# "eu" is read back as EH, matching the established name table.
_FROM_NAMES = {name: g for g, name in _NAMES.items()}
_FROM_NAMES["eu"] = Glyph.EH

_VOWELS = frozenset(
    {
        Glyph.A, Glyph.E, Glyph.I, Glyph.O, Glyph.U,
        Glyph.EH, Glyph.AH, Glyph.OI, Glyph.OW, Glyph.AW, Glyph.EU,
        Glyph.UH, Glyph.EE, Glyph.EI, Glyph.YU, Glyph.AE, Glyph.IH, Glyph.SCHWA,
    }
)

_CHAR_TABLE = tuple(
    (g, g.value)
    for g in (
        *[g for g in Glyph if len(g.name) == 1],
        Glyph.CH, Glyph.TH, Glyph.SH, Glyph.JH, Glyph.EH, Glyph.AH, Glyph.OI,
        Glyph.OW, Glyph.AW, Glyph.EU, Glyph.UH, Glyph.EE, Glyph.EI, Glyph.YU,
        Glyph.DH, Glyph.NG, Glyph.AE, Glyph.IH, Glyph.SCHWA, Glyph.HYPHEN,
        Glyph.ER, Glyph.APOS,
    )
)


def _glyph_at(text: str, pos: int) -> Optional[tuple[Glyph, int]]:
    for glyph, ch in _CHAR_TABLE:
        if text.startswith(ch, pos):
            return glyph, len(ch)
    return None


@dataclass(frozen=True, order=True)
class Synthetic:
    """A numbered placeholder glyph produced by a rule."""

    number: int

    def fea_name(self) -> str:
        return f"syn{self.number}"

    def is_letter_or_phonetic(self) -> bool:
        return True


AugGlyph = Union[Glyph, Synthetic]


def _parse_u32(text: str) -> Optional[int]:
    if not _NUMBER_RE.fullmatch(text):
        return None
    value = int(text)
    return value if value < _U32_LIMIT else None


def aug_name(glyph: AugGlyph) -> str:
    return glyph.fea_name()


def aug_from_name(text: str) -> Optional[AugGlyph]:
    """Parse a feature-file name, either ``syn<n>`` or a real glyph name."""
    if text.startswith("syn"):
        number = _parse_u32(text[3:])
        return None if number is None else Synthetic(number)
    return Glyph.from_name(text)


def encode(glyphs: Iterable[Glyph]) -> str:
    return "".join(g.char() for g in glyphs)


def decode(text: str) -> list[Glyph]:
    """Decode text into glyphs, skipping characters that are not glyphs."""
    result: list[Glyph] = []
    pos = 0
    while pos < len(text):
        found = _glyph_at(text, pos)
        if found is None:
            pos += 1
        else:
            glyph, length = found
            result.append(glyph)
            pos += length
    return result


def aug_encode(glyphs: Iterable[AugGlyph]) -> str:
    return "".join(
        f"{{{g.number}}}" if isinstance(g, Synthetic) else g.char() for g in glyphs
    )


def aug_decode(text: str) -> list[AugGlyph]:
    """Decode text in which ``{n}`` stands for synthetic glyph ``n``."""
    result: list[AugGlyph] = []
    pos = 0
    while pos < len(text):
        if text[pos] == "{":
            close = text.find("}", pos + 1)
            if close == -1:
                number_text, pos = text[pos + 1:], len(text)
            else:
                number_text, pos = text[pos + 1:close], close + 1
            number = _parse_u32(number_text)
            if number is not None:
                result.append(Synthetic(number))
            continue
        found = _glyph_at(text, pos)
        if found is None:
            pos += 1
        else:
            glyph, length = found
            result.append(glyph)
            pos += length
    return result


def augment(glyphs: Iterable[Glyph]) -> list[AugGlyph]:
    return list(glyphs)


def strip_aug(glyphs: Iterable[AugGlyph]) -> list[Glyph]:
    return [g for g in glyphs if isinstance(g, Glyph)]