"""Reading the ReadLex word list and converting Shavian spellings to glyphs."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from respell.glyphs import Glyph, decode

DEFAULT_TOP5000_PATH = Path("res/readlex-entries-top5000.json")


@dataclass
class ReadlexEntry:
    latin: str
    shaw: str
    ipa: str
    freq: int


def _entry_from_json(item: object) -> ReadlexEntry:
    if not isinstance(item, dict):
        raise ValueError(f"readlex entry is not an object: {item!r}")
    try:
        latin, shaw, ipa, freq = item["latin"], item["shaw"], item["ipa"], item["freq"]
    except KeyError as exc:
        raise ValueError(f"readlex entry is missing field {exc.args[0]!r}") from None
    if not all(isinstance(v, str) for v in (latin, shaw, ipa)):
        raise ValueError("readlex entry text fields must be strings")
    if isinstance(freq, bool) or not isinstance(freq, int) or not 0 <= freq < 2**32:
        raise ValueError(f"readlex entry has invalid freq {freq!r}")
    return ReadlexEntry(latin=latin, shaw=shaw, ipa=ipa, freq=freq)


def read_readlex_top5000(
    path: Union[str, Path] = DEFAULT_TOP5000_PATH,
) -> list[ReadlexEntry]:
    """Load the JSON list of ReadLex entries."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, list):
        raise ValueError("readlex data must be a list of entries")
    return [_entry_from_json(item) for item in data]


_SHAW = {
    "𐑑": (Glyph.T,),
    "𐑔": (Glyph.TH,),
    "𐑩": (Glyph.SCHWA,),
    "𐑴": (Glyph.O,),
    "𐑟": (Glyph.Z,),
    "𐑪": (Glyph.AH,),
    "𐑥": (Glyph.M,),
    "𐑙": (Glyph.NG,),
    "𐑳": (Glyph.UH,),
    "𐑐": (Glyph.P,),
    "𐑚": (Glyph.B,),
    "𐑓": (Glyph.F,),
    "𐑝": (Glyph.V,),
    "𐑯": (Glyph.N,),
    "𐑛": (Glyph.D,),
    "𐑤": (Glyph.L,),
    "𐑶": (Glyph.OI,),
    "𐑦": (Glyph.IH,),
    "𐑲": (Glyph.I,),
    "𐑕": (Glyph.S,),
    "𐑒": (Glyph.K,),
    "𐑿": (Glyph.YU,),
    "𐑷": (Glyph.AW,),
    "𐑼": (Glyph.ER,),
    "𐑖": (Glyph.SH,),
    "𐑠": (Glyph.JH,),
    "𐑗": (Glyph.CH,),
    "𐑡": (Glyph.J,),
    "𐑘": (Glyph.Y,),
    "𐑢": (Glyph.W,),
    "𐑣": (Glyph.H,),
    "𐑮": (Glyph.R,),
    "𐑰": (Glyph.EE,),
    "𐑧": (Glyph.EH,),
    "𐑱": (Glyph.EI,),
    "𐑨": (Glyph.AE,),
    "𐑫": (Glyph.EU,),
    "𐑵": (Glyph.U,),
    "𐑬": (Glyph.OW,),
    "𐑸": (Glyph.AH, Glyph.R),
    "𐑺": (Glyph.EI, Glyph.R),
    "𐑻": (Glyph.EH, Glyph.R),
    "𐑽": (Glyph.EE, Glyph.R),
    "𐑹": (Glyph.AW, Glyph.R),
    "𐑾": (Glyph.EE, Glyph.EH),
}


def shaw_char_to_glyphs(ch: str) -> Optional[list[Glyph]]:
    """Glyphs for one Shavian character, or ``None`` if it has no mapping."""
    glyphs = _SHAW.get(ch)
    return None if glyphs is None else list(glyphs)


def shaw_word_to_glyphs(text: str) -> list[Glyph]:
    """Convert a Shavian word, skipping characters without a mapping."""
    return [g for ch in text for g in _SHAW.get(ch, ())]


def fix_final_ih(glyphs: list[Glyph]) -> list[Glyph]:
    """Return a copy with a final IH turned into EE."""
    result = list(glyphs)
    if result and result[-1] is Glyph.IH:
        result[-1] = Glyph.EE
    return result


def shaw_word_to_glyphs_with_fixes(text: str, latin: str) -> list[Glyph]:
    """Convert a Shavian word, then fix a final IH and an initial IH before latin E."""
    result = fix_final_ih(shaw_word_to_glyphs(text))
    if result and result[0] is Glyph.IH:
        latin_glyphs = decode(latin)
        if latin_glyphs and latin_glyphs[0] is Glyph.E:
            result[0] = Glyph.SCHWA
    return result