"""Contextual substitutions organised into lookups, as in font features."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from respell.glyphs import AugGlyph


@dataclass(frozen=True)
class AnyLetter:
    """Key element that matches any letter or phonetic glyph."""


@dataclass(frozen=True)
class Ignore:
    """Substitution content that matches but leaves the text unchanged."""


KeyElem = Union[AugGlyph, AnyLetter]
SubContent = Union[Ignore, list]


@dataclass
class Substitution:
    pre_key: list[KeyElem]
    at_key: list[AugGlyph]
    post_key: list[KeyElem]
    sub_content: SubContent


@dataclass
class Lookup:
    substitutions: list[Substitution] = field(default_factory=list)


@dataclass
class SubstitutionList:
    lookups: list[Lookup] = field(default_factory=list)


def matches(glyph: AugGlyph, elem: KeyElem) -> bool:
    if isinstance(elem, AnyLetter):
        return glyph.is_letter_or_phonetic()
    return glyph == elem


def apply_sub_at_pos(working: list[AugGlyph], pos: int, sub: Substitution) -> bool:
    """Try ``sub`` with its ``at_key`` starting at ``pos``; mutate on a match."""
    if not sub.at_key:
        raise ValueError("substitution has an empty at_key")
    n_pre, n_at, n_post = len(sub.pre_key), len(sub.at_key), len(sub.post_key)
    if pos < n_pre or pos + n_at + n_post > len(working):
        return False
    if not all(matches(g, e) for g, e in zip(working[pos - n_pre:pos], sub.pre_key)):
        return False
    if working[pos:pos + n_at] != sub.at_key:
        return False
    after = working[pos + n_at:pos + n_at + n_post]
    if not all(matches(g, e) for g, e in zip(after, sub.post_key)):
        return False
    if not isinstance(sub.sub_content, Ignore):
        working[pos:pos + n_at] = list(sub.sub_content)
    return True


def _advance(sub: Substitution) -> int:
    if isinstance(sub.sub_content, Ignore):
        return len(sub.at_key)
    return len(sub.sub_content)


def apply_all(working: list[AugGlyph], slist: SubstitutionList) -> None:
    """Run every lookup over the whole of ``working`` in order, in place."""
    for lookup in slist.lookups:
        pos = 0
        while pos < len(working):
            for sub in lookup.substitutions:
                if apply_sub_at_pos(working, pos, sub):
                    pos += _advance(sub)
                    break
            else:
                pos += 1


def apply_all_with_new(
    working: list[AugGlyph], slist: SubstitutionList, new_amount: int
) -> bool:
    """Like :func:`apply_all`, reporting whether any of the first ``new_amount``
    substitutions matched; stops early once none of them can."""
    prior = 0
    any_new_matched = False
    for lookup in slist.lookups:
        if prior >= new_amount and not any_new_matched:
            return False
        pos = 0
        while pos < len(working):
            for index, sub in enumerate(lookup.substitutions, start=prior):
                if apply_sub_at_pos(working, pos, sub):
                    if index < new_amount:
                        any_new_matched = True
                    pos += _advance(sub)
                    break
            else:
                pos += 1
        prior += len(lookup.substitutions)
    return any_new_matched