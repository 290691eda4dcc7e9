"""High-level rewrite rules: an anterior that marks a match with a numbered
placeholder, and a posterior that expands the placeholder into its content."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional

from respell import substitutions2 as s2
from respell.glyphs import AugGlyph, Synthetic, aug_decode, aug_encode

_MID_RE = re.compile(r"\+?[0-9]+")
_MID_LIMIT = 2**32


def _parse_mid(text: str) -> int:
    if not _MID_RE.fullmatch(text):
        raise ValueError(f"invalid mid {text!r}")
    value = int(text)
    if value >= _MID_LIMIT:
        raise ValueError(f"mid {text!r} is out of range")
    return value


@dataclass
class Anterior:
    """The matching side of a rule: ``pre[at]post``, optionally anchored."""

    pre_key: list[AugGlyph] = field(default_factory=list)
    at_key: list[AugGlyph] = field(default_factory=list)
    post_key: list[AugGlyph] = field(default_factory=list)
    at_start: bool = False
    at_end: bool = False

    def _matches_at(self, word: list[AugGlyph], pos: int) -> bool:
        n_pre, n_at, n_post = len(self.pre_key), len(self.at_key), len(self.post_key)
        end = pos + n_at + n_post
        if pos < n_pre or end > len(word):
            return False
        if self.at_start and pos > n_pre and word[pos - n_pre - 1].is_letter_or_phonetic():
            return False
        if self.at_end and end < len(word) and word[end].is_letter_or_phonetic():
            return False
        return (
            word[pos - n_pre:pos] == self.pre_key
            and word[pos:pos + n_at] == self.at_key
            and word[pos + n_at:end] == self.post_key
        )

    def apply(self, word: list[AugGlyph], mid: int) -> bool:
        """Replace every match of ``at_key`` in place with ``Synthetic(mid)``."""
        any_mod = False
        pos = 0
        while pos < len(word):
            if self._matches_at(word, pos):
                word[pos:pos + len(self.at_key)] = [Synthetic(mid)]
                any_mod = True
            pos += 1
        return any_mod

    @classmethod
    def decode(cls, text: str) -> Anterior:
        """Parse the ``^pre[at]post$`` notation."""
        at_start = False
        parts = text.split("^")
        if len(parts) == 2:
            if parts[0] != "":
                raise ValueError("^ not at start")
            at_start, text = True, parts[1]

        at_end = False
        parts = text.split("$")
        if len(parts) == 2:
            if parts[1] != "":
                raise ValueError("$ not at end")
            at_end, text = True, parts[0]

        parts = text.split("[")
        if len(parts) != 2:
            raise ValueError("No [")
        pre_str, rest = parts
        parts = rest.split("]")
        if len(parts) != 2:
            raise ValueError("No ]")
        at_str, post_str = parts
        return cls(
            pre_key=aug_decode(pre_str),
            at_key=aug_decode(at_str),
            post_key=aug_decode(post_str),
            at_start=at_start,
            at_end=at_end,
        )

    def low_level(self, mid: int) -> list[s2.Substitution]:
        """Express this anterior as lookup substitutions producing ``Synthetic(mid)``."""
        result: list[s2.Substitution] = []
        if (self.at_start or self.at_end) and not self.at_key:
            raise ValueError("anchored anterior needs a non-empty at_key")

        if self.at_start:
            result.append(
                s2.Substitution(
                    pre_key=[s2.AnyLetter(), *self.pre_key],
                    at_key=[self.at_key[0]],
                    post_key=[*self.at_key[1:], *self.post_key],
                    sub_content=s2.Ignore(),
                )
            )

        if self.at_end:
            result.append(
                s2.Substitution(
                    pre_key=list(self.pre_key),
                    at_key=[self.at_key[0]],
                    post_key=[*self.at_key[1:], *self.post_key, s2.AnyLetter()],
                    sub_content=s2.Ignore(),
                )
            )

        result.append(
            s2.Substitution(
                pre_key=list(self.pre_key),
                at_key=list(self.at_key),
                post_key=list(self.post_key),
                sub_content=[Synthetic(mid)],
            )
        )
        return result

    def encode(self) -> str:
        return "{}{}[{}]{}{}".format(
            "^" if self.at_start else "",
            aug_encode(self.pre_key),
            aug_encode(self.at_key),
            aug_encode(self.post_key),
            "$" if self.at_end else "",
        )


@dataclass
class Posterior:
    """The output side of a rule: what the placeholder expands into."""

    content: list[AugGlyph] = field(default_factory=list)

    def deapply(self, word: list[AugGlyph], mid: int) -> bool:
        """Collapse each occurrence of ``content`` in place into ``Synthetic(mid)``."""
        k = len(self.content)
        if k == 0:
            raise ValueError("cannot deapply an empty posterior")
        any_mod = False
        i = 0
        while i + k <= len(word):
            if word[i:i + k] == self.content:
                word[i:i + k] = [Synthetic(mid)]
                any_mod = True
            i += 1
        return any_mod

    def apply(self, word: list[AugGlyph], mid: int) -> bool:
        """Expand each ``Synthetic(mid)`` in place into ``content``."""
        target = Synthetic(mid)
        any_mod = False
        i = 0
        while i < len(word):
            if word[i] == target:
                word[i:i + 1] = list(self.content)
                any_mod = True
                i += len(self.content)
            else:
                i += 1
        return any_mod

    def low_level(self, mid: int) -> s2.Substitution:
        return s2.Substitution(
            pre_key=[],
            at_key=[Synthetic(mid)],
            post_key=[],
            sub_content=list(self.content),
        )


@dataclass
class HLSubstitution:
    """A rule ``anterior→mid→posterior``."""

    anterior: Anterior
    mid: int
    posterior: Posterior

    def anterior_low_level(self) -> list[s2.Substitution]:
        return self.anterior.low_level(self.mid)

    def posterior_low_level(self) -> s2.Substitution:
        return self.posterior.low_level(self.mid)

    def apply_anterior(self, word: list[AugGlyph]) -> bool:
        return self.anterior.apply(word, self.mid)

    def apply_posterior(self, word: list[AugGlyph]) -> bool:
        return self.posterior.apply(word, self.mid)

    def deapply_posterior(self, word: list[AugGlyph]) -> bool:
        return self.posterior.deapply(word, self.mid)

    def apply(self, word: list[AugGlyph]) -> bool:
        """Apply the anterior, then, if it matched, the posterior, in place."""
        return self.apply_anterior(word) and self.apply_posterior(word)

    def apply_copied(self, word: list[AugGlyph]) -> Optional[list[AugGlyph]]:
        """Apply to a copy; return it if the rule fired, otherwise ``None``."""
        copy = list(word)
        return copy if self.apply(copy) else None

    def encode(self) -> str:
        return f"{self.anterior.encode()}→{self.mid}→{aug_encode(self.posterior.content)}"

    @classmethod
    def decode(cls, text: str) -> HLSubstitution:
        parts = text.split("→")
        if len(parts) != 3:
            raise ValueError("Doesn't have 3 parts separated by →")
        anterior_str, mid_str, posterior_str = parts
        return cls(
            anterior=Anterior.decode(anterior_str),
            mid=_parse_mid(mid_str),
            posterior=Posterior(content=aug_decode(posterior_str)),
        )

    def __str__(self) -> str:
        return self.encode()