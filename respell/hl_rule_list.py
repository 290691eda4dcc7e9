"""Ordered lists of high-level rules and their compilation into lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Iterable, Optional

from respell import substitutions2 as s2
from respell.glyphs import AugGlyph, Synthetic
from respell.hl_rules import HLSubstitution


def _synthetic_numbers(glyphs: Iterable[AugGlyph]) -> list[int]:
    return [g.number for g in glyphs if isinstance(g, Synthetic)]


@dataclass
class HLSubstitutionList:
    """Rules applied anterior-first in order, then posterior in reverse order."""

    substitutions: list[HLSubstitution] = field(default_factory=list)

    @classmethod
    def validated(cls, substitutions: Iterable[HLSubstitution]) -> HLSubstitutionList:
        """Build a list and check that its back-references are sound."""
        result = cls(list(substitutions))
        result.check_back_refs()
        return result

    def check_back_refs(self) -> None:
        """Raise ``ValueError`` on a repeated mid or a reference to a later mid."""
        seen: set[int] = set()
        for sub in self.substitutions:
            if sub.mid in seen:
                raise ValueError("Already contains mid")
            referenced = _synthetic_numbers(
                [
                    *sub.anterior.pre_key,
                    *sub.anterior.at_key,
                    *sub.anterior.post_key,
                    *sub.posterior.content,
                ]
            )
            if any(n not in seen for n in referenced):
                raise ValueError("Missing back-ref")
            seen.add(sub.mid)

    def next_open_mid(self) -> int:
        """The smallest mid not used by any rule."""
        used = {sub.mid for sub in self.substitutions}
        return next(n for n in count() if n not in used)

    def apply(self, word: list[AugGlyph]) -> bool:
        """Apply all rules in place; report whether anything changed."""
        any_mod = False
        for sub in self.substitutions:
            if sub.apply_anterior(word):
                any_mod = True
        for sub in reversed(self.substitutions):
            if sub.apply_posterior(word):
                any_mod = True
        return any_mod

    def apply_copied(self, word: list[AugGlyph]) -> Optional[list[AugGlyph]]:
        """Apply to a copy; return it if anything changed, otherwise ``None``."""
        copy = list(word)
        return copy if self.apply(copy) else None

    def apply_copied_always(self, word: list[AugGlyph]) -> list[AugGlyph]:
        copy = list(word)
        self.apply(copy)
        return copy

    def apply_posterior_copied(self, word: list[AugGlyph]) -> list[AugGlyph]:
        """Expand placeholders in a copy, latest rule first."""
        copy = list(word)
        for sub in reversed(self.substitutions):
            sub.apply_posterior(copy)
        return copy

    def low_level(self) -> s2.SubstitutionList:
        """Compile into lookups that give the same result as :meth:`apply`."""
        lookups: list[s2.Lookup] = []
        current: list[s2.Substitution] = []
        problem: set[AugGlyph] = set()
        at_problem: set[AugGlyph] = set()
        produced: set[int] = set()
        has_non_letters = False
        has_start_or_end = False

        for sub in self.substitutions:
            a = sub.anterior
            here_non_letters = any(
                not g.is_letter_or_phonetic() for g in a.at_key
            ) or any(not g.is_letter_or_phonetic() for g in sub.posterior.content)
            all_keys = [*a.at_key, *a.pre_key, *a.post_key]

            conflict = (
                any(g in problem for g in a.at_key)
                or any(g in at_problem for g in (*a.pre_key, *a.post_key))
                or any(n in produced for n in _synthetic_numbers(all_keys))
                or (has_non_letters and (a.at_start or a.at_end))
                or (has_start_or_end and here_non_letters)
            )
            if conflict:
                if current:
                    lookups.append(s2.Lookup(current))
                    current = []
                problem.clear()
                at_problem.clear()
                produced.clear()
                has_non_letters = False
                has_start_or_end = False

            current.extend(sub.anterior_low_level())
            problem.update(all_keys)
            at_problem.update(a.at_key)
            has_non_letters = has_non_letters or here_non_letters
            has_start_or_end = has_start_or_end or a.at_start or a.at_end
            produced.add(sub.mid)
        if current:
            lookups.append(s2.Lookup(current))

        current = []
        pending: set[int] = set()
        for sub in reversed(self.substitutions):
            if sub.mid in pending:
                if current:
                    lookups.append(s2.Lookup(current))
                    current = []
                pending.clear()
            current.append(sub.posterior_low_level())
            pending.update(_synthetic_numbers(sub.posterior.content))
        if current:
            lookups.append(s2.Lookup(current))

        return s2.SubstitutionList(lookups)

    @classmethod
    def decode(cls, text: str) -> HLSubstitutionList:
        """Parse one rule per non-blank line and check back-references."""
        result = cls(
            [HLSubstitution.decode(line.strip()) for line in text.split("\n") if line.strip()]
        )
        result.check_back_refs()
        return result