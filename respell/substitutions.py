"""Single-glyph substitutions grouped into barrier-separated lists."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from respell.glyphs import Glyph


@dataclass
class Substitution:
    """Replace ``key[sub_start:sub_end]`` with ``sub_content`` where ``key`` matches."""

    key: list[Glyph]
    sub_start: int
    sub_end: int
    sub_content: Glyph

    def render(self) -> str:
        lhs = " ".join(
            f"{g.fea_name()}'" if self.sub_start <= i < self.sub_end else g.fea_name()
            for i, g in enumerate(self.key)
        )
        return f"sub {lhs} by {self.sub_content.fea_name()};"

    def apply(self, working: list[Glyph], pos: int) -> bool:
        """Apply in place with the substituted part starting at ``pos``."""
        if pos < self.sub_start:
            return False
        start = pos - self.sub_start
        end = start + len(self.key)
        if end > len(working):
            return False
        if working[start:end] != self.key:
            return False
        working[pos:pos + self.sub_end - self.sub_start] = [self.sub_content]
        return True


@dataclass(frozen=True)
class Barrier:
    """Separates groups of substitutions; one match per group at a position."""


Item = Union[Substitution, Barrier]


@dataclass
class SubstitutionList:
    substitutions: list[Item] = field(default_factory=list)

    def apply_at_pos(self, working: list[Glyph], pos: int) -> None:
        matched = False
        for item in self.substitutions:
            if isinstance(item, Barrier):
                matched = False
            elif not matched and item.apply(working, pos):
                matched = True

    def apply_all_pos(self, working: list[Glyph]) -> None:
        pos = 0
        while pos < len(working):
            self.apply_at_pos(working, pos)
            pos += 1

    def render(self) -> str:
        counter = 0
        lines = [f"lookup l{counter} {{\n"]
        for item in self.substitutions:
            if isinstance(item, Barrier):
                lines.append(f"}} lookup l{counter};\n")
                counter += 1
                lines.append(f"lookup l{counter} {{\n")
            else:
                lines.append(f"  {item.render()}\n")
        lines.append(f"}} l{counter};\n")
        return "".join(lines)