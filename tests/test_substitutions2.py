import pytest

from respell.glyphs import Glyph, Synthetic
from respell.substitutions2 import (
    AnyLetter,
    Ignore,
    Lookup,
    Substitution,
    SubstitutionList,
    apply_all,
    apply_all_with_new,
    apply_sub_at_pos,
    matches,
)

A, B, C, D, E, F, G, H, I, J = (
    Glyph.A, Glyph.B, Glyph.C, Glyph.D, Glyph.E,
    Glyph.F, Glyph.G, Glyph.H, Glyph.I, Glyph.J,
)


def sub(pre, at, post, content):
    return Substitution(pre_key=pre, at_key=at, post_key=post, sub_content=content)


def test_apply_at_wrong_pos():
    working = [A, B, C, D, E]
    s = sub([B], [C, D], [], [F])
    assert apply_sub_at_pos(working, 0, s) is False
    assert working == [A, B, C, D, E]


def test_apply_at_pos_matches():
    working = [A, B, C, D, E]
    s = sub([B], [C, D], [], [F])
    assert apply_sub_at_pos(working, 2, s) is True
    assert working == [A, B, F, E]


def test_apply_at_pos_pre_mismatch():
    working = [A, B, C, D, E]
    s = sub([G], [C, D], [], [F])
    assert apply_sub_at_pos(working, 2, s) is False
    assert working == [A, B, C, D, E]


def test_empty_at_key_rejected():
    with pytest.raises(ValueError):
        apply_sub_at_pos([A], 0, sub([], [], [], [B]))


def test_matches():
    assert matches(A, A)
    assert not matches(A, B)
    assert matches(A, AnyLetter())
    assert matches(Synthetic(0), AnyLetter())
    assert not matches(Glyph.HYPHEN, AnyLetter())


def test_apply_all_empty():
    working = [A, B, C, D, E]
    apply_all(working, SubstitutionList())
    assert working == [A, B, C, D, E]


def test_apply_all_two_lookups():
    slist = SubstitutionList(
        [Lookup([sub([], [B], [], [F])]), Lookup([sub([], [F], [], [G])])]
    )
    working = [A, B, C, D, E]
    apply_all(working, slist)
    assert working == [A, G, C, D, E]


def test_apply_all_contexts():
    slist = SubstitutionList(
        [
            Lookup([sub([A], [B, C], [], [F]), sub([], [A, F], [], [G])]),
            Lookup([sub([], [F], [D], [H, I]), sub([I], [D], [], [J])]),
        ]
    )
    working = [A, B, C, D, E]
    apply_all(working, slist)
    assert working == [A, H, I, J, E]


def test_apply_all_skips_inserted():
    slist = SubstitutionList([Lookup([sub([], [A], [], [C, D]), sub([], [D], [], [E])])])
    working = [A, B]
    apply_all(working, slist)
    assert working == [C, D, B]


def test_ignore_blocks_later_rule():
    slist = SubstitutionList(
        [
            Lookup(
                [
                    sub([AnyLetter()], [B], [], Ignore()),
                    sub([], [B], [], [Synthetic(0)]),
                ]
            )
        ]
    )
    blocked = [A, B]
    apply_all(blocked, slist)
    assert blocked == [A, B]
    open_word = [Glyph.HYPHEN, B]
    apply_all(open_word, slist)
    assert open_word == [Glyph.HYPHEN, Synthetic(0)]


def _two_lookups():
    return SubstitutionList(
        [Lookup([sub([], [B], [], [F])]), Lookup([sub([], [F], [], [G])])]
    )


def test_apply_all_with_new_matched():
    working = [A, B, C, D, E]
    assert apply_all_with_new(working, _two_lookups(), 1) is True
    assert working == [A, G, C, D, E]


def test_apply_all_with_new_stops_early():
    working = [A, C, D, E]
    assert apply_all_with_new(working, _two_lookups(), 1) is False
    assert working == [A, C, D, E]


def test_apply_all_with_new_zero():
    working = [A, B, C]
    assert apply_all_with_new(working, _two_lookups(), 0) is False
    assert working == [A, B, C]