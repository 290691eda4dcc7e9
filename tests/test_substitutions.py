from respell.glyphs import Glyph
from respell.substitutions import Barrier, Substitution, SubstitutionList

Y, O, U, X, Z = Glyph.Y, Glyph.O, Glyph.U, Glyph.X, Glyph.Z


def test_substitution_apply():
    sub = Substitution(key=[Y, O, U], sub_start=1, sub_end=3, sub_content=X)
    working = [Y, O, U]
    assert sub.apply(working, 0) is False
    assert sub.apply(working, 1) is True
    assert working == [Y, X]


def test_substitution_apply_too_short():
    sub = Substitution(key=[Y, O, U], sub_start=0, sub_end=1, sub_content=X)
    working = [Y, O]
    assert sub.apply(working, 0) is False
    assert working == [Y, O]


def test_substitution_render():
    sub = Substitution(key=[Y, O, U], sub_start=1, sub_end=3, sub_content=X)
    assert sub.render() == "sub y o' u' by x;"


def test_list_with_barrier():
    slist = SubstitutionList(
        [
            Substitution(key=[Y, O, U], sub_start=0, sub_end=1, sub_content=Z),
            Barrier(),
            Substitution(key=[Z, O, U], sub_start=0, sub_end=1, sub_content=X),
        ]
    )
    working = [Y, O, U]
    slist.apply_all_pos(working)
    assert working == [X, O, U]


def test_list_without_barrier():
    slist = SubstitutionList(
        [
            Substitution(key=[Y, O, U], sub_start=0, sub_end=1, sub_content=Z),
            Substitution(key=[Z, O, U], sub_start=0, sub_end=1, sub_content=X),
        ]
    )
    working = [Y, O, U]
    slist.apply_all_pos(working)
    assert working == [Z, O, U]


def test_list_later_position():
    slist = SubstitutionList(
        [
            Substitution(key=[Y, O, U], sub_start=0, sub_end=1, sub_content=Z),
            Substitution(key=[Z, O, U], sub_start=2, sub_end=3, sub_content=X),
        ]
    )
    working = [Y, O, U]
    slist.apply_all_pos(working)
    assert working == [Z, O, X]


def test_list_render():
    slist = SubstitutionList(
        [
            Substitution(key=[Y, O, U], sub_start=0, sub_end=1, sub_content=Z),
            Barrier(),
            Substitution(key=[Z, O, U], sub_start=0, sub_end=1, sub_content=X),
        ]
    )
    assert slist.render() == (
        "lookup l0 {\n"
        "  sub y' o u by z;\n"
        "} lookup l0;\n"
        "lookup l1 {\n"
        "  sub z' o u by x;\n"
        "} l1;\n"
    )