import pytest

from firstaid import BandAid, Edit, InvalidSpanError, LineColumn, Span


def span(start_line, start_column, end_line, end_column):
    return Span(LineColumn(start_line, start_column), LineColumn(end_line, end_column))


def test_line_column_ordering_is_lexicographic():
    assert LineColumn(1, 80) < LineColumn(2, 0)
    assert LineColumn(2, 3) < LineColumn(2, 4)
    assert LineColumn(3, 1) == LineColumn(3, 1)


@pytest.mark.parametrize("line, column", [(0, 0), (1, -1)])
def test_line_column_rejects_out_of_range(line, column):
    with pytest.raises(InvalidSpanError):
        LineColumn(line, column)


def test_span_start_after_end_fails():
    with pytest.raises(InvalidSpanError):
        span(2, 0, 1, 5)
    with pytest.raises(InvalidSpanError):
        span(1, 6, 1, 5)


def test_span_of_a_single_character():
    single = span(4, 7, 4, 7)
    assert not single.is_multiline()
    assert single.one_line_len() == 1


def test_multiline_span():
    multi = span(1, 16, 2, 43)
    assert multi.is_multiline()
    assert multi.one_line_len() is None
    assert str(multi) == "(1,16)..(2,43)"


def test_from_line_range_has_inclusive_end():
    assert Span.from_line_range(3, range(0, 45)) == span(3, 0, 3, 44)
    with pytest.raises(InvalidSpanError):
        Span.from_line_range(3, range(5, 5))


def test_covers_and_contains():
    outer = span(1, 16, 3, 44)
    assert outer.covers(span(2, 0, 2, 80))
    assert outer.covers(outer)
    assert not outer.covers(span(3, 40, 3, 45))
    assert LineColumn(1, 16) in outer
    assert LineColumn(3, 44) in outer
    assert LineColumn(1, 15) not in outer
    assert LineColumn(3, 45) not in outer


def test_edit_requires_single_line_span():
    edit = Edit(span(2, 0, 2, 10), "replacement")
    assert edit.replacement == "replacement"
    with pytest.raises(InvalidSpanError):
        Edit(span(2, 0, 3, 10), "replacement")


def test_edit_from_tuple():
    target = span(1, 4, 1, 7)
    assert BandAid.from_tuple(("text", target)) == Edit(target, "text")
