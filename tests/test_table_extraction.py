import pytest

from course_report.etl.table_extraction import parse_table, extract_table, retained_indexes
from course_report.etl.errors import ExtractionSkipped
from course_report.utils.config import EXCLUDED_COLUMNS

from helpers import COURSE, INSTRUCTOR, make_page


def test_reads_header_and_rows():
    html = make_page([COURSE, INSTRUCTOR, "X"], [["Math", "Smith", "5"], ["Physics", "Jones", "3"]])

    table = extract_table(html)

    assert table.column_names == [COURSE, INSTRUCTOR, "X"]
    assert table.rows == [["Math", "Smith", "5"], ["Physics", "Jones", "3"]]


def test_cell_text_is_trimmed():
    html = make_page(["  A \n", "B"], [["  1  ", "\n2\t"]])

    table = extract_table(html)

    assert table.column_names == ["A", "B"]
    assert table.rows == [["1", "2"]]


def test_missing_table_returns_none():
    html = make_page(["A"], [["1"]], table_id="other")

    assert extract_table(html) is None
    with pytest.raises(ExtractionSkipped) as exc:
        parse_table(html)
    assert "scrollable" in exc.value.reason


def test_missing_thead_or_tbody_returns_none():
    no_thead = '<table id="scrollable"><tbody><tr><td>1</td></tr></tbody></table>'
    no_tbody = '<table id="scrollable"><thead><tr><th>A</th></tr></thead></table>'

    assert extract_table(no_thead) is None
    assert extract_table(no_tbody) is None


def test_cell_without_leading_text_yields_empty_string():
    html = (
        '<table id="scrollable">'
        "<thead><tr><th><b>Bold</b></th><th></th><th>C</th></tr></thead>"
        "<tbody><tr><td><a href='#'>link</a></td><td></td><td>3</td></tr></tbody>"
        "</table>"
    )

    table = extract_table(html)

    assert table.column_names == ["", "", "C"]
    assert table.rows == [["", "", "3"]]


def test_only_first_header_row_is_used():
    html = (
        '<table id="scrollable">'
        "<thead><tr><th>A</th><th>B</th></tr><tr><th>ignored</th></tr></thead>"
        "<tbody><tr><td>1</td><td>2</td></tr></tbody>"
        "</table>"
    )

    assert extract_table(html).column_names == ["A", "B"]


def test_short_rows_are_padded_to_header_width():
    html = make_page(["A", "B", "C"], [["1"], ["1", "2", "3"]])

    table = extract_table(html)

    assert table.rows == [["1", "", ""], ["1", "2", "3"]]
    assert all(len(row) == len(table.column_names) for row in table.rows)


def test_surplus_cells_are_dropped_to_header_width():
    html = make_page(["A", "B"], [["1", "2", "3"]])

    table = extract_table(html)

    assert table.rows == [["1", "2"]]
    assert all(len(row) == len(table.column_names) for row in table.rows)


def test_skip_reason_is_passed_to_callback():
    reasons = []
    html = '<table id="scrollable"><thead><tr><th>A</th></tr></thead></table>'

    assert extract_table(html, on_skip=reasons.append) is None
    assert reasons == ["missing tbody"]


def test_excluded_columns_are_dropped_from_header_and_rows():
    excluded = EXCLUDED_COLUMNS[0]
    html = make_page([excluded, COURSE, INSTRUCTOR, "X"], [["1", "Math", "Smith", "5"]])

    table = extract_table(html, EXCLUDED_COLUMNS)

    assert table.column_names == [COURSE, INSTRUCTOR, "X"]
    assert table.rows == [["Math", "Smith", "5"]]


def test_exclusion_is_exact_match_only():
    near_miss = EXCLUDED_COLUMNS[1] + "ی"
    html = make_page([EXCLUDED_COLUMNS[1], near_miss], [["1", "2"]])

    table = extract_table(html, EXCLUDED_COLUMNS)

    assert table.column_names == [near_miss]
    assert table.rows == [["2"]]


def test_retained_row_length_matches_retained_columns():
    headers = [COURSE, EXCLUDED_COLUMNS[2], INSTRUCTOR, EXCLUDED_COLUMNS[3], "X"]
    html = make_page(headers, [["Math", "g", "Smith", "t"], ["Art", "g", "Lee", "t", "2", "extra"]])

    table = extract_table(html, EXCLUDED_COLUMNS)

    assert table.column_names == [COURSE, INSTRUCTOR, "X"]
    assert table.rows == [["Math", "Smith", ""], ["Art", "Lee", "2"]]


def test_retained_indexes_marks_excluded_positions():
    assert retained_indexes(["A", "B", "C"], ["B"]) == [0, None, 2]
    assert retained_indexes(["A", "B"], None) == [0, 1]
