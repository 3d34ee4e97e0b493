# course_report/etl/grouping.py

from course_report.etl.errors import RequiredColumnMissing
from course_report.utils.config import COURSE_COLUMN, INSTRUCTOR_COLUMN


def resolve_key_positions(column_names, course_column=COURSE_COLUMN, instructor_column=INSTRUCTOR_COLUMN):
    """
    Finds the zero-based positions of the course and instructor columns.

    Raises:
        RequiredColumnMissing: Naming every key label absent from `column_names`.
    """
    column_names = list(column_names or [])
    missing = [c for c in (course_column, instructor_column) if c not in column_names]
    if missing:
        raise RequiredColumnMissing(missing)

    return column_names.index(course_column), column_names.index(instructor_column)


def remainder_columns(column_names, key_positions):
    """Every column except the two keys, in original relative order."""
    return [name for i, name in enumerate(column_names) if i not in key_positions]


def group_rows(column_names, rows, course_column=COURSE_COLUMN, instructor_column=INSTRUCTOR_COLUMN):
    """
    Partitions aggregated rows into Course -> Instructor -> remainder rows.

    Context:
        A course is usually offered by several instructors, and each instructor
        may teach several sections of it. The flat listing repeats the course and
        instructor on every section; grouping files each section under its course
        and instructor once, so the report reads as one block per course.

        Uses the Upsert pattern: the course entry is created on first sight, then
        the instructor entry inside it. Python dicts keep insertion order, so both
        levels come out in first-occurrence order and rows keep aggregation order.
        The partition is lossless: every input row lands in exactly one list.

    Args:
        column_names (list): Header labels of the aggregated table.
        rows (list): Aggregated rows aligned to `column_names`.

    Returns:
        dict: {course: {instructor: [remainder_row, ...]}}, where each remainder
              row is the source row with both key cells removed.

    Raises:
        RequiredColumnMissing: If either key column is absent.
    """
    course_idx, instructor_idx = resolve_key_positions(column_names, course_column, instructor_column)
    key_positions = {course_idx, instructor_idx}

    grouped = {}
    for row in rows:
        course = row[course_idx] if course_idx < len(row) else ""
        instructor = row[instructor_idx] if instructor_idx < len(row) else ""

        if course not in grouped:
            grouped[course] = {}
        if instructor not in grouped[course]:
            grouped[course][instructor] = []

        grouped[course][instructor].append([cell for i, cell in enumerate(row) if i not in key_positions])

    return grouped


def count_grouped_rows(grouped):
    """Total remainder rows across every (course, instructor) pair."""
    return sum(len(section_rows) for instructors in grouped.values() for section_rows in instructors.values())
