# course_report/report/renderer.py

from course_report.report.html_builder import ReportDocument, build_table, data_row
from course_report.etl.grouping import resolve_key_positions, remainder_columns
from course_report.utils.config import COURSE_COLUMN, INSTRUCTOR_COLUMN

BYLINE_CLASS = 'text-center text-9xl text-blue-500 mt-10'
EMPTY_CLASS = 'text-center text-9xl text-gray-500 mt-10'


def render_empty(page_config=None):
    """The page emitted when no export produced any rows: title and message, no stylesheets or scripts."""
    doc = ReportDocument(page_config, with_assets=False)
    doc.heading(doc.page_config['empty_message'], EMPTY_CLASS)
    return doc.render()


def render_flat(column_names, rows, page_config=None):
    """
    Renders the aggregated table as-is: one header row, one body row per data row.

    Args:
        column_names (list): Header labels (None when nothing was extracted).
        rows (list): Aggregated rows.

    Returns:
        str: The complete HTML document.
    """
    if not rows:
        return render_empty(page_config)

    doc = ReportDocument(page_config)
    doc.heading(doc.page_config['byline'], BYLINE_CLASS)

    tbody = build_table(doc, column_names or [])
    for row in rows:
        tbody.append(data_row(doc, row))

    return doc.render()


def grouped_display_columns(column_names, course_column=COURSE_COLUMN, instructor_column=INSTRUCTOR_COLUMN):
    """[course label, instructor label, every other column in original order]."""
    key_positions = set(resolve_key_positions(column_names, course_column, instructor_column))
    return [course_column, instructor_column] + remainder_columns(column_names, key_positions)


def render_grouped(grouped, column_names, page_config=None,
                   course_column=COURSE_COLUMN, instructor_column=INSTRUCTOR_COLUMN):
    """
    Renders the Course -> Instructor -> sections grouping.

    Context:
        Each course opens with a full-width banner row carrying the course name.
        Under it, every section is one row: the course cell left blank (the banner
        already names it), the instructor, then the section's remaining cells.

    Args:
        grouped (dict): Output of `group_rows`.
        column_names (list): Header labels of the aggregated table.

    Returns:
        str: The complete HTML document.
    """
    if not grouped:
        return render_empty(page_config)

    display_columns = grouped_display_columns(column_names, course_column, instructor_column)

    doc = ReportDocument(page_config)
    doc.heading(doc.page_config['byline'], BYLINE_CLASS)
    tbody = build_table(doc, display_columns)

    for course, instructors in grouped.items():
        banner = doc.tag('tr', class_='bg-blue-100')
        banner.append(doc.tag('td', course, class_='px-4 py-2 font-bold', colspan=str(len(display_columns))))
        tbody.append(banner)

        for instructor, section_rows in instructors.items():
            for remainder in section_rows:
                tbody.append(data_row(doc, ["", instructor] + list(remainder)))

    return doc.render()
