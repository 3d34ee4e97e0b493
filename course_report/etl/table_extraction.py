# course_report/etl/table_extraction.py

from collections import namedtuple

from course_report.etl.dom_query import parse_document, find_first, find_all, first_text
from course_report.etl.errors import ExtractionSkipped
from course_report.utils.config import TABLE_ID

# One document's worth of data: header labels plus row cell text aligned to them
RawTable = namedtuple('RawTable', ['column_names', 'rows'])


def locate_table_sections(soup, table_id=TABLE_ID):
    """
    Finds the identified table and returns its (thead, tbody) pair.

    Raises:
        ExtractionSkipped: If the table, its header section or its body section is absent.
    """
    table = find_first(soup, f'table#{table_id}')
    if table is None:
        raise ExtractionSkipped(f"no table#{table_id}")

    thead = find_first(table, 'thead')
    if thead is None:
        raise ExtractionSkipped("missing thead")

    tbody = find_first(table, 'tbody')
    if tbody is None:
        raise ExtractionSkipped("missing tbody")

    return thead, tbody


def read_header(thead):
    """Reads the labels of the first header row. No header row yields an empty list."""
    header_row = find_first(thead, 'tr')
    if header_row is None:
        return []
    return [first_text(th) for th in find_all(header_row, 'th')]


def retained_indexes(column_names, excluded_columns):
    """
    Builds the index map used to project data rows onto the kept columns.

    Every header position gets an entry: its own index when the label is kept,
    None when the label is in the exclusion set (exact match only).

    Returns:
        list: One entry per header position (int or None).
    """
    excluded = set(excluded_columns or [])
    return [None if name in excluded else i for i, name in enumerate(column_names)]


def parse_table(html_content, excluded_columns=None, table_id=TABLE_ID):
    """
    Parses the course table out of one HTML document.

    Context:
        The registration portal exports one page per search, each holding a single
        listing table. This reads that table's header labels and every body row.
        With an exclusion set, suppressed columns are dropped from both the header
        and every row so the two stay aligned.

    Args:
        html_content (str): Full text of the document.
        excluded_columns (list, optional): Header labels to drop. None keeps all columns.
        table_id (str): The `id` attribute of the table to read.

    Returns:
        RawTable: The extracted header labels and rows.

    Raises:
        ExtractionSkipped: If the document does not carry the expected table structure.
    """
    soup = parse_document(html_content)
    thead, tbody = locate_table_sections(soup, table_id)

    all_columns = read_header(thead)

    if excluded_columns:
        index_map = [i for i in retained_indexes(all_columns, excluded_columns) if i is not None]
        column_names = [all_columns[i] for i in index_map]
    else:
        index_map = None
        column_names = all_columns

    rows = []
    for tr in find_all(tbody, 'tr'):
        cells = [first_text(td) for td in find_all(tr, 'td')]

        if index_map is None:
            # Rows are fitted to the header width: short rows padded, surplus cells dropped
            width = len(column_names)
            rows.append(cells[:width] + [""] * (width - len(cells)))
        else:
            # A short row reads "" for any retained position it does not reach
            rows.append([cells[i] if i < len(cells) else "" for i in index_map])

    return RawTable(column_names=column_names, rows=rows)


def extract_table(html_content, excluded_columns=None, table_id=TABLE_ID, on_skip=None):
    """
    Same as parse_table, but returns None instead of raising when the table is unusable.

    Args:
        on_skip (callable, optional): Called with the skip reason before returning None.
    """
    try:
        return parse_table(html_content, excluded_columns, table_id)
    except ExtractionSkipped as e:
        if on_skip is not None:
            on_skip(e.reason)
        return None
