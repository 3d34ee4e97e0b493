# course_report/etl/export.py

import os
import pandas as pd


def table_to_dataframe(column_names, rows):
    """
    Loads extracted rows into a DataFrame under the given header labels.

    Rows are positional, so a row that does not match the header width (a file
    with a different table shape) is padded with "" or cut to fit. This keeps
    the frame rectangular without reordering anything.

    Args:
        column_names (list): Header labels. None or empty yields an empty frame.
        rows (list): Lists of cell strings.

    Returns:
        pd.DataFrame: One row per extracted row, all values as strings.
    """
    column_names = list(column_names or [])
    width = len(column_names)
    if width == 0:
        return pd.DataFrame()

    fitted = [list(row[:width]) + [""] * (width - len(row)) for row in rows]
    return pd.DataFrame(fitted, columns=column_names, dtype=str)


def grouped_to_dataframe(grouped, display_columns):
    """Flattens a Course -> Instructor grouping back into rows, keys first."""
    records = [
        [course, instructor] + list(remainder)
        for course, instructors in grouped.items()
        for instructor, section_rows in instructors.items()
        for remainder in section_rows
    ]
    return table_to_dataframe(display_columns, records)


def save_dataframe(df, out_path):
    """
    Writes the table to CSV (UTF-8 with BOM, so spreadsheet tools read Persian text correctly).
    """
    if df.empty:
        return None

    folder = os.path.dirname(out_path)
    if folder:
        os.makedirs(folder, exist_ok=True)

    df.to_csv(out_path, index=False, encoding='utf-8-sig')
    print(f"   -> Saved: {out_path} ({len(df)} records)")
    return out_path
