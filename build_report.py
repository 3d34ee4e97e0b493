import os           # Operating System: file names and paths
import sys          # Exit status for the fatal path
import argparse     # Argument Parser: Handles command line inputs (--dir, --grouped)
from course_report.etl.file_io import list_html_files, read_html, write_report  # Loader / Writer
from course_report.etl.table_extraction import extract_table                    # Extracts the course table
from course_report.etl.aggregation import aggregate_tables, header_mismatch, EMPTY_AGGREGATE
from course_report.etl.grouping import group_rows, count_grouped_rows
from course_report.etl.errors import RequiredColumnMissing
from course_report.etl.export import table_to_dataframe, grouped_to_dataframe, save_dataframe
from course_report.report.renderer import render_flat, render_grouped, grouped_display_columns
from course_report.utils.config import INPUT_DIR, OUTPUT_FILE, EXCLUDED_COLUMNS

# ==============================================================================
# Course Table Report Builder
# ---------------------------
# Context:
#   Reads every course-offering page saved from the registration portal into one
#   folder, pulls the listing table (table#scrollable) out of each, stacks the
#   rows, and writes a single readable report (index.html) next to them.
#
#   Flat mode reproduces the listing as-is. Grouped mode drops the suppressed
#   columns and files every section under its course and instructor.
#
# Usage:
#    python build_report.py [--dir DIR] [--grouped] [--output NAME] [--csv PATH]
#
# Arguments:
#    --dir     : Folder holding the saved pages; the report is written there too.
#    --grouped : Group rows by course and instructor.
#    --output  : Report file name (default 'index.html').
#    --csv     : Optional path for a CSV copy of the extracted table.
# ==============================================================================

# ==============================================================================
# 1. CORE FUNCTIONS
# ==============================================================================

def process_single_file(file_path, excluded_columns=None):
    """
    Parses one saved page into a RawTable, or None when it carries no usable table.

    Args:
        file_path (str): Full path to the saved HTML page.
        excluded_columns (list, optional): Header labels to drop (grouped mode).

    Returns:
        RawTable or None
    """
    file_name = os.path.basename(file_path)

    def report_skip(reason):
        print(f"   Skipped: {file_name} ({reason})")

    return extract_table(read_html(file_path), excluded_columns, on_skip=report_skip)


def collect_tables(files, excluded_columns=None):
    """
    Extracts every file in order and warns about headers that differ from the first.

    Returns:
        list: One RawTable or None per file, aligned to `files`.
    """
    results = []
    first_seen = EMPTY_AGGREGATE
    for file_path in files:
        result = process_single_file(file_path, excluded_columns)
        if result is not None:
            print(f"   -> {os.path.basename(file_path)}: {len(result.rows)} rows")
            if header_mismatch(first_seen, result):
                # Rows are still concatenated by position
                print(f"   Warning: {os.path.basename(file_path)} has different columns than the first table")
            if first_seen.column_names is None:
                first_seen = result
        results.append(result)
    return results


def build_report(input_dir=INPUT_DIR, grouped=False, output_file=OUTPUT_FILE, csv_path=None):
    """
    Runs the full pass: load -> extract -> aggregate -> [group] -> render -> write.

    Returns:
        str: Path of the written report.

    Raises:
        RequiredColumnMissing: In grouped mode, if a key column is absent.
            Raised before anything is written.
    """
    files = list_html_files(input_dir, output_file)
    if not files:
        print(f"   Warning: No .html files found in {input_dir}")

    excluded_columns = EXCLUDED_COLUMNS if grouped else None
    aggregate = aggregate_tables(collect_tables(files, excluded_columns))
    print(f"\n--- Aggregation Complete: {len(aggregate.rows)} rows ---")

    if grouped and aggregate.column_names is not None:
        groups = group_rows(aggregate.column_names, aggregate.rows)
        print(f"   -> Grouped {count_grouped_rows(groups)} rows under {len(groups)} courses")
        html = render_grouped(groups, aggregate.column_names)
        export_df = grouped_to_dataframe(groups, grouped_display_columns(aggregate.column_names))
    elif grouped:
        # No table anywhere: the empty page needs no key columns
        html = render_grouped({}, aggregate.column_names)
        export_df = None
    else:
        html = render_flat(aggregate.column_names, aggregate.rows)
        export_df = table_to_dataframe(aggregate.column_names, aggregate.rows)

    if csv_path and export_df is not None:
        save_dataframe(export_df, csv_path)

    out_path = write_report(html, input_dir, output_file)
    print(f"{output_file} has been generated successfully!")
    return out_path


# ==============================================================================
# 2. MAIN EXECUTION
# ==============================================================================

def main(argv=None):
    parser = argparse.ArgumentParser(description="Build one HTML report from saved course-offering pages")
    parser.add_argument('--dir', type=str, default=INPUT_DIR,
                        help='Folder with the saved .html pages (report is written here)')
    parser.add_argument('--grouped', action='store_true',
                        help='Group rows by course and instructor, dropping suppressed columns')
    parser.add_argument('--output', type=str, default=OUTPUT_FILE,
                        help='Report file name')
    parser.add_argument('--csv', type=str, default=None,
                        help='Also save the extracted table as CSV at this path')

    args = parser.parse_args(argv)

    mode = "GROUPED" if args.grouped else "FLAT"
    print(f"--- MODE: {mode} report from '{args.dir}' ---")

    try:
        build_report(args.dir, args.grouped, args.output, args.csv)
    except RequiredColumnMissing as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
