import os
import sys
import argparse

from course_report.etl.file_io import read_html
from course_report.etl.table_extraction import parse_table
from course_report.etl.errors import ExtractionSkipped
from course_report.etl.export import table_to_dataframe
from course_report.utils.config import EXCLUDED_COLUMNS

# Quick look at what one saved page yields before running the whole folder.
# Usage: python preview_table.py data/page_1.html [--grouped]


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print the course table extracted from one saved page")
    parser.add_argument('file', type=str, help='Path to the saved .html page')
    parser.add_argument('--grouped', action='store_true',
                        help='Apply the grouped-mode column exclusions')
    args = parser.parse_args(argv)

    # 1. Check the file exists
    if not os.path.exists(args.file):
        print(f"Error: Could not find file at {args.file}")
        sys.exit(1)

    # 2. Parse
    try:
        table = parse_table(read_html(args.file), EXCLUDED_COLUMNS if args.grouped else None)
    except ExtractionSkipped as e:
        print(f"No usable table in {args.file} ({e.reason})")
        sys.exit(1)

    # 3. Output the results
    df = table_to_dataframe(table.column_names, table.rows)
    print(f"Found {len(table.column_names)} columns and {len(table.rows)} rows.")
    print(df.to_string(index=False))


if __name__ == "__main__":
    main()
