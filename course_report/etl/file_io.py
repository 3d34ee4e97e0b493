# course_report/etl/file_io.py

import os

from course_report.utils.config import HTML_SUFFIX, OUTPUT_FILE


def list_html_files(input_dir, output_file=OUTPUT_FILE):
    """
    Lists the export files in `input_dir`, in directory-listing order.

    The report itself lives in the same folder, so `output_file` is left out
    to keep a rerun from reading its own previous output.

    Returns:
        list: Full paths of every `*.html` entry except the report.
    """
    return [
        os.path.join(input_dir, name)
        for name in os.listdir(input_dir)
        if name.endswith(HTML_SUFFIX)
        and name != output_file
        and os.path.isfile(os.path.join(input_dir, name))
    ]


def read_html(file_path):
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()


def write_report(html, output_folder, file_name=OUTPUT_FILE):
    """Writes the rendered document (UTF-8), replacing any earlier report. Returns the path."""
    out_path = os.path.join(output_folder, file_name)
    with open(out_path, 'w', encoding='utf-8') as f:
        f.write(html)
    return out_path
