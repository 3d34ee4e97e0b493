"""
Configuration: Course Table Report

Summary:
    Centralized configuration acting as the single place for every constant the
    report build depends on: where the exports live, which table to read, which
    columns drive grouping, which columns are suppressed, and the page shell.
"""

# --- 1. Path Configuration ---
# The exports and the generated report share one folder (default: where the command runs)
INPUT_DIR = "."
HTML_SUFFIX = ".html"
OUTPUT_FILE = "index.html"

# --- 2. Source Table Configuration ---
# The course-offering page renders its listing as <table id="scrollable">
TABLE_ID = "scrollable"

# --- 3. Grouping Configuration ---
COURSE_COLUMN = "نام درس"
INSTRUCTOR_COLUMN = "استاد"
REQUIRED_COLUMNS = [COURSE_COLUMN, INSTRUCTOR_COLUMN]

# Columns that never reach the grouped report (exact label match)
EXCLUDED_COLUMNS = [
    "ردیف",
    "کد درس",
    "گروه",
    "کد ارائه",
    "دانشکده",
    "رشته",
    "مقطع",
    "نوع درس",
    "واحد نظری",
    "واحد عملی",
    "ظرفیت",
    "ثبت نام شده",
    "جنسیت",
    "پیش نیاز",
    "توضیحات",
]

# --- 4. Page Shell ---
PAGE_CONFIG = {
    "lang": "en",
    "title": "Table Data",
    "byline": "@Law_Azad402",
    "empty_message": "No table data found",
    "tailwind_src": "https://cdn.tailwindcss.com",
    "font_hosts": ["https://fonts.googleapis.com", "https://fonts.gstatic.com"],
    "font_stylesheet": "https://fonts.googleapis.com/css2?family=Vazirmatn:wght@100..900&display=swap",
    "style": (
        "* {\n"
        "  font-family: 'Vazirmatn' !important;\n"
        "}\n"
        "table {\n"
        "  direction: rtl;\n"
        "}\n"
    ),
}
