# course_report/etl/errors.py


class ExtractionSkipped(Exception):
    """
    Raised when a document does not carry a usable course table.

    Non-fatal: the batch treats the file as contributing nothing and moves on.
    """

    def __init__(self, reason):
        super().__init__(reason)
        self.reason = reason


class RequiredColumnMissing(ValueError):
    """
    Raised when a grouping key column is absent from the aggregated header list.

    Fatal for the run: no report is written.
    """

    def __init__(self, missing_columns):
        self.missing_columns = list(missing_columns)
        quoted = ", ".join(f"'{c}'" for c in self.missing_columns)
        super().__init__(f"Aggregated table missing required column(s): {quoted}")
