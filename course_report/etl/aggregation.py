# course_report/etl/aggregation.py

from collections import namedtuple
from functools import reduce

# The union of every file's rows, under the first file's header list
AggregatedTable = namedtuple('AggregatedTable', ['column_names', 'rows'])

EMPTY_AGGREGATE = AggregatedTable(column_names=None, rows=[])


def combine(aggregate, result):
    """
    Folds one file's extraction result into the running aggregate.

    A None result (file skipped) leaves the aggregate untouched. The header list
    is taken from the first real result and never replaced; rows are appended
    positionally with no check that later headers match.
    """
    if result is None:
        return aggregate

    column_names = aggregate.column_names if aggregate.column_names is not None else list(result.column_names)
    return AggregatedTable(column_names=column_names, rows=aggregate.rows + list(result.rows))


def aggregate_tables(results):
    """
    Concatenates per-file results (in enumeration order) into one table.

    Equivalent to a UNION ALL across files, keyed to the first file's schema.

    Args:
        results (iterable): RawTable or None, one per input file.

    Returns:
        AggregatedTable: `column_names` is None when no file produced a table.
    """
    return reduce(combine, results, EMPTY_AGGREGATE)


def header_mismatch(aggregate, result):
    """True when `result` carries a header list different from the one already aggregated."""
    return (
        result is not None
        and aggregate.column_names is not None
        and list(result.column_names) != list(aggregate.column_names)
    )
