from .schema import DTYPES, ResultRow
from .store import (
    init_store,
    validate_records,
    append_results,
    load_all,
    summarize_by_exam,
    export_ndjson,
)

__all__ = [
    "DTYPES",
    "ResultRow",
    "init_store",
    "validate_records",
    "append_results",
    "load_all",
    "summarize_by_exam",
    "export_ndjson",
]
