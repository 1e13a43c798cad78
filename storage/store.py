from __future__ import annotations

"""Parquet-backed export of exam results using pandas + pyarrow.

Unit of data: one row per submitted exam session.
"""

from pathlib import Path
from typing import Iterable

import pandas as pd

from .schema import DTYPES, ResultRow


DATA_FILE = "exam_results.parquet"


def _empty_df() -> pd.DataFrame:
    return pd.DataFrame({k: pd.Series(dtype=v) for k, v in DTYPES.items()})


def init_store(data_dir: Path) -> None:
    """Ensure the data directory and an empty Parquet file with the right schema exist."""
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    path = data_dir / DATA_FILE
    if not path.exists():
        _empty_df().to_parquet(path, engine="pyarrow", compression="zstd", index=False)


def _fix_dtypes(df: pd.DataFrame) -> pd.DataFrame:
    for col, dt in DTYPES.items():
        if col not in df.columns:
            df[col] = pd.NA
        if isinstance(dt, pd.DatetimeTZDtype):
            df[col] = pd.to_datetime(df[col], utc=True)
        else:
            df[col] = df[col].astype(dt)
    return df[list(DTYPES.keys())]


def validate_records(records: Iterable[ResultRow | dict]) -> pd.DataFrame:
    """Validate result rows and return a DataFrame with the store's dtypes."""
    rows = [r if isinstance(r, ResultRow) else ResultRow.model_validate(r) for r in records]
    if not rows:
        return _empty_df()
    df = pd.DataFrame([r.model_dump() for r in rows])
    return _fix_dtypes(df)


def append_results(df_new: pd.DataFrame, data_path: Path) -> None:
    """Append rows to the results table.

    A result id appears once; re-exporting a result replaces its earlier row
    (so a later publish or comment is reflected).
    """
    data_path = Path(data_path)
    f = data_path / DATA_FILE
    if f.exists():
        df_old = pd.read_parquet(f, engine="pyarrow")
    else:
        data_path.mkdir(parents=True, exist_ok=True)
        df_old = _empty_df()
    frames = [frame for frame in (_fix_dtypes(df_old), _fix_dtypes(df_new.copy())) if not frame.empty]
    combined = pd.concat(frames, ignore_index=True) if frames else _empty_df()
    combined = _fix_dtypes(combined)
    combined = combined.drop_duplicates(subset=["result_id"], keep="last")
    combined.to_parquet(f, engine="pyarrow", compression="zstd", index=False)


def load_all(data_path: Path) -> pd.DataFrame:
    """Load every stored result and add ``pct`` (score / total_marks * 100)."""
    f = Path(data_path) / DATA_FILE
    if not f.exists():
        return _empty_df().assign(pct=pd.Series(dtype="float64"))
    df = _fix_dtypes(pd.read_parquet(f, engine="pyarrow"))
    df["pct"] = df["score"].astype("float64") * 100.0 / df["total_marks"].astype("float64")
    return df.reset_index(drop=True)


def summarize_by_exam(df: pd.DataFrame) -> pd.DataFrame:
    """Per-exam count, average, highest and lowest score."""
    if df.empty:
        return pd.DataFrame(columns=["exam_id", "exam_name", "count", "average", "highest", "lowest"])
    scores = df.assign(score=df["score"].astype("float64"))
    out = (
        scores.groupby(["exam_id", "exam_name"], observed=True)["score"]
        .agg(count="count", average="mean", highest="max", lowest="min")
        .reset_index()
    )
    out["exam_id"] = out["exam_id"].astype(str)
    out["exam_name"] = out["exam_name"].astype(str)
    out["highest"] = out["highest"].astype(int)
    out["lowest"] = out["lowest"].astype(int)
    return out.sort_values("exam_name").reset_index(drop=True)


def export_ndjson(df: pd.DataFrame, out_path: Path) -> None:
    """Export a DataFrame to line-delimited JSON (NDJSON) for quick inspection."""
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    df.to_json(out_path, orient="records", lines=True, date_format="iso")
