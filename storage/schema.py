from __future__ import annotations

"""Schema constants and Pydantic models for Parquet-backed exam results."""

from datetime import datetime, timezone
from typing import Optional

import pandas as pd
from pydantic import BaseModel, Field, ValidationInfo, field_validator

# --- Constants ---

DTYPES = {
    "result_id": "string",
    "session_id": "string",
    "exam_id": "string",
    "exam_name": "string",
    "student_id": "string",
    "student_name": "string",
    "score": "UInt32",
    "total_marks": "UInt32",
    "answered": "UInt16",
    "auto_submitted": "boolean",
    "published": "boolean",
    # timezone-aware UTC timestamps
    "ended_at": pd.DatetimeTZDtype(tz="UTC"),
}


# --- Pydantic models ---

class ResultRow(BaseModel):
    result_id: str
    session_id: str
    exam_id: str
    exam_name: str
    student_id: str
    student_name: str
    total_marks: int = Field(ge=1, le=4294967295)
    score: int = Field(ge=0, le=4294967295)
    answered: int = Field(default=0, ge=0, le=65535)
    auto_submitted: bool = False
    published: bool = False
    ended_at: Optional[datetime] = None

    @field_validator("score")
    @classmethod
    def _score_le_total(cls, v: int, info: ValidationInfo) -> int:
        total = info.data.get("total_marks")
        if total is not None and v > int(total):
            raise ValueError("score must be <= total_marks")
        return v

    @field_validator("ended_at")
    @classmethod
    def _ensure_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is None:
            return v
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)
