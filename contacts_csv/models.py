from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class ConvertedCsv(BaseModel):
    sha256: str
    encoding: str = Field(default="utf-8-sig")
    content_b64: str


class ReportSummary(BaseModel):
    rows_processed: int = 0
    rows_skipped: int = 0
    warnings: int = 0
    errors: int = 0
    label: str = Field(default="", examples=["Group 2024"])


class DecodingReport(BaseModel):
    detected: Optional[str] = None
    decode_used: str = "utf-8"
    decode_fallback: bool = False


class ReportItem(BaseModel):
    row: Optional[int] = None
    column: Optional[str] = None
    issue: str
    value: Optional[str] = None
    action: str


class ConversionReport(BaseModel):
    summary: ReportSummary
    decoding: DecodingReport = Field(default_factory=DecodingReport)
    warnings: List[ReportItem] = Field(default_factory=list)
    errors: List[ReportItem] = Field(default_factory=list)


class ConvertResponse(BaseModel):
    converted_csv: ConvertedCsv
    report: ConversionReport

class HealthResponse(BaseModel):
    ok: bool = True
