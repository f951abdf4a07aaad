from __future__ import annotations

from typing import List, Optional
from pydantic import BaseModel, Field


class CodeResult(BaseModel):
    word: str
    normalized: str
    code: str = Field(examples=["65752682"])
    digits: List[str] = Field(default_factory=list)


class BatchRequest(BaseModel):
    words: List[str] = Field(examples=[["Meier", "Maier", "Mayr"]])


class BatchSummary(BaseModel):
    words: int = 0
    distinct_codes: int = 0
    empty_codes: int = 0


class BatchResponse(BaseModel):
    results: List[CodeResult] = Field(default_factory=list)
    summary: BatchSummary


class DelimiterReport(BaseModel):
    detected: str
    sniffed: bool = False


class EncodingReport(BaseModel):
    detected: Optional[str] = None
    decode_used: str
    decode_fallback: bool = False
    delimiter: Optional[DelimiterReport] = None


class WordListResponse(BatchResponse):
    encoding: EncodingReport


class HealthResponse(BaseModel):
    ok: bool = True
