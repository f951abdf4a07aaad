import logging
from pathlib import PurePath
from typing import Any, Dict, List

from fastapi import FastAPI, UploadFile, File, HTTPException, Query
from .config import ALLOWED_UPLOAD_EXTENSIONS, MAX_BATCH_WORDS, MAX_UPLOAD_BYTES, configure_logging
from .models import BatchRequest, BatchResponse, CodeResult, HealthResponse, WordListResponse
from .phonetic import encode_words
from .wordlist import extract_words

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="koelner-phonetik",
    description="Kölner Phonetik codes for fuzzy matching of German names",
    version="0.1.0",
)


def _summary(results: List[Dict[str, Any]]) -> Dict[str, int]:
    codes = [r["code"] for r in results]
    return {
        "words": len(codes),
        "distinct_codes": len(set(c for c in codes if c)),
        "empty_codes": sum(1 for c in codes if not c),
    }


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/code", response_model=CodeResult)
def code(word: str = Query(..., description="Word to encode")):
    return encode_words([word])[0]


@app.post("/code", response_model=BatchResponse)
def code_batch(body: BatchRequest):
    if len(body.words) > MAX_BATCH_WORDS:
        raise HTTPException(status_code=413, detail=f"At most {MAX_BATCH_WORDS} words per request")

    results = encode_words(body.words)
    logger.info("encoded batch of %d words", len(results))
    return {"results": results, "summary": _summary(results)}


@app.post("/code/file", response_model=WordListResponse)
async def code_file(file: UploadFile = File(...)):
    filename = file.filename or ""
    if PurePath(filename).suffix.lower() not in ALLOWED_UPLOAD_EXTENSIONS:
        raise HTTPException(status_code=422, detail="Only .txt and .csv word lists are supported")

    raw = await file.read(MAX_UPLOAD_BYTES + 1)
    if len(raw) > MAX_UPLOAD_BYTES:
        raise HTTPException(status_code=413, detail=f"Upload exceeds {MAX_UPLOAD_BYTES} bytes")

    words, report = extract_words(raw, filename)
    results = encode_words(words)
    logger.info("encoded %d words from %s (%s)", len(results), filename, report["decode_used"])
    return {"results": results, "summary": _summary(results), "encoding": report}
