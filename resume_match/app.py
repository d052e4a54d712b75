from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, File, Form, Header, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from .config import LLM_CONFIG, MAX_UPLOAD_BYTES
from .documents import extract_text, guess_mime_type
from .errors import AnalysisError, UnsupportedDocumentError
from .matcher import STRATEGIES, analyze_texts
from .models import LLMSettings, MatchResponse, Settings

logger = logging.getLogger(__name__)

load_dotenv()

app = FastAPI(title="Resume Match API", version="1.0.0")


def get_settings() -> Settings:
    return Settings(
        llm=LLMSettings(
            api_key=os.getenv("OPENAI_API_KEY"),
            model_name=os.getenv("OPENAI_MODEL", LLM_CONFIG["model"]),
            temperature=float(os.getenv("LLM_TEMPERATURE", str(LLM_CONFIG["temperature"]))),
            max_tokens=int(os.getenv("LLM_MAX_TOKENS", str(LLM_CONFIG["max_tokens"]))),
            max_retries=int(os.getenv("LLM_MAX_RETRIES", str(LLM_CONFIG["max_retries"]))),
        ),
        max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(MAX_UPLOAD_BYTES))),
    )


def _mime_type(upload: UploadFile) -> str:
    # Browsers often send application/octet-stream; trust the extension then
    content_type = (upload.content_type or "").split(";")[0].strip().lower()
    if content_type and content_type != "application/octet-stream":
        return content_type
    return guess_mime_type(upload.filename)


async def _read_document(upload: UploadFile, settings: Settings) -> str:
    data = await upload.read(settings.max_upload_bytes + 1)
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"{upload.filename} exceeds {settings.max_upload_bytes} bytes"
        )
    return await run_in_threadpool(extract_text, data, _mime_type(upload))


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/api/match", response_model=MatchResponse)
async def match(
    resume: UploadFile = File(...),
    job_description: UploadFile = File(...),
    strategy: str = Form(default="keyword"),
    x_openai_key: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
):
    if strategy not in STRATEGIES:
        raise HTTPException(
            status_code=400,
            detail=f"Unknown strategy {strategy!r}, expected one of {list(STRATEGIES)}"
        )

    llm_settings = settings.llm
    if x_openai_key:
        llm_settings = llm_settings.model_copy(update={"api_key": x_openai_key})

    try:
        resume_text = await _read_document(resume, settings)
        job_text = await _read_document(job_description, settings)
        result = await run_in_threadpool(analyze_texts, resume_text, job_text, strategy, llm_settings)
    except UnsupportedDocumentError as e:
        raise HTTPException(status_code=415, detail=str(e))
    except AnalysisError as e:
        logger.error(f"Analysis failed: {e}", exc_info=True)
        raise HTTPException(status_code=422, detail=f"Analysis failed: {e}")

    logger.info(f"Match for {resume.filename} / {job_description.filename}: {result.score}%")
    return MatchResponse(
        score=result.score,
        details=result.details,
        breakdown=result.breakdown,
        missing=result.missing,
        strategy=result.strategy,
        resume_filename=resume.filename,
        job_filename=job_description.filename,
    )
