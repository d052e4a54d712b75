from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import LLM_CONFIG, MAX_UPLOAD_BYTES

# Category name -> matched terms, deduplicated, in first-seen order
TermSet = Dict[str, List[str]]


class Category(BaseModel):
    """A named, weighted group of canonical skill keywords."""
    model_config = ConfigDict(frozen=True)

    name: str
    weight: float = Field(ge=0.0)
    keywords: Tuple[str, ...] = ()

    @field_validator("keywords", mode="before")
    @classmethod
    def normalize_keywords(cls, v):
        # Lowercase, strip and dedupe while keeping declaration order
        return tuple(dict.fromkeys(k.strip().lower() for k in v if k and k.strip()))

    def has_keyword(self, term: str) -> bool:
        return term in self.keywords


class MatchResult(BaseModel):
    score: int = Field(ge=0, le=100)
    details: List[str] = Field(default_factory=list)
    breakdown: Dict[str, float] = Field(
        default_factory=dict,
        description="Percentage of job terms matched, per scored category"
    )
    missing: Dict[str, List[str]] = Field(
        default_factory=dict,
        description="Job terms with no matching resume term, per scored category"
    )
    strategy: str = "keyword"


class LLMSettings(BaseModel):
    model_config = ConfigDict(protected_namespaces=())
    api_key: Optional[str] = None
    model_name: str = LLM_CONFIG["model"]
    temperature: float = LLM_CONFIG["temperature"]
    max_tokens: int = LLM_CONFIG["max_tokens"]
    max_retries: int = Field(default=LLM_CONFIG["max_retries"], ge=1)


class Settings(BaseModel):
    llm: LLMSettings = Field(default_factory=LLMSettings)
    max_upload_bytes: int = MAX_UPLOAD_BYTES


class MatchResponse(BaseModel):
    score: int = Field(ge=0, le=100)
    details: List[str] = Field(default_factory=list)
    breakdown: Dict[str, float] = Field(default_factory=dict)
    missing: Dict[str, List[str]] = Field(default_factory=dict)
    strategy: str
    resume_filename: Optional[str] = None
    job_filename: Optional[str] = None
