"""
LLM Scoring Module

Alternate scoring strategy: asks a hosted chat model (PhiData + OpenAI) for a
match percentage and free-text analysis. The response is unstructured; the
first percentage found is taken as the score. This path is kept separate
from the deterministic keyword scorer.
"""

import logging
import re
from typing import Any, Dict, List, Tuple

from phi.agent import Agent
from phi.model.openai import OpenAIChat

from .config import LLM_DEFAULT_SCORE
from .errors import LLMScoringError, MissingCredentialsError
from .models import LLMSettings, MatchResult

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an expert recruiter analyzing resume matches. "
    "Provide a match percentage and detailed analysis."
)

_PERCENTAGE_PATTERN = re.compile(r"(\d+)%")


def get_model_config(settings: LLMSettings) -> Dict[str, Any]:
    """
    Get model configuration with temperature support check.
    Some models don't support custom temperature.
    """
    config = {
        "id": settings.model_name,
        "api_key": settings.api_key,
        "max_tokens": settings.max_tokens,
    }

    models_without_temperature = ["o1", "o1-mini", "o1-preview", "gpt-5-mini", "gpt-5"]

    model_lower = settings.model_name.lower()
    supports_temperature = not any(no_temp in model_lower for no_temp in models_without_temperature)

    if supports_temperature:
        config["temperature"] = settings.temperature

    return config


def build_scoring_agent(settings: LLMSettings) -> Agent:
    """Build PhiData agent for resume/job match analysis."""
    return Agent(
        name="Match Analyst",
        description=SYSTEM_PROMPT,
        model=OpenAIChat(**get_model_config(settings)),
        markdown=False,
    )


def build_prompt(resume_text: str, job_text: str) -> str:
    return (
        "Please analyze this resume against the job description.\n"
        "Provide a match percentage and list specific matching skills and qualifications.\n"
        f"Resume: {resume_text}\n"
        f"Job Description: {job_text}"
    )


def parse_llm_response(text: str) -> Tuple[int, List[str]]:
    """
    Pull a score and explanation lines out of a free-text response.

    The first "<digits>%" is the score, clamped to [0, 100]; without one the
    score is LLM_DEFAULT_SCORE. Every non-empty line becomes a detail.
    """
    text = text or ""
    match = _PERCENTAGE_PATTERN.search(text)
    score = int(match.group(1)) if match else LLM_DEFAULT_SCORE
    score = max(0, min(100, score))

    details = [line.strip() for line in text.split("\n") if line.strip()]
    return score, details


def _response_text(response: Any) -> str:
    if hasattr(response, "content"):
        return "" if response.content is None else str(response.content)
    if hasattr(response, "messages") and response.messages:
        last_msg = response.messages[-1]
        return str(last_msg.content if hasattr(last_msg, "content") else last_msg)
    return str(response)


def score_with_llm(
    resume_text: str,
    job_text: str,
    settings: LLMSettings
) -> MatchResult:
    """
    Score a resume against a job description with a chat model.

    Args:
        resume_text: Full resume text
        job_text: Full job description text
        settings: Model name, credential and retry count

    Returns:
        MatchResult with strategy "llm"

    Raises:
        MissingCredentialsError: If settings carry no API key
        LLMScoringError: If every attempt fails
    """
    if not settings or not settings.api_key:
        raise MissingCredentialsError("An OpenAI API key is required for LLM scoring")

    agent = build_scoring_agent(settings)
    prompt = build_prompt(resume_text, job_text)
    max_retries = settings.max_retries

    for attempt in range(max_retries):
        try:
            logger.info(f"LLM scoring attempt {attempt + 1}/{max_retries}")
            response_text = _response_text(agent.run(prompt))
            logger.debug(f"Raw LLM response: {response_text[:500]}...")

            score, details = parse_llm_response(response_text)
            logger.info(f"LLM match score: {score}%")
            return MatchResult(score=score, details=details, strategy="llm")

        except Exception as e:
            logger.warning(f"LLM scoring attempt {attempt + 1} failed: {e}")
            if attempt == max_retries - 1:
                raise LLMScoringError(f"LLM scoring failed after {max_retries} attempts: {e}") from e

    raise LLMScoringError("LLM scoring failed")
