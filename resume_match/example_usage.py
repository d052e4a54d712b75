"""
Example usage of the keyword-based resume matching system.

Run this file to see the system in action:
    python -m resume_match.example_usage

Set OPENAI_API_KEY to also run the alternate LLM strategy.
"""

import logging
import os

from resume_match import extract, extract_and_score, match_multiple_jobs
from resume_match.errors import AnalysisError
from resume_match.llm_scorer import score_with_llm
from resume_match.models import LLMSettings

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

# Sample job description
JOB_DESCRIPTION = """
Backend Engineer - Payments Platform

We are a fintech company building payment infrastructure for ecommerce.

Requirements:
- 3+ years with Python and Django or FastAPI
- PostgreSQL and Redis in production
- Docker and Kubernetes on AWS
- Clear communication and collaboration with product teams
- Mentoring junior engineers

Nice to have: Kafka, Terraform, compliance experience
"""

# Sample resume
RESUME = """
Jordan Lee
Software Engineer

SKILLS
Python, Django, Flask, PostgreSQL, MySQL, Docker, AWS, Git, Linux

EXPERIENCE
Software Engineer | ShopCart | 2021-2024
- Built order APIs with Django and PostgreSQL for an ecommerce marketplace
- Moved services to Docker containers on AWS
- Led code reviews and mentoring for two interns

Junior Developer | DataWorks | 2019-2021
- Automated reporting in Pyhton and pandas
- Strong communication with analytics stakeholders
"""


def example_basic_matching():
    """Example 1: Basic resume-job matching."""
    print("\n" + "="*80)
    print("EXAMPLE 1: Basic Matching")
    print("="*80)

    result = extract_and_score(RESUME, JOB_DESCRIPTION)

    print(f"\n📊 MATCH RESULT")
    print(f"{'='*80}")
    print(f"Overall Match: {result.score}%")
    print(f"\nCategory Breakdown:")
    for category, percent in result.breakdown.items():
        bar = "█" * int(percent / 5)  # Visual bar
        print(f"  {category.capitalize():15} {percent:5.1f}% {bar}")

    print(f"\n📋 Details:")
    for detail in result.details:
        print(f"  {detail}")

    if result.missing:
        print(f"\nMissing from resume:")
        for category, terms in result.missing.items():
            print(f"  {category}: {', '.join(terms)}")

    print(f"{'='*80}\n")


def example_extracted_terms():
    """Example 2: Inspect extracted terms."""
    print("\n" + "="*80)
    print("EXAMPLE 2: Extracted Terms")
    print("="*80)

    for label, text in (("Job", JOB_DESCRIPTION), ("Resume", RESUME)):
        terms = extract(text)
        print(f"\n{label}:")
        for category, found in terms.items():
            if category != "other":
                print(f"  {category:10} {', '.join(found) or '-'}")

    print(f"{'='*80}\n")


def example_multiple_jobs():
    """Example 3: Match against multiple jobs."""
    print("\n" + "="*80)
    print("EXAMPLE 3: Multiple Job Matching")
    print("="*80)

    jobs = [
        JOB_DESCRIPTION,
        "Frontend Engineer: React, TypeScript, GraphQL, CSS and presentation skills",
        "Data Engineer: Python, Spark, Hadoop, Kafka and pandas for healthcare analytics",
    ]

    print(f"\nMatching resume against {len(jobs)} job postings...")
    results = match_multiple_jobs(jobs, RESUME)

    print(f"\n📊 RESULTS (Sorted by Match %)")
    print(f"{'='*80}")
    for i, result in enumerate(results, 1):
        print(f"\n#{i} - Job {result['job_index']} - Match: {result['score']}%")
        for detail in result["details"]:
            print(f"  {detail}")

    print(f"{'='*80}\n")


def example_llm_scoring():
    """Example 4: Alternate LLM strategy."""
    print("\n" + "="*80)
    print("EXAMPLE 4: LLM Scoring")
    print("="*80)

    settings = LLMSettings(api_key=os.getenv("OPENAI_API_KEY"))
    try:
        result = score_with_llm(RESUME, JOB_DESCRIPTION, settings)
    except AnalysisError as e:
        print(f"\n❌ LLM scoring failed: {e}")
        return

    print(f"\nLLM Match: {result.score}%")
    for line in result.details:
        print(f"  {line}")

    print(f"{'='*80}\n")


def main():
    """Run all examples."""
    print("\n" + "="*80)
    print("KEYWORD RESUME MATCHING SYSTEM - EXAMPLES")
    print("="*80)

    example_basic_matching()
    example_extracted_terms()
    example_multiple_jobs()

    if os.getenv("OPENAI_API_KEY"):
        example_llm_scoring()
    else:
        print("OPENAI_API_KEY not set, skipping LLM example")


if __name__ == "__main__":
    main()
