"""
Tests for the alternate LLM scoring strategy. The PhiData agent is mocked;
no network calls are made.
"""

import unittest
from unittest.mock import MagicMock, patch

from resume_match.errors import AnalysisError, LLMScoringError, MissingCredentialsError
from resume_match.llm_scorer import (
    build_prompt,
    get_model_config,
    parse_llm_response,
    score_with_llm,
)
from resume_match.models import LLMSettings

SAMPLE_RESPONSE = """Match percentage: 72%

Matching skills:
- Python and Django experience
- AWS deployments

Gaps: no Kubernetes experience (30% of the requirements)
"""


def agent_returning(*outcomes):
    agent = MagicMock()
    responses = []
    for outcome in outcomes:
        if isinstance(outcome, Exception):
            responses.append(outcome)
        else:
            response = MagicMock()
            response.content = outcome
            responses.append(response)
    agent.run.side_effect = responses
    return agent


class TestParseResponse(unittest.TestCase):

    def test_first_percentage_is_score(self):
        score, details = parse_llm_response(SAMPLE_RESPONSE)
        self.assertEqual(score, 72)
        self.assertEqual(details[0], "Match percentage: 72%")
        self.assertEqual(details[-1], "Gaps: no Kubernetes experience (30% of the requirements)")
        self.assertNotIn("", details)

    def test_no_percentage_defaults_to_50(self):
        score, details = parse_llm_response("Strong candidate overall.")
        self.assertEqual(score, 50)
        self.assertEqual(details, ["Strong candidate overall."])

    def test_score_clamped(self):
        score, _ = parse_llm_response("A 150% fit")
        self.assertEqual(score, 100)

    def test_empty_response(self):
        self.assertEqual(parse_llm_response(""), (50, []))
        self.assertEqual(parse_llm_response(None), (50, []))


class TestModelConfig(unittest.TestCase):

    def test_temperature_supported(self):
        config = get_model_config(LLMSettings(api_key="sk-test", model_name="gpt-4"))
        self.assertEqual(config["id"], "gpt-4")
        self.assertEqual(config["api_key"], "sk-test")
        self.assertEqual(config["temperature"], 0.7)
        self.assertEqual(config["max_tokens"], 1000)

    def test_temperature_not_supported(self):
        config = get_model_config(LLMSettings(api_key="sk-test", model_name="o1-mini"))
        self.assertNotIn("temperature", config)

    def test_prompt_contains_both_texts(self):
        prompt = build_prompt("RESUME TEXT", "JOB TEXT")
        self.assertIn("Resume: RESUME TEXT", prompt)
        self.assertIn("Job Description: JOB TEXT", prompt)


class TestScoreWithLLM(unittest.TestCase):

    def test_missing_api_key(self):
        with self.assertRaises(MissingCredentialsError):
            score_with_llm("resume", "job", LLMSettings())
        with self.assertRaises(AnalysisError):
            score_with_llm("resume", "job", None)

    @patch("resume_match.llm_scorer.build_scoring_agent")
    def test_successful_scoring(self, mock_build):
        mock_build.return_value = agent_returning(SAMPLE_RESPONSE)

        result = score_with_llm("resume", "job", LLMSettings(api_key="sk-test"))

        self.assertEqual(result.score, 72)
        self.assertEqual(result.strategy, "llm")
        self.assertIn("- AWS deployments", result.details)

    @patch("resume_match.llm_scorer.build_scoring_agent")
    def test_empty_content_is_empty_response(self, mock_build):
        mock_build.return_value = agent_returning(None)

        result = score_with_llm("resume", "job", LLMSettings(api_key="sk-test"))

        self.assertEqual(result.score, 50)
        self.assertEqual(result.details, [])

    @patch("resume_match.llm_scorer.build_scoring_agent")
    def test_retries_after_failure(self, mock_build):
        agent = agent_returning(RuntimeError("rate limited"), SAMPLE_RESPONSE)
        mock_build.return_value = agent

        result = score_with_llm("resume", "job", LLMSettings(api_key="sk-test", max_retries=3))

        self.assertEqual(result.score, 72)
        self.assertEqual(agent.run.call_count, 2)

    @patch("resume_match.llm_scorer.build_scoring_agent")
    def test_gives_up_after_max_retries(self, mock_build):
        agent = agent_returning(RuntimeError("down"), RuntimeError("still down"))
        mock_build.return_value = agent

        with self.assertRaises(LLMScoringError):
            score_with_llm("resume", "job", LLMSettings(api_key="sk-test", max_retries=2))
        self.assertEqual(agent.run.call_count, 2)


if __name__ == "__main__":
    unittest.main()
