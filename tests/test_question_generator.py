import json
from unittest import mock

import pytest

from classes.question_generator import (
    MOCK_QUESTIONS,
    SYSTEM_INSTRUCTION,
    QuestionGenerator,
    build_prompt,
)
from utils.errors import ConfigurationError, MalformedResponseError, UpstreamAPIError
from utils.openrouter import OpenRouterClient
from tests.helpers import SINGLE_QUESTION_REPLY, error_response, model_response


@pytest.mark.parametrize("count", [1, 3, 25])
def test_mock_mode_returns_fixed_sample_without_network(count):
    client = mock.Mock()
    generator = QuestionGenerator(api_key=None, use_mock_data=True, client=client)

    questions = generator.generate("Anything at all", count, ["fill_blank"])

    assert [q["type"] for q in questions] == ["mcq", "true_false", "short_answer"]
    assert questions == MOCK_QUESTIONS
    client.complete.assert_not_called()


def test_mock_questions_are_copies():
    generator = QuestionGenerator(use_mock_data=True)
    generator.generate("text")[0]["question"] = "changed"
    assert generator.generate("text")[0]["question"] == "What is the capital of France?"


def test_missing_api_key_is_configuration_error():
    client = mock.Mock()
    generator = QuestionGenerator(api_key="", client=client)

    with pytest.raises(ConfigurationError, match="API key not configured"):
        generator.generate("Some content")
    client.complete.assert_not_called()


def test_prompt_embeds_count_types_content_and_rules():
    prompt = build_prompt("Photosynthesis converts light.", 7, ["mcq", "true_false", "fill_blank"])

    assert "Generate 7 quiz questions" in prompt
    assert "Question types to include: mcq, true_false, fill_blank" in prompt
    assert "Content: Photosynthesis converts light." in prompt
    assert '"questions"' in prompt
    assert "only two answer options" in prompt
    assert "correct answer in the first position" in prompt
    assert "_____" in prompt
    assert "valid JSON" in prompt


def test_generate_passes_prompt_and_returns_questions():
    client = mock.Mock()
    client.complete.return_value = SINGLE_QUESTION_REPLY
    generator = QuestionGenerator(api_key="key", client=client)

    questions = generator.generate("Some content", 1, ["mcq"])

    assert questions == [
        {"question": "Q", "type": "mcq", "answers": [{"text": "A", "isCorrect": True}]}
    ]
    system, prompt = client.complete.call_args.args
    assert system == SYSTEM_INSTRUCTION
    assert "Some content" in prompt


def test_generate_unescapes_before_parsing():
    client = mock.Mock()
    client.complete.return_value = SINGLE_QUESTION_REPLY.replace(", ", ",\\n")
    generator = QuestionGenerator(api_key="key", client=client)

    assert len(generator.generate("Some content")) == 1


def test_bad_json_is_malformed_response():
    client = mock.Mock()
    client.complete.return_value = "Sure! Here are your questions: {"
    generator = QuestionGenerator(api_key="key", client=client)

    with pytest.raises(MalformedResponseError, match="parse"):
        generator.generate("Some content")


def test_client_sends_openrouter_request(upstream):
    upstream.return_value = model_response(SINGLE_QUESTION_REPLY)
    client = OpenRouterClient("secret", "anthropic/claude-3-haiku", referer="https://example.test")

    assert client.complete("system text", "user text") == SINGLE_QUESTION_REPLY

    url = upstream.call_args.args[0]
    kwargs = upstream.call_args.kwargs
    assert url == "https://openrouter.ai/api/v1/chat/completions"
    assert kwargs["headers"]["Authorization"] == "Bearer secret"
    assert kwargs["headers"]["HTTP-Referer"] == "https://example.test"
    assert kwargs["headers"]["X-Title"] == "QuizGenius AI"
    assert kwargs["json"]["model"] == "anthropic/claude-3-haiku"
    assert kwargs["json"]["response_format"] == {"type": "json_object"}
    assert [m["role"] for m in kwargs["json"]["messages"]] == ["system", "user"]


def test_client_raises_upstream_error_on_failure_status(upstream):
    upstream.return_value = error_response(429)
    client = OpenRouterClient("secret", "some-model")

    with pytest.raises(UpstreamAPIError) as excinfo:
        client.complete("system", "prompt")

    assert excinfo.value.status_code == 429
    assert "rate limited" in excinfo.value.detail


def test_client_wraps_transport_errors(upstream):
    import requests

    upstream.side_effect = requests.ConnectionError("connection refused")
    client = OpenRouterClient("secret", "some-model")

    with pytest.raises(UpstreamAPIError, match="Failed to call OpenRouter API"):
        client.complete("system", "prompt")


def test_client_rejects_body_without_choices(upstream):
    response = model_response("unused")
    response.json.return_value = {"id": "gen-1"}
    upstream.return_value = response
    client = OpenRouterClient("secret", "some-model")

    with pytest.raises(MalformedResponseError):
        client.complete("system", "prompt")


def test_from_config_reads_injected_settings(app):
    app.config["USE_MOCK_DATA"] = True
    generator = QuestionGenerator.from_config(app.config)

    assert generator.use_mock_data is True
    assert generator.api_key == "test-api-key"
    assert generator.client.model == app.config["OPENROUTER_MODEL"]


def test_client_does_not_hold_a_session(upstream):
    upstream.return_value = model_response(SINGLE_QUESTION_REPLY)

    with mock.patch("utils.openrouter.requests.Session") as session_cls:
        client = OpenRouterClient("secret", "some-model")
        client.complete("system", "prompt")

    session_cls.assert_not_called()
    upstream.assert_called_once()
