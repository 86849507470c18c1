"""
Tests for the shared Agent: tool loop, output validation, error wrapping.
"""
import pytest
from google.genai import errors as genai_errors
from google.genai import types

import config
from Agents.Agent import Agent, create_client
from Agents.tools import ToolRegistry, EXTRACT_REASONING_TOOL
from errors import ModelInvocationError, ValidationError
from models.detection import FakeNewsAssessment, Verdict

from conftest import FakeResponse, json_response, tool_call_response

ASSESSMENT = {"result": "Fake", "score": 0.9, "cleaned_input": "Cats can fly."}


def _agent(client, tools=None):
    return Agent(client=client, system_prompt="sys", top_p=0.9, top_k=40, temperature=0.1, tools=tools)


def test_json_mode_without_tools(fake_client):
    agent = _agent(fake_client.script(json_response(ASSESSMENT)))

    response = agent.generate_structured("prompt", FakeNewsAssessment)

    assert response.data.result == Verdict.FAKE
    assert response.tool_calls == []
    sent = fake_client.models.calls[0]
    assert sent['model'] == config.LLM_MODEL
    assert sent['config'].response_mime_type == 'application/json'
    assert sent['config'].tools is None


def test_tool_loop_feeds_result_back(fake_client):
    fake_client.script(
        tool_call_response("extract_reasoning", article="Cats can fly.", is_fake=True),
        json_response(ASSESSMENT),
    )
    agent = _agent(fake_client, ToolRegistry([EXTRACT_REASONING_TOOL]))

    response = agent.generate_structured("prompt", FakeNewsAssessment)

    assert [c.name for c in response.tool_calls] == ["extract_reasoning"]
    assert response.tool_calls[0].output.startswith("The article is fake")

    first, second = fake_client.models.calls
    assert first['config'].response_mime_type is None
    assert first['config'].tools[0].function_declarations[0].name == "extract_reasoning"
    # user prompt, model function call, function response
    assert len(second['contents']) == 3
    function_response = second['contents'][2].parts[0].function_response
    assert function_response.name == "extract_reasoning"
    assert function_response.response['result'] == response.tool_calls[0].output


def test_too_many_tool_rounds(fake_client):
    rounds = [tool_call_response("extract_reasoning", article="x", is_fake=True)
              for _ in range(config.MAX_TOOL_ROUNDS + 1)]
    agent = _agent(fake_client.script(*rounds), ToolRegistry([EXTRACT_REASONING_TOOL]))

    with pytest.raises(ModelInvocationError, match="tool rounds"):
        agent.generate_structured("prompt", FakeNewsAssessment)


def test_fenced_json_is_accepted():
    text = "```json\n{\"result\": \"Real\", \"score\": 0.1, \"cleaned_input\": \"ok\"}\n```"

    data = Agent.parse_output(text, FakeNewsAssessment)

    assert data.result == Verdict.REAL


@pytest.mark.parametrize("text", [
    None,
    "   ",
    "not json at all",
    '{"result": "Fake", "score": 0.9}',
    '{"result": "Maybe", "score": 0.9, "cleaned_input": "x"}',
    '{"result": "Fake", "score": 1.7, "cleaned_input": "x"}',
])
def test_non_conforming_output_raises(text):
    with pytest.raises(ValidationError):
        Agent.parse_output(text, FakeNewsAssessment)


def test_api_error_wrapped(fake_client):
    error = genai_errors.APIError(500, {"error": {"message": "backend exploded", "status": "INTERNAL"}})
    agent = _agent(fake_client.script(error))

    with pytest.raises(ModelInvocationError, match="Model API error") as excinfo:
        agent.generate_structured("prompt", FakeNewsAssessment)

    assert excinfo.value.__cause__ is error


def test_transport_error_wrapped(fake_client):
    agent = _agent(fake_client.script(ConnectionError("reset by peer")))

    with pytest.raises(ModelInvocationError, match="reset by peer"):
        agent.generate_structured("prompt", FakeNewsAssessment)


def test_token_usage_accumulates_per_generation(fake_client):
    fake_client.script(
        FakeResponse(function_calls=[types.FunctionCall(name="extract_reasoning",
                                                        args={"article": "a", "is_fake": True})],
                     total_tokens=7),
        json_response(ASSESSMENT, total_tokens=5),
    )
    agent = _agent(fake_client, ToolRegistry([EXTRACT_REASONING_TOOL]))

    agent.generate_structured("prompt", FakeNewsAssessment)

    assert agent.last_token_count == 12


def test_create_client_requires_key(monkeypatch):
    monkeypatch.setattr(config, "GOOGLE_API_KEY", None)

    with pytest.raises(ModelInvocationError, match="GOOGLE_API_KEY"):
        create_client()
