"""
Shared fixtures: a scripted stand-in for google.genai.Client.
"""
import json

import pytest
from google.genai import types


class FakeResponse:
    """Mimics the parts of GenerateContentResponse the agents read."""

    def __init__(self, text=None, function_calls=None, total_tokens=10):
        self.text = text
        self.function_calls = function_calls or None
        parts = [types.Part(function_call=fc) for fc in (function_calls or [])]
        self.candidates = [types.Candidate(content=types.Content(role='model', parts=parts))]
        self.usage_metadata = types.GenerateContentResponseUsageMetadata(total_token_count=total_tokens)


class FakeModels:
    def __init__(self):
        self.responses = []
        self.calls = []

    def generate_content(self, model, contents, config):
        self.calls.append({'model': model, 'contents': list(contents), 'config': config})
        if not self.responses:
            raise AssertionError("FakeModels ran out of scripted responses")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class FakeClient:
    """Queue responses with `script`; inspect requests via `models.calls`."""

    def __init__(self):
        self.models = FakeModels()

    def script(self, *responses):
        self.models.responses.extend(responses)
        return self


def json_response(payload, **kwargs) -> FakeResponse:
    return FakeResponse(text=json.dumps(payload), **kwargs)


def tool_call_response(name, **args) -> FakeResponse:
    return FakeResponse(function_calls=[types.FunctionCall(name=name, args=args)])


def make_paper(section_count=3, **overrides):
    paper = {
        "title": "Misinformation Dynamics on Social Platforms",
        "abstract": "We study how false claims spread online.",
        "sections": [
            {"title": f"Section {i}", "content": f"Content {i}", "subsections": []}
            for i in range(1, section_count + 1)
        ],
        "references": ["Vosoughi et al. (2018). The spread of true and false news online."],
    }
    paper.update(overrides)
    return paper


@pytest.fixture
def fake_client():
    return FakeClient()
