import re
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Type

import pydantic
from google import genai
from google.genai import types
from google.genai.errors import APIError

import config
from errors import ModelInvocationError, ValidationError
from Agents.tools import ToolCall, ToolRegistry

logger = logging.getLogger('Agent')

_FENCE_RE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.S)


def create_client(api_key: Optional[str] = None) -> genai.Client:
    """Build the process-wide Gemini client. Call once at startup and pass it around."""
    api_key = api_key or config.GOOGLE_API_KEY
    if not api_key:
        raise ModelInvocationError("GOOGLE_API_KEY is not configured")
    return genai.Client(api_key=api_key)


@dataclass
class AgentResponse:
    """Validated model output plus the tools the model called on the way."""
    data: Any
    tool_calls: List[ToolCall] = field(default_factory=list)


class Agent:
    def __init__(self, client, system_prompt, top_p, top_k, temperature, tools: Optional[ToolRegistry] = None,
                 max_output_tokens=config.MAX_OUTPUT_TOKENS, model=config.LLM_MODEL):
        self.client = client
        self.model = model
        self.tools = tools or ToolRegistry()
        # Gemini rejects JSON mode combined with function calling, so JSON mode only without tools
        self.config = types.GenerateContentConfig(
            temperature=temperature,
            top_p=top_p,
            top_k=top_k,
            system_instruction=system_prompt,
            max_output_tokens=max_output_tokens,
            response_mime_type=None if len(self.tools) else 'application/json',
            tools=self.tools.declarations() or None,
        )
        self.last_token_count = 0

    def generate_text_generation_response(self, contents):
        try:
            response = self.client.models.generate_content(model=self.model, config=self.config, contents=contents)
        except APIError as e:
            logger.error(f"APIError occurred: {str(e)}")
            raise ModelInvocationError(f"Model API error: {e}") from e
        except Exception as e:
            logger.error(f"Model call failed: {str(e)}")
            raise ModelInvocationError(f"Model call failed: {e}") from e

        usage = getattr(response, 'usage_metadata', None)
        if usage is not None and usage.total_token_count:
            self.last_token_count += usage.total_token_count
            logger.debug(f"Total tokens so far: {self.last_token_count}")
        return response

    def generate_structured(self, prompt: str, output_model: Type[pydantic.BaseModel]) -> AgentResponse:
        """
        Run one generation, servicing tool calls until the model answers.

        Args:
            prompt: Fully rendered user prompt
            output_model: Pydantic model the final answer must validate against

        Returns:
            AgentResponse with the validated output and every tool call made

        Raises:
            ModelInvocationError: API failure, undeclared tool, or too many tool rounds
            ValidationError: final answer missing or not conforming to output_model
        """
        self.last_token_count = 0
        contents = [types.Content(role='user', parts=[types.Part.from_text(text=prompt)])]
        tool_calls: List[ToolCall] = []

        for _ in range(config.MAX_TOOL_ROUNDS + 1):
            response = self.generate_text_generation_response(contents)
            function_calls = response.function_calls or []
            if not function_calls:
                break

            contents.append(response.candidates[0].content)
            parts = []
            for function_call in function_calls:
                call = self.tools.invoke(function_call.name, function_call.args)
                tool_calls.append(call)
                parts.append(types.Part.from_function_response(name=call.name, response={'result': call.output}))
            contents.append(types.Content(role='user', parts=parts))
        else:
            raise ModelInvocationError(f"Model did not answer within {config.MAX_TOOL_ROUNDS} tool rounds")

        data = self.parse_output(response.text, output_model)
        return AgentResponse(data=data, tool_calls=tool_calls)

    @staticmethod
    def parse_output(text: Optional[str], output_model: Type[pydantic.BaseModel]):
        """Validate raw model text against output_model. No partial acceptance."""
        if not text or not text.strip():
            raise ValidationError("Model returned no output")

        raw = text.strip()
        match = _FENCE_RE.match(raw)
        if match:
            raw = match.group(1)

        try:
            return output_model.model_validate_json(raw)
        except pydantic.ValidationError as e:
            logger.error(f"Model output failed {output_model.__name__} validation: {e}")
            raise ValidationError(f"Model output does not match {output_model.__name__}: {e}") from e
