"""
Auxiliary tools the model may call mid-generation.
Each tool is a pure local function registered under a name; the registry
produces the function declarations sent to Gemini and dispatches calls back.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from google.genai import types

from errors import ModelInvocationError

logger = logging.getLogger(__name__)


@dataclass
class ToolParameter:
    type: types.Type
    description: str
    required: bool = True


@dataclass
class Tool:
    """A named local function with a declared input shape."""
    name: str
    description: str
    handler: Callable[..., Any]
    parameters: Dict[str, ToolParameter] = field(default_factory=dict)

    def to_declaration(self) -> types.FunctionDeclaration:
        properties = {
            name: types.Schema(type=param.type, description=param.description)
            for name, param in self.parameters.items()
        }
        required = [name for name, param in self.parameters.items() if param.required]
        return types.FunctionDeclaration(
            name=self.name,
            description=self.description,
            parameters=types.Schema(type=types.Type.OBJECT, properties=properties, required=required),
        )

    def __call__(self, **kwargs) -> Any:
        return self.handler(**kwargs)


@dataclass
class ToolCall:
    """Record of one tool invocation made during a generation."""
    name: str
    args: Dict[str, Any]
    output: Any


class ToolRegistry:
    """Name-keyed table of tools available to a single agent."""

    def __init__(self, tools: Optional[Iterable[Tool]] = None):
        self._tools: Dict[str, Tool] = {}
        for tool in tools or []:
            self.register(tool)

    def register(self, tool: Tool):
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' is already registered")
        self._tools[tool.name] = tool

    def get(self, name: str) -> Optional[Tool]:
        return self._tools.get(name)

    def declarations(self) -> List[types.Tool]:
        if not self._tools:
            return []
        return [types.Tool(function_declarations=[t.to_declaration() for t in self._tools.values()])]

    def invoke(self, name: str, args: Optional[Dict[str, Any]] = None) -> ToolCall:
        tool = self._tools.get(name)
        if tool is None:
            raise ModelInvocationError(f"Model called undeclared tool '{name}'")
        args = dict(args or {})
        try:
            output = tool(**args)
        except TypeError as e:
            raise ModelInvocationError(f"Invalid arguments for tool '{name}': {e}") from e
        logger.info(f"Tool '{name}' invoked")
        return ToolCall(name=name, args=args, output=output)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def __len__(self) -> int:
        return len(self._tools)


# =============================================================================
# TOOL FUNCTIONS
# =============================================================================
def decide_how_to_incorporate_query(query: str) -> str:
    """Strategy for weaving the user's topic into the paper."""
    return f"Focus on {query} as the core argument"


def extract_reasoning(article: str, is_fake: bool) -> str:
    """Reasoning string for a classification the model has already made."""
    return f"The article is {'fake' if is_fake else 'real'} because of these reasons found in the article: {article}"


INCORPORATION_STRATEGY_TOOL = Tool(
    name="decide_how_to_incorporate_query",
    description=(
        "Determines how to best incorporate the user query into the research paper. "
        "For example, by making the query a focus, or by addressing and disproving the query."
    ),
    handler=decide_how_to_incorporate_query,
    parameters={
        "query": ToolParameter(types.Type.STRING, "The user provided research topic."),
    },
)

EXTRACT_REASONING_TOOL = Tool(
    name="extract_reasoning",
    description="Extract the parts of the article that most affect the overall determination of whether the article is fake.",
    handler=extract_reasoning,
    parameters={
        "article": ToolParameter(types.Type.STRING, "The article text"),
        "is_fake": ToolParameter(types.Type.BOOLEAN, "A boolean representing whether the article is fake or not"),
    },
)
