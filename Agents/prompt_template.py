"""
Prompt templating: `$name` placeholders filled by explicit field lookup.
"""
import json
from string import Template
from typing import Any, Mapping, Type, Union

from pydantic import BaseModel


def render_prompt(template: str, record: Union[BaseModel, Mapping[str, Any]]) -> str:
    """
    Substitute `$field` / `${field}` placeholders from a record.

    Args:
        template: Prompt text with named placeholders
        record: Pydantic model or mapping providing the values

    Returns:
        Rendered prompt

    Raises:
        ValueError: if a placeholder has no matching field
    """
    fields = record.model_dump(mode='json') if isinstance(record, BaseModel) else dict(record)
    try:
        return Template(template).substitute(fields)
    except KeyError as e:
        raise ValueError(f"Prompt placeholder {e} has no matching field") from e


def schema_instructions(output_model: Type[BaseModel]) -> str:
    """Describe the expected JSON output so it can be appended to a prompt."""
    schema = json.dumps(output_model.model_json_schema(), indent=2)
    return (
        "Return ONLY valid JSON (no prose, no Markdown) conforming to this JSON schema:\n"
        f"{schema}"
    )
