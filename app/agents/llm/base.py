## Base LLM Client Interface
import json
import re
from abc import ABC, abstractmethod
from typing import Any, Type, Union

from loguru import logger
from pydantic import BaseModel, TypeAdapter, ValidationError

from app.agents.llm.errors import SchemaParseError

Schema = Union[Type[BaseModel], TypeAdapter]

STRUCTURED_INSTRUCTIONS = """Your response must be ONLY valid JSON (no markdown, no commentary).
It must conform exactly to this JSON schema:
{schema}
"""

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*(.*?)\s*```$", re.DOTALL)


def _as_adapter(schema: Schema) -> TypeAdapter:
    if isinstance(schema, TypeAdapter):
        return schema
    return TypeAdapter(schema)


def strip_code_fence(text: str) -> str:
    text = text.strip()
    m = _CODE_FENCE.match(text)
    return m.group(1) if m else text


class LLMClient(ABC):
    model: str

    @abstractmethod
    def generate_text(self, * , system: str, user: str, temperature: float = 0.2) -> str:
        raise NotImplementedError

    def generate_structured(self, schema: Schema, * ,
    system: str, user: str, temperature: float = 0.2) -> Any:
        """
        Default strategy: ask model to output JSON only, then validate with
        Pydantic.

        `schema` is either a model class or a TypeAdapter (e.g. for a list of
        models). Output that does not validate raises SchemaParseError; the
        value is never coerced or partially returned.
        """
        adapter = _as_adapter(schema)
        json_schema = json.dumps(adapter.json_schema(), indent=2)
        system = f"{system.rstrip()}\n\n{STRUCTURED_INSTRUCTIONS.format(schema=json_schema)}"

        text = self.generate_text(system=system, user=user,
        temperature=temperature)
        try:
            return adapter.validate_json(strip_code_fence(text))
        except ValidationError as e:
            logger.warning("Model output did not match schema: {} | raw={!r}", e.error_count(), text[:200])
            raise SchemaParseError(f"Model output did not match schema: {e}", raw=text) from e
