## Pydantic Schemas for Structured Output
from typing import List

from pydantic import BaseModel, ConfigDict, Field, StrictStr, TypeAdapter


class Team(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )

    team_name: StrictStr = Field(alias="teamName", min_length=1)
    city: StrictStr = Field(min_length=1)


# Schema descriptor handed to LLMClient.generate_structured
TEAM_LIST = TypeAdapter(List[Team])
