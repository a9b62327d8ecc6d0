"""Structured outcome of parsing a trigger's text.

Every trigger yields exactly one of these variants, discriminated on `kind`.
"""

from typing import Annotated, Literal, Union
from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LIMIT = 10


class HelpIntent(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["help"] = "help"


class VersionIntent(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["version"] = "version"


class SummarizeIntent(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["summarize"] = "summarize"
    limit: int = Field(DEFAULT_LIMIT, gt=0)


class QuestionIntent(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal["question"] = "question"
    text: str
    limit: int = Field(DEFAULT_LIMIT, gt=0)


Intent = Annotated[
    Union[HelpIntent, VersionIntent, SummarizeIntent, QuestionIntent],
    Field(discriminator="kind"),
]
