"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation and self-contained documentation (Field) without coupling
  the core to I/O libraries.
- `Command` is a tagged union: the `method` literal picks the variant.

Note:
- These models describe *what* the user asked for, not *how* it is sent.
"""

from __future__ import annotations

from typing import Annotated, Iterable, Literal, Union

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class KvPair(BaseModel):
    """A `key=value` token supplied as a POST body field."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Body field name (may be empty).")
    value: str = Field(..., description="Body field value, always a string.")


class GetCommand(BaseModel):
    """`get <url>`."""

    model_config = ConfigDict(frozen=True)

    method: Literal["GET"] = "GET"
    url: str = Field(..., min_length=1, description="Validated absolute URL.")


class PostCommand(BaseModel):
    """`post <url> [key=value ...]`."""

    model_config = ConfigDict(frozen=True)

    method: Literal["POST"] = "POST"
    url: str = Field(..., min_length=1, description="Validated absolute URL.")
    body: list[KvPair] = Field(
        default_factory=list,
        description="Body fields in command-line order.",
    )


Command = Annotated[Union[GetCommand, PostCommand], Field(discriminator="method")]


def body_map(pairs: Iterable[KvPair]) -> dict[str, str]:
    """Assemble KV pairs into a JSON object; later duplicates win."""

    body: dict[str, str] = {}
    for pair in pairs:
        body[pair.key] = pair.value
    return body
