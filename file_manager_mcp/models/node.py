"""Tree nodes of the in-memory namespace."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    DIRECTORY = "directory"
    FILE = "file"


class File(BaseModel):
    """A leaf node holding an opaque blob. Writes append to ``contents``."""

    kind: Literal[NodeKind.FILE] = NodeKind.FILE
    contents: bytes = b""


class Directory(BaseModel):
    """An inner node. Children are keyed by name; names never contain "/"."""

    kind: Literal[NodeKind.DIRECTORY] = NodeKind.DIRECTORY
    children: dict[str, Node] = Field(default_factory=dict)


Node = Annotated[Union[Directory, File], Field(discriminator="kind")]

Directory.model_rebuild()
