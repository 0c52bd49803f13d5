"""
Descriptor records used to register commands and subtrees.

Descriptors carry the display text and caller payload of a node. The
resolution engines only ever read `name`; everything else is passed
through untouched to the help renderer or back to the caller.
"""

from pydantic import BaseModel, Field, field_validator

from cmdtree.core.types import Payload


class NodeDescriptor(BaseModel):
    """
    Base descriptor for anything registered into a tree.

    Params:
        name: Key the node is looked up by; no whitespace of any kind, no quotes
        brief: One-line text shown in a command listing
        description: Long text shown with node help
        usage: Usage hint text
        payload: Opaque caller data, e.g. a handler reference
    """

    name: str = Field(min_length=1)
    brief: str = ""
    description: str = ""
    usage: str = ""
    payload: Payload = None

    @field_validator("name")
    @classmethod
    def _name_is_single_token(cls, value: str) -> str:
        if any(c.isspace() or c == '"' for c in value):
            raise ValueError("name must not contain whitespace or quotes")
        return value


class CommandDescriptor(NodeDescriptor):
    """Describes a single command within a command tree."""

    pass


class TreeDescriptor(NodeDescriptor):
    """Describes a command tree or subtree."""

    pass
