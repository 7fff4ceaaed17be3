"""Models for primitive draw operations.

A `DrawCall` captures one primitive issued against a drawing surface. The
recording surface stores them so hosts can replay a render pass against
their own backend, and tests can inspect exactly what was drawn.
"""

from typing import Any, Literal

from pydantic import BaseModel, Field

Primitive = Literal["text", "circle", "line"]
TextAnchor = Literal["start", "middle", "end"]


class DrawCall(BaseModel):
    """One primitive draw operation.

    Attributes:
        primitive: Kind of primitive ("text", "circle" or "line").
        params: Keyword arguments the primitive was called with.
    """

    primitive: Primitive
    params: dict[str, Any] = Field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.params[key]
