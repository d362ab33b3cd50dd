"""Base class for the alternatives of the closed unions of the model.

Alternatives are serialized externally tagged: a single-key object whose key names \
the alternative and whose value holds its content, e.g.

    {"Empty": {"black_background": true}}

Alternatives wrapping a single value (declared with `value_field`) hold that value \
directly instead of an object:

    {"Title": "Simple Show"}
"""

from typing import Any, ClassVar

from pydantic import (
    BaseModel,
    ConfigDict,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)


class Variant(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[str]
    """Tag of the alternative, used as the key of the serialized object."""

    value_field: ClassVar[str | None] = None
    """Name of the only field of alternatives that wrap a single value."""

    @model_validator(mode="before")
    @classmethod
    def _untag(cls, data: Any) -> Any:
        if isinstance(data, dict) and len(data) == 1 and cls.kind in data:
            content = data[cls.kind]
            if cls.value_field is not None:
                return {cls.value_field: content}
            return content
        return data

    @model_serializer(mode="wrap")
    def _tag(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        content = handler(self)
        if self.value_field is not None:
            content = content.get(self.value_field)
        return {self.kind: content}


def variant_tag(value: Any) -> str | None:
    """Find the tag of `value`, a serialized alternative or an alternative instance.

    Used as the discriminator of the unions: `None` makes the validation fail with \
    a missing tag error.
    """
    if isinstance(value, dict):
        return next(iter(value)) if len(value) == 1 else None
    return getattr(value, "kind", None)
