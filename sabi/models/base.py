"""Shared model configuration and boundary validation."""

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from sabi.utils.errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class CamelModel(BaseModel):
    """Model serialized with camelCase keys on the wire, snake_case in Python and storage."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


def blank_to_none(value: Any) -> Any:
    """Form posts send "" for cleared optional numbers."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


def parse_input(model_cls: type[ModelT], payload: Any) -> ModelT:
    """
    Validate a request payload into an input model.

    Raises ValidationError naming the first offending field.
    """
    if not isinstance(payload, dict):
        raise ValidationError(None, "Request body must be a JSON object")
    try:
        return model_cls.model_validate(payload)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        message = first["msg"]
        # Custom validators raise ValueError; drop pydantic's prefix
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        raise ValidationError(field, message) from e
