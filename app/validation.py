"""Schema validation used by the services before any read or write."""

from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError as PydanticValidationError

from .errors import ValidationError, format_errors

M = TypeVar("M", bound=BaseModel)


def validate(schema: Type[M], data: Mapping[str, Any] | BaseModel) -> M:
    """
    Validate ``data`` against ``schema``.

    Args:
        schema (type[BaseModel]): Pydantic model describing the request.
        data (Mapping | BaseModel): Raw request payload or an already parsed
            model. Fields not sent by the caller stay unset on the result.

    Raises:
        ValidationError: If any constraint is violated; the message lists
            every offending field.

    Returns:
        BaseModel: Instance of ``schema``.
    """
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(format_errors(exc.errors())) from exc
