# =============================================
# jobboard/schemas/base.py
# =============================================
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel
from typing import Any, Type, TypeVar

ModelT = TypeVar("ModelT", bound=BaseModel)

class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

class MessageResponse(BaseModel):
    """Plain confirmation payload"""
    message: str

def parse_body(model: Type[ModelT], payload: Any) -> ModelT:
    """
    Validate a raw request body once the target entity has been loaded and
    authorized. A missing body counts as ``{}``; failures get the same 400
    envelope as FastAPI's own body validation.
    """
    try:
        return model.model_validate({} if payload is None else payload)
    except PydanticValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))
