"""Base schema classes.

API JSON is camelCase (``parentId``, ``isPublic``, ``userId``) while Python
code stays snake_case; the alias generator bridges the two.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for request schemas. Accepts camelCase or snake_case keys."""
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "protected_namespaces": (),
    }


class CamelORMModel(CamelModel):
    """Base for response schemas built from SQLAlchemy rows or dicts."""
    model_config = {**CamelModel.model_config, "from_attributes": True}


class ErrorResponse(BaseModel):
    """Body of every error response: {"error": "<message>"}."""
    error: str
