"""Shared model configuration for wire-facing schemas.

Attributes are snake_case in Python; JSON output uses the camelCase names
consumers of the report expect (``model_dump(by_alias=True)``).
"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Immutable model serialised with camelCase aliases."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }
