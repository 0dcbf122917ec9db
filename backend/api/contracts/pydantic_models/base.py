"""
Base Pydantic model for all API param schemas.

Key features:
- frozen=True: Immutable after normalization (prevents downstream mutation)
- populate_by_name=True: Accept both alias and field name
- extra='ignore': Ignore undeclared fields (safe)
- strings are NOT stripped: month names must match exactly, and search text
  is matched literally
"""

from pydantic import BaseModel, ConfigDict


class BaseParamsModel(BaseModel):
    """
    Base model for all API param schemas.

    Month is carried through as the raw string; validation against the
    canonical names happens in services.month_resolver so every entry point
    (HTTP, CLI, direct service calls) fails the same way.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore',
    )


class CamelResponseModel(BaseModel):
    """Base for response models; dump with model_dump(by_alias=True, mode='json')."""
    model_config = ConfigDict(
        populate_by_name=True,
    )
