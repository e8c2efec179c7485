"""Base Pydantic model configuration for httpcontract value types.

All value models inherit from HttpContractBaseModel to ensure consistent behavior:
- Immutability (frozen=True) so values can be shared between threads
- Strict validation (extra="forbid") to catch typos and invalid fields
"""

from pydantic import BaseModel, ConfigDict


class HttpContractBaseModel(BaseModel):
    """Base model for httpcontract value objects.

    Example:
        >>> class Pair(HttpContractBaseModel):
        ...     name: str
        >>> Pair(name="a").name
        'a'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        validate_default=True,
    )
