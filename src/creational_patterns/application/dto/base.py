"""Base DTO class with stable API and clean snake_case format."""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class BaseDTO(BaseModel):
    """
    Base class for all report DTOs.

    Provides a stable to_dict() API so callers (formatters, the CLI) do
    not depend on pydantic details.
    """
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-compatible snake_case dictionary."""
        return self.model_dump(mode="json")

