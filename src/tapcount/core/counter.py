"""
Counter Entity

The single piece of state the service owns: the total number of taps.
"""

import json
import math
from typing import Any

from pydantic import BaseModel, Field


class Counter(BaseModel):
    """Persisted click counter."""

    count: int = Field(default=0, ge=0)

    @classmethod
    def from_payload(cls, payload: Any) -> "Counter":
        """
        Build a counter from a decoded JSON document.

        Anything that is not an object with a numeric ``count`` yields a zero
        counter. Floats are truncated and negative values clamp to 0.
        """
        if not isinstance(payload, dict):
            return cls()

        value = payload.get("count")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return cls()
        if isinstance(value, float) and not math.isfinite(value):
            return cls()

        return cls(count=max(int(value), 0))

    def to_json(self) -> str:
        return json.dumps(self.model_dump(), indent=2)
