"""Method registry entry model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class PayloadKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    ANY = "any"
    NONE = "none"

    def accepts(self, value: Any) -> bool:
        """Structural check of a payload against this kind."""
        if self is PayloadKind.ANY:
            return True
        if self is PayloadKind.NONE:
            return value is None
        if self is PayloadKind.OBJECT:
            return isinstance(value, Mapping)
        return isinstance(value, (list, tuple))


@dataclass(frozen=True)
class MethodSpec:
    """Request/response/error shapes registered for one method name."""

    name: str
    params: PayloadKind = PayloadKind.ANY
    result: PayloadKind = PayloadKind.ANY
    required: tuple[str, ...] = ()  # keys an object payload must carry
    error_codes: tuple[int, ...] = ()  # method-specific codes, informational
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Method name cannot be empty")
        if self.required and self.params is not PayloadKind.OBJECT:
            raise ValueError(
                f"Method {self.name!r}: required keys need an object payload"
            )

    @classmethod
    def from_dict(cls, name: str, data: Mapping) -> MethodSpec:
        return cls(
            name=name,
            params=PayloadKind(data.get("params", "any")),
            result=PayloadKind(data.get("result", "any")),
            required=tuple(data.get("required", ())),
            error_codes=tuple(data.get("error_codes", ())),
            description=data.get("description", ""),
        )

    def to_dict(self) -> dict:
        d: dict = {"params": self.params.value, "result": self.result.value}
        if self.required:
            d["required"] = list(self.required)
        if self.error_codes:
            d["error_codes"] = list(self.error_codes)
        if self.description:
            d["description"] = self.description
        return d
