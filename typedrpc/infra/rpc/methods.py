"""RPC method registry: maps JSON-RPC method names to their payload shapes."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from typedrpc.models.method import MethodSpec, PayloadKind

logger = logging.getLogger(__name__)


class MethodRegistry:
    """Lookup table of method specs, with structural request checks."""

    def __init__(self, specs: Iterable[MethodSpec] = ()) -> None:
        self._methods: dict[str, MethodSpec] = {}
        for spec in specs:
            self.add(spec)

    @classmethod
    def from_mapping(cls, table: Mapping[str, Mapping]) -> MethodRegistry:
        """Build from ``{name: {params, result, required, ...}}`` tables."""
        if not isinstance(table, Mapping):
            raise ValueError("methods must be a table of method tables")
        specs = []
        for name, data in table.items():
            if not isinstance(data, Mapping):
                raise ValueError(f"methods.{name} must be a table")
            specs.append(MethodSpec.from_dict(name, data))
        return cls(specs)

    def add(self, spec: MethodSpec) -> MethodSpec:
        if spec.name in self._methods:
            raise ValueError(f"Method already registered: {spec.name}")
        self._methods[spec.name] = spec
        return spec

    def register(
        self,
        name: str,
        params: PayloadKind | str = PayloadKind.ANY,
        result: PayloadKind | str = PayloadKind.ANY,
        required: tuple[str, ...] = (),
        error_codes: tuple[int, ...] = (),
        description: str = "",
    ) -> MethodSpec:
        """Register a method by name."""
        return self.add(
            MethodSpec(
                name=name,
                params=PayloadKind(params),
                result=PayloadKind(result),
                required=tuple(required),
                error_codes=tuple(error_codes),
                description=description,
            )
        )

    def has_method(self, name: str) -> bool:
        return name in self._methods

    def get(self, name: str) -> MethodSpec:
        try:
            return self._methods[name]
        except KeyError:
            raise ValueError(f"Method not found: {name}") from None

    def names(self) -> list[str]:
        return sorted(self._methods)

    def __contains__(self, name: object) -> bool:
        return name in self._methods

    def __iter__(self) -> Iterator[MethodSpec]:
        return iter(self._methods.values())

    def __len__(self) -> int:
        return len(self._methods)

    def validate_request(self, method: str, params: Any = None) -> MethodSpec:
        """Check a call against its registered shape. Raises ValueError."""
        spec = self.get(method)

        if spec.params is PayloadKind.NONE:
            if params is not None:
                raise ValueError(f"Method {method} takes no params")
            return spec

        if spec.params is PayloadKind.ANY:
            return spec

        if params is None:
            raise ValueError(f"Method {method} requires {spec.params.value} params")
        if not spec.params.accepts(params):
            raise ValueError(
                f"Method {method} expects {spec.params.value} params, "
                f"got {type(params).__name__}"
            )

        missing = [key for key in spec.required if key not in params]
        if missing:
            raise ValueError(f"Method {method} missing params: {', '.join(missing)}")

        logger.debug("Validated params for %s", method)
        return spec
