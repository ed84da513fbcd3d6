"""Transformation registry.

Use to register and construct mungebits by name from config.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Optional, Union

from mungepipe.errors import UnknownTransformationError

from .base import MungeBit, MungePiece
from .builtin import clip, drop_columns, encode_categories, impute, standardize

BitBuilder = Callable[[dict[str, Any]], MungeBit]


@dataclass
class StepSpec:
    name: str
    transformation: str
    columns: Optional[Union[Hashable, list[Hashable]]] = None
    params: dict[str, Any] = field(default_factory=dict)


class TransformationRegistry:
    def __init__(self) -> None:
        self._builders: dict[str, BitBuilder] = {}

    def register(self, name: str, builder: BitBuilder) -> None:
        if name in self._builders:
            raise ValueError(f"Transformation already registered: {name}")
        self._builders[name] = builder

    def names(self) -> list[str]:
        return sorted(self._builders)

    def build(self, spec: StepSpec) -> MungePiece:
        """Build a fresh, untrained mungepiece for one step."""
        if spec.transformation not in self._builders:
            available = ", ".join(self.names()) or "(none)"
            raise UnknownTransformationError(
                f"Unknown transformation: {spec.transformation} (available: {available})",
                piece=spec.name,
            )
        bit = self._builders[spec.transformation](spec.params)
        return MungePiece(bit, train_args=(spec.columns,), name=spec.name)

    def build_all(self, specs: list[StepSpec]) -> list[MungePiece]:
        return [self.build(spec) for spec in specs]


def parse_step_specs(config: dict[str, Any]) -> list[StepSpec]:
    steps = config.get("pipeline", {}).get("steps", [])
    specs: list[StepSpec] = []
    for step in steps:
        transformation = step.get("transformation")
        if not transformation:
            raise ValueError("Pipeline step missing transformation")
        specs.append(
            StepSpec(
                name=step.get("name") or transformation,
                transformation=transformation,
                columns=step.get("columns"),
                params=step.get("params", {}),
            )
        )
    return specs


def build_default_registry() -> TransformationRegistry:
    registry = TransformationRegistry()
    registry.register("standardize", standardize)
    registry.register("impute", impute)
    registry.register("clip", clip)
    registry.register("encode_categories", encode_categories)
    registry.register("drop_columns", drop_columns)
    return registry


def build_mungepieces(specs: list[StepSpec]) -> list[MungePiece]:
    """Build named mungepieces for steps using the default registry."""
    return build_default_registry().build_all(specs)


def build_pipeline_from_config(config: Any) -> list[MungePiece]:
    """Build mungepieces from an AppConfig or an equivalent plain dict."""
    if hasattr(config, "model_dump"):
        config = config.model_dump()
    return build_mungepieces(parse_step_specs(config))
