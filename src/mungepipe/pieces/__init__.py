"""Mungebits, mungepieces and built-in transformations."""

from .base import MungeBit, MungePiece
from .builtin import clip, drop_columns, encode_categories, impute, standardize
from .columns import column_transformation, multi_column_transformation, resolve_columns
from .errors import FittedStatistics, FittedVocabulary, NotTrainedError
from .parse import parse_mungepiece
from .registry import (
    StepSpec,
    TransformationRegistry,
    build_default_registry,
    build_mungepieces,
    build_pipeline_from_config,
    parse_step_specs,
)

__all__ = [
    "MungeBit",
    "MungePiece",
    "column_transformation",
    "multi_column_transformation",
    "resolve_columns",
    "parse_mungepiece",
    "FittedStatistics",
    "FittedVocabulary",
    "NotTrainedError",
    "clip",
    "drop_columns",
    "encode_categories",
    "impute",
    "standardize",
    "StepSpec",
    "TransformationRegistry",
    "build_default_registry",
    "build_mungepieces",
    "build_pipeline_from_config",
    "parse_step_specs",
]
