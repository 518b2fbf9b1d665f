"""Evaluation results and JSON schemas."""

from .evaluation_result import EvaluationResult
from .schemas import (
    POINT_SCHEMA,
    POLYGON_SCHEMA,
    EVALUATION_OPTIONS_SCHEMA,
    EVALUATION_REQUEST_SCHEMA,
    EVALUATION_RESULT_SCHEMA,
    validate_json,
    get_schema,
    export_schemas,
)

__all__ = [
    "EvaluationResult",
    "POINT_SCHEMA",
    "POLYGON_SCHEMA",
    "EVALUATION_OPTIONS_SCHEMA",
    "EVALUATION_REQUEST_SCHEMA",
    "EVALUATION_RESULT_SCHEMA",
    "validate_json",
    "get_schema",
    "export_schemas",
]
