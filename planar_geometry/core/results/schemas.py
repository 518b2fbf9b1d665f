"""
JSON Schema definitions for planar geometry data.

This module defines JSON schemas for validating input/output data structures.
Schemas follow the JSON Schema Draft-07 specification.
"""

from typing import Dict, Any, List, Optional
import json


# ============================================================================
# Input Schemas
# ============================================================================

POINT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Point",
    "description": "A point in the plane",
    "type": "object",
    "properties": {
        "x": {
            "type": "number",
            "description": "X coordinate"
        },
        "y": {
            "type": "number",
            "description": "Y coordinate"
        }
    },
    "required": ["x", "y"]
}

POLYGON_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "Polygon",
    "description": "A simple polygon as an implicitly closed ring of vertices",
    "type": "object",
    "properties": {
        "vertices": {
            "type": "array",
            "description": "Ordered [x, y] pairs; the first vertex may be repeated at the end",
            "minItems": 3,
            "items": {
                "type": "array",
                "items": {"type": "number"},
                "minItems": 2,
                "maxItems": 2
            }
        }
    },
    "required": ["vertices"]
}

EVALUATION_OPTIONS_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "EvaluationOptions",
    "description": "Configuration options for polygon evaluation",
    "type": "object",
    "properties": {
        "distance_mode": {
            "type": "string",
            "enum": ["boundary", "region"],
            "default": "boundary"
        },
        "boundary_tolerance": {
            "type": "number",
            "minimum": 0,
            "default": 0.0
        }
    }
}

EVALUATION_REQUEST_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "EvaluationRequest",
    "description": "A point, a polygon and optional evaluation options",
    "type": "object",
    "properties": {
        "point": {"type": ["object", "array"]},
        "polygon": {"type": ["object", "array"]},
        "options": {"type": "object"}
    },
    "required": ["point", "polygon"],
    "definitions": {
        "point": POINT_SCHEMA,
        "polygon": POLYGON_SCHEMA,
        "options": EVALUATION_OPTIONS_SCHEMA
    }
}


# ============================================================================
# Output Schemas
# ============================================================================

EVALUATION_RESULT_SCHEMA: Dict[str, Any] = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "title": "EvaluationResult",
    "description": "Area, distance and containment, or an error message",
    "type": "object",
    "properties": {
        "metadata": {
            "type": "object",
            "properties": {
                "library_version": {"type": "string"},
                "timestamp": {"type": "string", "format": "date-time"}
            }
        },
        "evaluation": {
            "type": "object",
            "properties": {
                "success": {"type": "boolean"},
                "distance_mode": {"type": "string"},
                "num_vertices": {"type": "integer"},
                "error_message": {"type": ["string", "null"]},
                "messages": {"type": "array", "items": {"type": "string"}}
            },
            "required": ["success"]
        },
        "values": {
            "type": "object",
            "properties": {
                "area": {"type": ["number", "null"]},
                "distance": {"type": ["number", "null"]},
                "contains": {"type": ["boolean", "null"]}
            }
        }
    },
    "required": ["metadata", "evaluation", "values"]
}


# ============================================================================
# Validation Functions
# ============================================================================

def validate_json(data: Dict[str, Any], schema: Dict[str, Any]) -> List[str]:
    """
    Validate JSON data against a schema.

    Checks required fields, types, numeric bounds, enums and array lengths
    of top-level properties.

    Args:
        data: Dictionary to validate
        schema: JSON schema to validate against

    Returns:
        List of validation error messages (empty if valid)
    """
    if not isinstance(data, dict):
        return [f"Expected an object, got {type(data).__name__}"]

    errors = []

    # Check required fields
    required = schema.get("required", [])
    for field in required:
        if field not in data:
            errors.append(f"Missing required field: {field}")

    # Check types
    properties = schema.get("properties", {})
    for field, value in data.items():
        if field not in properties:
            continue
        prop_schema = properties[field]
        expected_type = prop_schema.get("type")
        if expected_type and not _check_type(value, expected_type):
            errors.append(f"Field '{field}' has wrong type: expected {expected_type}")
            continue

        if "enum" in prop_schema and value not in prop_schema["enum"]:
            errors.append(f"Field '{field}' must be one of {prop_schema['enum']}")

        # Check minimum/maximum
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            if "minimum" in prop_schema and value < prop_schema["minimum"]:
                errors.append(f"Field '{field}' is below minimum: {prop_schema['minimum']}")
            if "maximum" in prop_schema and value > prop_schema["maximum"]:
                errors.append(f"Field '{field}' is above maximum: {prop_schema['maximum']}")

        if isinstance(value, list):
            if "minItems" in prop_schema and len(value) < prop_schema["minItems"]:
                errors.append(f"Field '{field}' needs at least {prop_schema['minItems']} items")
            items_schema = prop_schema.get("items")
            if items_schema:
                for i, item in enumerate(value):
                    errors.extend(
                        f"Field '{field}'[{i}]: {msg}" for msg in _validate_item(item, items_schema)
                    )

    return errors


def _validate_item(item: Any, schema: Dict[str, Any]) -> List[str]:
    """Validate one array item (type, nested item types, length)."""
    expected_type = schema.get("type")
    if expected_type and not _check_type(item, expected_type):
        return [f"wrong type: expected {expected_type}"]

    errors = []
    if isinstance(item, list):
        if "minItems" in schema and len(item) < schema["minItems"]:
            errors.append(f"needs at least {schema['minItems']} items")
        if "maxItems" in schema and len(item) > schema["maxItems"]:
            errors.append(f"allows at most {schema['maxItems']} items")
        inner = schema.get("items", {}).get("type")
        if inner and not all(_check_type(v, inner) for v in item):
            errors.append(f"items must be {inner}")
    return errors


def _check_type(value: Any, expected_type: Any) -> bool:
    """Check if value matches expected JSON schema type(s)."""
    if isinstance(expected_type, list):
        return any(_check_type(value, t) for t in expected_type)

    # bool is a subclass of int but is not a JSON number
    if expected_type in ("number", "integer") and isinstance(value, bool):
        return False

    type_map = {
        "string": str,
        "number": (int, float),
        "integer": int,
        "boolean": bool,
        "array": list,
        "object": dict,
        "null": type(None)
    }

    if expected_type in type_map:
        return isinstance(value, type_map[expected_type])

    return True


def get_schema(schema_name: str) -> Optional[Dict[str, Any]]:
    """
    Get a schema by name.

    Args:
        schema_name: Name of the schema (e.g., 'point', 'polygon', 'result')

    Returns:
        Schema dictionary or None if not found
    """
    return _ALL_SCHEMAS.get(schema_name)


def export_schemas(output_path: str) -> None:
    """
    Export all schemas to a JSON file.

    Args:
        output_path: Path to write the schemas file
    """
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(_ALL_SCHEMAS, f, indent=2)


_ALL_SCHEMAS: Dict[str, Dict[str, Any]] = {
    "point": POINT_SCHEMA,
    "polygon": POLYGON_SCHEMA,
    "options": EVALUATION_OPTIONS_SCHEMA,
    "request": EVALUATION_REQUEST_SCHEMA,
    "result": EVALUATION_RESULT_SCHEMA,
}
