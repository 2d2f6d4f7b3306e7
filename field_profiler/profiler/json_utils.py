"""
JSON serialization utilities for profile results.

Profiles are built from primitive values, but the numeric engines work on
numpy arrays and the temporal engine on datetimes. These helpers make sure
nothing numpy- or datetime-typed leaks into the serialized output.
"""

import json
import math
from datetime import datetime, date
from typing import Any

import numpy as np


def convert_to_json_serializable(obj: Any) -> Any:
    """
    Recursively convert object to JSON-serializable types.

    Args:
        obj: Object to convert

    Returns:
        JSON-serializable version of object
    """
    if obj is None:
        return None

    # bool must be checked before the numeric branches
    if isinstance(obj, (bool, np.bool_)):
        return bool(obj)

    if isinstance(obj, np.integer):
        return int(obj)

    if isinstance(obj, (float, np.floating)):
        value = float(obj)
        if math.isnan(value) or math.isinf(value):
            return None
        return value

    if isinstance(obj, np.ndarray):
        return [convert_to_json_serializable(item) for item in obj.tolist()]

    if isinstance(obj, (datetime, date)):
        return obj.isoformat()

    if isinstance(obj, dict):
        return {
            key: convert_to_json_serializable(value)
            for key, value in obj.items()
        }

    if isinstance(obj, (list, tuple)):
        return [convert_to_json_serializable(item) for item in obj]

    if isinstance(obj, (set, frozenset)):
        return [convert_to_json_serializable(item) for item in sorted(obj)]

    return obj


def safe_json_dumps(obj: Any, **kwargs) -> str:
    """
    Serialize object to a JSON string after converting it to plain types.

    Args:
        obj: Object to serialize
        **kwargs: Additional arguments to pass to json.dumps

    Returns:
        JSON string
    """
    kwargs.setdefault('indent', 2)
    return json.dumps(convert_to_json_serializable(obj), **kwargs)


def safe_json_dump(obj: Any, fp, **kwargs) -> None:
    """
    Serialize object to a JSON file after converting it to plain types.

    Args:
        obj: Object to serialize
        fp: File pointer to write to
        **kwargs: Additional arguments to pass to json.dump
    """
    kwargs.setdefault('indent', 2)
    json.dump(convert_to_json_serializable(obj), fp, **kwargs)
