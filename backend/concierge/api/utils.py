import uuid
from typing import Any, Dict, Iterable, List, Optional
from flask import jsonify
from sqlalchemy.orm import class_mapper


def model_to_dict(model: Any, exclude: Iterable[str] = ()) -> Optional[Dict[str, Any]]:
    """
    Convert a SQLAlchemy model instance to a dictionary of its columns.
    """
    if model is None:
        return None

    data = {}
    for column in class_mapper(model.__class__).columns:
        if column.key in exclude:
            continue
        value = getattr(model, column.key)
        if hasattr(value, 'isoformat'):  # date / datetime
            data[column.key] = value.isoformat()
        elif isinstance(value, uuid.UUID):
            data[column.key] = str(value)
        else:
            data[column.key] = value
    return data


def models_to_list(models: Iterable[Any]) -> List[Dict[str, Any]]:
    return [model_to_dict(m) for m in models]


def api_response(
    data: Any = None,
    message: str = "Success",
    status_code: int = 200,
    error: Optional[str] = None,
    meta: Optional[Dict[str, Any]] = None
):
    """
    Standard API response format.
    """
    response = {
        "success": 200 <= status_code < 300,
        "message": message,
        "data": data
    }

    if error:
        response["error"] = error

    if meta:
        response["meta"] = meta

    return jsonify(response), status_code
