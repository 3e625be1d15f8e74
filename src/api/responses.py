"""Response envelopes shared by every route"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from src.app.query.page import PageEnvelope


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def success_response(data: Any = None, message: str = "Success") -> Dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "data": data,
        "timestamp": _timestamp(),
    }


def paginated_response(page: PageEnvelope, message: str = "Success") -> Dict[str, Any]:
    return {
        "success": True,
        "message": message,
        "data": page.items,
        "pagination": page.pagination(),
        "timestamp": _timestamp(),
    }


def error_response(message: str = "Error", errors: Optional[Any] = None) -> Dict[str, Any]:
    body: Dict[str, Any] = {"success": False, "message": message}
    if errors:
        body["errors"] = errors
    body["timestamp"] = _timestamp()
    return body
