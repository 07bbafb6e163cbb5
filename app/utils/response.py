"""
Standard response envelope for the dashboard routes.
"""

from typing import Any


def success_response(data: Any = None, message: str = "Success") -> dict:
    return {"success": True, "data": data, "message": message}
