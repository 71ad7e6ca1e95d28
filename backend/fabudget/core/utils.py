"""
Utility functions for the application.
"""
from typing import Any, Dict, List


def format_response(data: Any) -> Dict[str, Any]:
    """Format a successful API response."""
    return {
        "success": True,
        "data": data
    }


def format_list_response(items: List[Any]) -> Dict[str, Any]:
    """Format a successful collection response."""
    return {
        "success": True,
        "count": len(items),
        "data": items
    }


def format_error(message: str) -> Dict[str, Any]:
    """Format error response."""
    return {
        "success": False,
        "message": message
    }
