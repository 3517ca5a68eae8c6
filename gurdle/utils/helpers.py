"""
Helper Functions

Contains utility functions used throughout the application.
"""

from dataclasses import asdict
from typing import Any, Dict


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract player identity information from a request (None means the console)."""
    if request_obj is None:
        user_ip = 'console'
    else:
        user_ip = request_obj.remote_addr or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': None,
        'username': None
    }


def game_payload(model, reveal: bool = False) -> Dict[str, Any]:
    """Serialize a game model snapshot into a JSON-ready dict."""
    return asdict(model.snapshot(reveal=reveal))
