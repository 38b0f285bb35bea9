"""Framework integrations for the UAA client."""

from .fastapi import *
from .flask import *

__all__ = [
    # FastAPI
    "UaaFastAPI",
    "require_token",
    "require_scope",
    # Flask
    "UaaFlask",
    "token_required",
    "scope_required",
    "get_current_token",
]
