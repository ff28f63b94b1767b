"""
A-Parser API Client

Synchronous client for the A-Parser scraping service HTTP API.
"""

__version__ = "0.1.0"

from .actions import Action, MoveDirection, QueriesFrom, TaskStatus, TASK_DEFAULTS
from .client import AparserClient
from .config import AparserSettings
from .errors import (
    AparserError,
    ConfigurationError,
    InvalidArgumentError,
    ServiceError,
    TransportError,
)
from .transport import HttpxTransport, Transport

__all__ = [
    "AparserClient",
    "AparserSettings",
    "Action",
    "MoveDirection",
    "QueriesFrom",
    "TaskStatus",
    "TASK_DEFAULTS",
    "AparserError",
    "ConfigurationError",
    "InvalidArgumentError",
    "ServiceError",
    "TransportError",
    "HttpxTransport",
    "Transport",
]
