"""Parameterised FastAPI template for small health-checked services."""

from .api import create_app, ServiceConfig
from .config import Settings, settings
from .services import BACKEND, SERVICES, TEMPLATE_1, UnknownServiceError, get_service

__version__ = "1.0.0"


__all__ = [
    "create_app",
    "ServiceConfig",
    "Settings",
    "settings",
    "BACKEND",
    "SERVICES",
    "TEMPLATE_1",
    "UnknownServiceError",
    "get_service",
]
