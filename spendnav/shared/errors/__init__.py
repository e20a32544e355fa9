from .base import (
    AppError,
    DomainError,
    InfrastructureError,
    InternalError,
    StoreConflictError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "InternalError",
    "StoreConflictError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
