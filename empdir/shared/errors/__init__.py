from .base import (
    AppError,
    DomainError,
    InfrastructureError,
    RateLimitedError,
    StorageUnavailableError,
    UnauthorizedError,
    ValidationError,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "DomainError",
    "InfrastructureError",
    "RateLimitedError",
    "StorageUnavailableError",
    "UnauthorizedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
]
