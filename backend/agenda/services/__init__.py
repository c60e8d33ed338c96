# Services package initialization
# This file makes the services directory a Python package
# and allows importing service modules

from . import appointment_service
from . import user_service

__all__ = [
    "appointment_service",
    "user_service",
]
