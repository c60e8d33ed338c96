# Controllers package initialization
# This file makes the controllers directory a Python package
# and allows importing controller modules

from . import appointment_controller, index_controller, user_controller

__all__ = [
    "appointment_controller",
    "index_controller",
    "user_controller",
]
