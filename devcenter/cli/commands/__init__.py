"""
Click command implementations for devcenter CLI.

Each module corresponds to a devcenter command (e.g., register.py
implements 'devcenter register').
"""

from .auth import auth
from .register import register

COMMANDS = [
    auth,
    register,
]

__all__ = [
    "COMMANDS",
    "auth",
    "register",
]
