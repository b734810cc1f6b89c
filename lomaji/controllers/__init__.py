"""
Controller package exports.

Provides a stable import surface for the Qt-facing controllers.
"""

from .input_controller import InputController, action_for_key, ji_class  # noqa: F401

__all__ = [
    "InputController",
    "action_for_key",
    "ji_class",
]
