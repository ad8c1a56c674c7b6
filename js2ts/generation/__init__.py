"""
Source generation: applies annotation edits to the original text.
"""

from .ts_emitter import TypeScriptEmitter, apply_edits

__all__ = ["TypeScriptEmitter", "apply_edits"]
