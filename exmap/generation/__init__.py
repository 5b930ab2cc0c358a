"""TypeScript generation package for exmap."""

from .code_emitter import CodeEmitter, quote

__all__ = ["CodeEmitter", "quote"]
