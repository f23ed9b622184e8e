from __future__ import annotations

from .service import REGISTRY, LazyRegistry

__all__ = ["LazyRegistry", "REGISTRY"]
