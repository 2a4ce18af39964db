"""View helpers and the rendering collaborators they rely on."""

from rendering.helpers import GeoblacklightHelper, Routes, ViewContext, register_helpers

__all__ = ["GeoblacklightHelper", "Routes", "ViewContext", "register_helpers"]
