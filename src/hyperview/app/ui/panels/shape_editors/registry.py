from __future__ import annotations

from hyperview.app.ui.panels.shape_editors.base import ParamEditorBase
from hyperview.model.shapes import ShapeKind

_REGISTRY: dict[ShapeKind, type[ParamEditorBase]] = {}


def register_editor(cls: type[ParamEditorBase]) -> type[ParamEditorBase]:
    """Class decorator to register an editor by its KIND."""
    kind = getattr(cls, "KIND", None)
    if not kind:
        raise ValueError(f"{cls.__name__} must define KIND")
    _REGISTRY[kind] = cls
    return cls


def create_editor(kind: ShapeKind, parent=None) -> ParamEditorBase:
    cls = _REGISTRY.get(kind)
    if not cls:
        raise KeyError(f"No editor registered for shape '{kind}'")
    return cls(parent)


def list_kinds() -> list[ShapeKind]:
    return list(_REGISTRY.keys())
