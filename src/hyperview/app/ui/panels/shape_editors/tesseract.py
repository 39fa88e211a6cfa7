from __future__ import annotations

from hyperview.app.ui.panels.shape_editors.base import ParamEditorBase
from hyperview.app.ui.panels.shape_editors.registry import register_editor
from hyperview.model.shapes import ShapeKind, TesseractParams


@register_editor
class TesseractEditor(ParamEditorBase):
    KIND = ShapeKind.TESSERACT
    TITLE = "Tesseract"

    def _build_ui(self) -> None:
        self._add_spin("size", "Edge length:", default=1.0)

    def build_params(self) -> TesseractParams:
        return TesseractParams(size=self.values()["size"])
