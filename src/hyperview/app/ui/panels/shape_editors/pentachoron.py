from __future__ import annotations

from hyperview.app.ui.panels.shape_editors.base import ParamEditorBase
from hyperview.app.ui.panels.shape_editors.registry import register_editor
from hyperview.model.shapes import PentachoronParams, ShapeKind


@register_editor
class PentachoronEditor(ParamEditorBase):
    KIND = ShapeKind.PENTACHORON
    TITLE = "5-Cell"

    def _build_ui(self) -> None:
        self._add_spin("size", "Edge length:", default=1.0)

    def build_params(self) -> PentachoronParams:
        return PentachoronParams(size=self.values()["size"])
