from __future__ import annotations

from hyperview.app.ui.panels.shape_editors.base import ParamEditorBase
from hyperview.app.ui.panels.shape_editors.registry import register_editor
from hyperview.model.shapes import MIN_TORATOPE_RESOLUTION, ShapeKind, ToratopeParams


@register_editor
class ToratopeEditor(ParamEditorBase):
    KIND = ShapeKind.TORATOPE
    TITLE = "Toratope"

    def _build_ui(self) -> None:
        self._add_spin("major_radius", "Major radius:", default=1.5)
        self._add_spin("minor_radius", "Minor radius:", default=0.5)
        self._add_int_spin("resolution", "Resolution:", min_value=MIN_TORATOPE_RESOLUTION, max_value=32, default=12)
        self._add_int_spin("w_steps", "W steps:", min_value=3, max_value=16, default=6)

    def build_params(self) -> ToratopeParams:
        v = self.values()
        return ToratopeParams(
            major_radius=v["major_radius"],
            minor_radius=v["minor_radius"],
            resolution=int(v["resolution"]),
            w_steps=int(v["w_steps"]),
        )
