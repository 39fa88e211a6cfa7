from __future__ import annotations

from hyperview.app.ui.panels.shape_editors.base import ParamEditorBase
from hyperview.app.ui.panels.shape_editors.registry import register_editor
from hyperview.model.shapes import MIN_HYPERSPHERE_RESOLUTION, HypersphereParams, ShapeKind


@register_editor
class HypersphereEditor(ParamEditorBase):
    KIND = ShapeKind.HYPERSPHERE
    TITLE = "Hypersphere"

    def _build_ui(self) -> None:
        self._add_spin("radius", "Radius:", default=1.0)
        self._add_int_spin("resolution", "Resolution:", min_value=MIN_HYPERSPHERE_RESOLUTION, max_value=32, default=12)
        self._add_spin("separation", "Min. separation:", min_value=0.01, max_value=1.0, step=0.01, default=0.2)
        self._add_int_spin("max_neighbors", "Max. neighbours:", min_value=1, max_value=12, default=4)

    def build_params(self) -> HypersphereParams:
        v = self.values()
        return HypersphereParams(
            radius=v["radius"],
            resolution=int(v["resolution"]),
            separation=v["separation"],
            max_neighbors=int(v["max_neighbors"]),
        )
