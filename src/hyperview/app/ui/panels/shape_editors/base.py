from __future__ import annotations

from dataclasses import fields

from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QLabel, QGridLayout,
    QSizePolicy, QDoubleSpinBox, QSpinBox
)

from hyperview.model.shapes import ShapeKind, ShapeParams


class ParamEditorBase(QWidget):
    """Base class for shape-specific parameter editors."""
    KIND: ShapeKind  # Override in subclass
    TITLE: str = "Parameters"

    params_changed = Signal()

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        box = QGroupBox(self.tr(self.TITLE), self)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(box)
        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(8)
        self._spins: dict[str, QDoubleSpinBox | QSpinBox] = {}
        self._row = 0
        self._build_ui()  # subclass defines inputs
        for w in self._spins.values():
            w.valueChanged.connect(self._relay_changed)

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _place(self, key: str, label: str, widget: QDoubleSpinBox | QSpinBox) -> None:
        row = self._next_row()
        self.grid.addWidget(QLabel(self.tr(label), self), row, 0)
        widget.setKeyboardTracking(False)
        widget.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.grid.addWidget(widget, row, 1)
        self._spins[key] = widget

    def _add_spin(
        self,
        key: str,
        label: str,
        *,
        min_value: float = 0.05,
        max_value: float = 10.0,
        step: float = 0.1,
        default: float = 1.0,
        decimals: int = 2
    ) -> QDoubleSpinBox:
        w = QDoubleSpinBox(self)
        w.setRange(min_value, max_value)
        w.setSingleStep(step)
        w.setDecimals(decimals)
        w.setValue(default)
        self._place(key, label, w)
        return w

    def _add_int_spin(
        self,
        key: str,
        label: str,
        *,
        min_value: int = 1,
        max_value: int = 64,
        default: int = 1
    ) -> QSpinBox:
        w = QSpinBox(self)
        w.setRange(min_value, max_value)
        w.setValue(default)
        self._place(key, label, w)
        return w

    def values(self) -> dict[str, float | int]:
        return {k: w.value() for k, w in self._spins.items()}

    def set_params(self, params: ShapeParams) -> None:
        """Load `params` into the spin boxes without emitting `params_changed`."""
        for f in fields(params):
            w = self._spins.get(f.name)
            value = getattr(params, f.name)
            if w is None or value is None:
                continue
            w.blockSignals(True)
            w.setValue(value)
            w.blockSignals(False)

    @Slot()
    def _relay_changed(self) -> None:
        self.params_changed.emit()

    # ---- abstract API for subclasses ----
    def _build_ui(self) -> None:
        """Create form widgets (use the `_add_spin` helpers)."""
        raise NotImplementedError("`_build_ui` must be implemented in subclass.")

    def build_params(self) -> ShapeParams:
        """Return the shape parameters described by the current inputs."""
        raise NotImplementedError("`build_params` must be implemented in subclass.")
