from __future__ import annotations

import logging

from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import (
    QCheckBox, QComboBox, QGridLayout, QGroupBox, QLabel, QPushButton,
    QStackedWidget, QVBoxLayout, QWidget,
)

from hyperview.app.ui.panels.base import BasePanel
from hyperview.app.ui.panels.shape_editors.base import ParamEditorBase
from hyperview.app.ui.panels.shape_editors.registry import create_editor, list_kinds
from hyperview.engine import Engine
from hyperview.model.shapes import ShapeKind

logger = logging.getLogger(__name__)


class ScenePanel(BasePanel):
    """
    Panel for picking the active object and editing its shape.

    Top: object selector, "show all" toggle and a pose reset button.
    Below: the parameter editor for the selected object's shape kind.
    Editing a value regenerates the selected object in place.
    """
    interaction_finished = Signal()

    def __init__(self, engine: Engine, parent: QWidget | None = None) -> None:
        super().__init__(engine, parent)

        root = QVBoxLayout(self)

        # selection row
        self.group_select = QGroupBox(self.tr("Scene"), self)
        root.addWidget(self.group_select, 0)
        sel = QGridLayout(self.group_select)
        self.label_object = QLabel(self.tr("Object:"), self.group_select)
        sel.addWidget(self.label_object, 0, 0)
        self.combo_box = QComboBox(self.group_select)
        sel.addWidget(self.combo_box, 0, 1)
        self.check_show_all = QCheckBox(self.tr("Rotate and show all objects"), self.group_select)
        sel.addWidget(self.check_show_all, 1, 0, 1, 2)
        self.button_reset = QPushButton(self.tr("Reset pose"), self.group_select)
        sel.addWidget(self.button_reset, 2, 0, 1, 2)

        # parameter editor stack
        self.stack = QStackedWidget(self)
        root.addWidget(self.stack, 0)

        self._kinds = list_kinds()
        self._editors: dict[ShapeKind, ParamEditorBase] = {}
        for kind in self._kinds:
            editor = create_editor(kind, parent=self.stack)
            editor.params_changed.connect(self._on_params_changed)
            self._editors[kind] = editor
            self.stack.addWidget(editor)

        root.addStretch()

        self.refresh_objects()

        # wiring
        self.combo_box.currentIndexChanged.connect(self._on_object_changed)
        self.check_show_all.toggled.connect(self._on_show_all_toggled)
        self.button_reset.clicked.connect(self._on_reset_clicked)

    def refresh_objects(self) -> None:
        """Rebuild the selector from the scene and sync it to the selection."""
        self.combo_box.blockSignals(True)
        self.combo_box.clear()
        for obj in self.engine.scene:
            self.combo_box.addItem(obj.name)
        index = self.engine.scene.selected_index
        if index is not None:
            self.combo_box.setCurrentIndex(index)
        self.combo_box.blockSignals(False)
        self._show_editor_for_selection()

    def _show_editor_for_selection(self) -> None:
        selected = self.engine.scene.selected
        if selected is None or selected.kind not in self._editors:
            return
        editor = self._editors[selected.kind]
        editor.set_params(selected.params)
        self.stack.setCurrentWidget(editor)
        self.stack.setFixedHeight(editor.sizeHint().height())

    @Slot(int)
    def _on_object_changed(self, index: int) -> None:
        self.engine.select_object(index)
        self._show_editor_for_selection()
        self.interaction_finished.emit()

    @Slot()
    def _on_params_changed(self) -> None:
        index = self.engine.scene.selected_index
        selected = self.engine.scene.selected
        if index is None or selected is None:
            return
        try:
            params = self._editors[selected.kind].build_params()
        except ValueError as e:
            logger.warning(f"Rejected parameters for '{selected.name}': {e}")
            return
        self.engine.scene.regenerate(index, params)
        logger.info(f"Regenerated '{selected.name}': {selected.vertex_count} vertices, {selected.edge_count} edges")

    @Slot(bool)
    def _on_show_all_toggled(self, checked: bool) -> None:
        self.engine.show_all = checked
        if not checked:
            self.engine.select_object(self.combo_box.currentIndex())
        self.interaction_finished.emit()

    @Slot()
    def _on_reset_clicked(self) -> None:
        self.engine.scene.reset_all()
        self.interaction_finished.emit()
