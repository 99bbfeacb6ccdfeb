#===============================================================================
#  Desktop_App_Launcher | picker.py
#===============================================================================
#  Author      : Edwin A. Rodriguez
#  Created     : 2026-10-12
#  Last Update : 2026-10-19
#
#  Summary
#  -------
#  Fuzzy-searchable selection dialog:
#    - type to filter (see matching.py)
#    - Up/Down move the selection, Enter or double-click picks
#    - Escape cancels
#  Each row shows the display name and an optional annotation.
#
#  Copyright (c) 2026 Edwin A. Rodriguez. All rights reserved.
#  Provided "AS IS", without warranty of any kind.
#===============================================================================

from __future__ import annotations

import sys
from typing import Callable, List, Optional, Sequence

from PySide6.QtCore import QEvent, Qt
from PySide6.QtWidgets import (
    QApplication,
    QDialog,
    QLabel,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QVBoxLayout,
)

from .constants import (
    ANNOTATION_COLOR,
    APP_TITLE,
    PICKER_ACCENT,
    PICKER_BG,
    PICKER_HEIGHT,
    PICKER_WIDTH,
)
from .matching import filter_candidates

Annotator = Callable[[str], Optional[str]]


class PickerDialog(QDialog):
    def __init__(self, names: Sequence[str], annotate: Optional[Annotator] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle(APP_TITLE)
        self.resize(PICKER_WIDTH, PICKER_HEIGHT)

        self._names = list(names)
        self._annotate = annotate
        self._annotations = {}
        self.selected_name: Optional[str] = None

        self.setStyleSheet(f"""
        QDialog {{ background: {PICKER_BG}; }}
        QLineEdit {{
            color: white;
            background: #1a1a1a;
            border: 1px solid #2a2a2a;
            padding: 6px;
        }}
        QListWidget {{
            color: white;
            background: #1a1a1a;
            border: 1px solid #2a2a2a;
        }}
        QListWidget::item:selected {{ background: {PICKER_ACCENT}; }}
        QLabel {{ color: {ANNOTATION_COLOR}; }}
        """)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(6)

        self.search = QLineEdit()
        self.search.setPlaceholderText("Search applications…")
        self.search.textChanged.connect(self.refilter)
        self.search.returnPressed.connect(self.accept_current)
        self.search.installEventFilter(self)
        layout.addWidget(self.search)

        self.list = QListWidget()
        self.list.setSelectionMode(QListWidget.SingleSelection)
        self.list.itemActivated.connect(lambda _item: self.accept_current())
        self.list.itemDoubleClicked.connect(lambda _item: self.accept_current())
        layout.addWidget(self.list)

        self.status = QLabel("")
        layout.addWidget(self.status)

        self.refilter("")
        self.search.setFocus()

    def _annotation(self, name: str) -> str:
        if name not in self._annotations:
            text = self._annotate(name) if self._annotate else None
            self._annotations[name] = text or ""
        return self._annotations[name]

    def refilter(self, query: str):
        self.list.clear()
        shown = filter_candidates(query, self._names)
        for name in shown:
            item = QListWidgetItem(f"{name}{self._annotation(name)}")
            item.setData(Qt.UserRole, name)
            self.list.addItem(item)
        if self.list.count():
            self.list.setCurrentRow(0)
        self.status.setText(f"{len(shown)}/{len(self._names)}")

    def _move(self, step: int):
        count = self.list.count()
        if not count:
            return
        row = max(0, min(count - 1, self.list.currentRow() + step))
        self.list.setCurrentRow(row)

    def eventFilter(self, obj, event):
        if obj is self.search and event.type() == QEvent.KeyPress:
            if event.key() == Qt.Key_Down:
                self._move(1)
                return True
            if event.key() == Qt.Key_Up:
                self._move(-1)
                return True
        return super().eventFilter(obj, event)

    def accept_current(self):
        item = self.list.currentItem()
        if item is None:
            return
        self.selected_name = item.data(Qt.UserRole)
        self.accept()


def select_app(names: List[str], annotate: Optional[Annotator] = None, parent=None) -> Optional[str]:
    """Show the picker modally and return the chosen name (None on cancel)."""
    app = QApplication.instance() or QApplication(sys.argv[:1])
    dlg = PickerDialog(names, annotate, parent)
    # Escape maps to reject() in QDialog
    if not dlg.exec():
        return None
    return dlg.selected_name
