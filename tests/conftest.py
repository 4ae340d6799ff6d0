"""Shared fixtures for the AdminView tests"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

# Headless Qt for CI; must be set before the QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QCheckBox, QFrame, QHBoxLayout, QLabel, QVBoxLayout, QWidget


@dataclass
class Surface:
    """Hand-built admin form: optional select-all toggle, rows, checkboxes"""
    document: QWidget
    form: QWidget
    heading: QLabel
    toggle: Optional[QCheckBox]
    rows: List[QFrame] = field(default_factory=list)
    boxes: List[QCheckBox] = field(default_factory=list)
    titles: List[QLabel] = field(default_factory=list)
    links: List[QLabel] = field(default_factory=list)


class Notifications:
    """Records notifier calls"""

    def __init__(self):
        self.calls = []

    def __call__(self, checked, container_id=None):
        self.calls.append((checked, container_id))


@pytest.fixture
def notifications():
    return Notifications()


@pytest.fixture
def make_surface(qtbot):
    """Build a document holding an 'adminForm' container of rows"""

    def build(row_count, select_all=False, checked=(), box_count=None, form_name="adminForm"):
        document = QWidget()
        document.setObjectName("document")
        layout = QVBoxLayout(document)

        heading = QLabel("Articles", document)
        heading.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)
        layout.addWidget(heading)

        form = QWidget(document)
        form.setObjectName(form_name)
        form_layout = QVBoxLayout(form)
        layout.addWidget(form)

        toggle = None
        if select_all:
            toggle = QCheckBox(form)
            toggle.setObjectName("checkall-toggle")
            form_layout.addWidget(toggle)

        surface = Surface(document, form, heading, toggle)
        box_count = row_count if box_count is None else box_count
        for i in range(row_count):
            row = QFrame(form)
            row.setObjectName(f"row{i % 2}")
            row_layout = QHBoxLayout(row)
            if i < box_count:
                box = QCheckBox(row)
                box.setObjectName(f"cb{i}")
                box.setChecked(i in checked)
                row_layout.addWidget(box)
                surface.boxes.append(box)
            title = QLabel(f"Item {i}", row)
            row_layout.addWidget(title)
            link = QLabel(f'<a href="#edit-{i}">Edit</a>', row)
            row_layout.addWidget(link)
            form_layout.addWidget(row)
            surface.rows.append(row)
            surface.titles.append(title)
            surface.links.append(link)

        qtbot.addWidget(document)
        return surface

    return build
