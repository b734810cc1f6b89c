"""Main window factory.

Public API:
- create_main_window(...): builds and returns the main window without starting the
  Qt event loop, enabling UI tests to instantiate the window headlessly.

QApplication creation and app.exec() stay in `main.py`.
"""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QLabel, QMainWindow, QVBoxLayout, QWidget

from lomaji.controllers.input_controller import InputController
from lomaji.services.settings_store import SettingsStore
from lomaji.ui.input_buffer import InputBufferView


@dataclass(frozen=True)
class MainWindowHandles:
    """Handles that tests may need (stored as `window._handles`)."""

    controller: InputController
    buffer_view: InputBufferView
    plain_label: QLabel
    zoom_in: QAction
    zoom_out: QAction


def _make_zoom_action(
    window: QMainWindow,
    store: SettingsStore,
    view: InputBufferView,
    *,
    text: str,
    shortcut: QKeySequence.StandardKey,
    delta: int,
) -> QAction:
    """Action that changes the buffer font size and persists it."""
    action = QAction(text, window)
    action.setShortcut(QKeySequence(shortcut))

    def _zoom() -> None:
        current = store.get_display_settings().font_point_size
        store.set_font_point_size(current + delta)
        view.apply_settings(store.get_display_settings())

    action.triggered.connect(_zoom)
    window.addAction(action)
    return action


def create_main_window(*, settings_path: str | None = None) -> QMainWindow:
    """Create and return the application's main window.

    This function must NOT call app.exec(). It assumes a QApplication exists.

    Args:
        settings_path: Optional path to a settings.yaml; defaults to the
            project-root settings file.
    """
    store = SettingsStore(settings_path)
    display = store.get_display_settings()

    window = QMainWindow()
    window.setObjectName("MainWindow")
    window.setWindowTitle("Lomaji")

    central = QWidget(window)
    layout = QVBoxLayout(central)
    layout.setContentsMargins(12, 12, 12, 12)
    layout.setSpacing(8)

    controller = InputController()
    view = InputBufferView(controller, display, central)

    plain = QLabel(central)
    plain.setObjectName("labelPlainText")
    plain.setText(controller.text())
    view.bufferChanged.connect(plain.setText)

    layout.addWidget(view, 1)
    layout.addWidget(plain)
    window.setCentralWidget(central)
    window.resize(640, 200)

    zoom_in = _make_zoom_action(
        window, store, view,
        text="Zoom In", shortcut=QKeySequence.StandardKey.ZoomIn, delta=2,
    )
    zoom_out = _make_zoom_action(
        window, store, view,
        text="Zoom Out", shortcut=QKeySequence.StandardKey.ZoomOut, delta=-2,
    )

    window._handles = MainWindowHandles(  # type: ignore[attr-defined]
        controller=controller,
        buffer_view=view,
        plain_label=plain,
        zoom_in=zoom_in,
        zoom_out=zoom_out,
    )
    view.setFocus()
    return window
