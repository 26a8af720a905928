# -*- coding: utf-8 -*-
"""
CoordinateBar - Status bar displaying the cursor position on the map.

Shows the map cursor position in the selected coordinate system (GCS,
WGS 1984 UTM 47 / 48 or MGRS). Cursor updates are throttled so that
UTM / MGRS formatting runs at most about 30 times per second. Connect
to a ``MapEventBridge`` via ``connect_bridge()``.

Dependencies
------------
PyQt6

Author
------
GMTK Contributors

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from typing import Any, Optional, Tuple

# GMTK internal
from gmtk.core.config import GmtkConfig
from gmtk.core.coordinates import CoordinateSystem, format_for_system

try:
    from PyQt6.QtWidgets import QApplication, QComboBox, QHBoxLayout, QLabel, QWidget
    from PyQt6.QtCore import QTimer

    _QT_AVAILABLE = True
except ImportError:
    _QT_AVAILABLE = False


if _QT_AVAILABLE:

    class CoordinateBar(QWidget):
        """Status bar showing the cursor coordinate.

        Parameters
        ----------
        parent : QWidget, optional
            Parent widget.
        config : Optional[GmtkConfig]
            Supplies the update throttle interval.
        """

        def __init__(
            self,
            parent: Optional[Any] = None,
            config: Optional[GmtkConfig] = None,
        ) -> None:
            super().__init__(parent)
            config = config or GmtkConfig()

            self._system = CoordinateSystem.DD
            self._position: Optional[Tuple[float, float]] = None

            # Pending cursor update
            self._pending: Optional[Tuple[float, float]] = None
            self._throttle_timer = QTimer(self)
            self._throttle_timer.setSingleShot(True)
            self._throttle_timer.setInterval(config.cursor_throttle_ms)
            self._throttle_timer.timeout.connect(self._do_update)

            self._system_combo = QComboBox()
            for system in CoordinateSystem:
                self._system_combo.addItem(system.label, system.value)
            self._system_combo.currentIndexChanged.connect(self._on_system_changed)

            self._coord_label = QLabel("—")

            layout = QHBoxLayout(self)
            layout.setContentsMargins(4, 2, 4, 2)
            layout.addWidget(self._system_combo)
            layout.addWidget(self._coord_label)
            layout.addStretch(1)

            self.setFixedHeight(28)

        @property
        def system(self) -> CoordinateSystem:
            return self._system

        @property
        def text(self) -> str:
            """Currently displayed coordinate text."""
            return self._coord_label.text()

        def set_system(self, system: Any) -> None:
            """Select the display coordinate system."""
            system = CoordinateSystem(system)
            index = self._system_combo.findData(system.value)
            self._system_combo.setCurrentIndex(index)
            self._system = system
            self._refresh()

        def connect_bridge(self, bridge: Any) -> None:
            """Connect to a MapEventBridge's cursor_moved signal."""
            bridge.cursor_moved.connect(self.update_position)

        def update_position(self, lng: float, lat: float) -> None:
            """Queue a cursor position; the label updates on the next tick."""
            self._pending = (lng, lat)
            if not self._throttle_timer.isActive():
                self._throttle_timer.start()

        def show_position(self, lng: float, lat: float) -> None:
            """Display a position immediately."""
            self._pending = None
            self._position = (lng, lat)
            self._refresh()

        def copy_to_clipboard(self) -> str:
            """Copy the displayed coordinate text and return it."""
            text = self.text if self._position is not None else ""
            if text:
                QApplication.clipboard().setText(text)
            return text

        def _do_update(self) -> None:
            """Apply the pending cursor position (throttled)."""
            if self._pending is None:
                return
            self._position = self._pending
            self._pending = None
            self._refresh()

        def _on_system_changed(self, index: int) -> None:
            self._system = CoordinateSystem(self._system_combo.itemData(index))
            self._refresh()

        def _refresh(self) -> None:
            if self._position is None:
                self._coord_label.setText("—")
                return
            text = format_for_system(self._position, self._system)
            self._coord_label.setText(text or "—")

else:

    class CoordinateBar:  # type: ignore[no-redef]
        """Stub when Qt is unavailable."""

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError("Qt is required for CoordinateBar")
