# -*- coding: utf-8 -*-
"""
MapEventBridge - Route host map pointer events into a MeasurementEngine.

The host map widget (a web view, a QGraphicsView, ...) forwards
``click``, ``double_click`` and ``mouse_move`` events with WGS84
longitude / latitude. While a measurement is being drawn the bridge
drives the engine and emits GeoJSON FeatureCollections for the host's
preview and result layers. Clicks while idle are passed through as
``idle_click`` so the host can use them for placement.

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
from typing import Any, Optional

# GMTK internal
from gmtk.core.measurement import DrawingState, MeasurementEngine

try:
    from PyQt6.QtCore import QObject, pyqtSignal

    _QT_AVAILABLE = True
except ImportError:
    _QT_AVAILABLE = False


if _QT_AVAILABLE:

    class MapEventBridge(QObject):
        """Qt adapter between map pointer events and a measurement engine.

        Signals
        -------
        drawing_changed(dict)
            In-progress drawing as a FeatureCollection.
        results_changed(dict)
            Finished measurements as a FeatureCollection.
        idle_click(float, float)
            Click (lon, lat) received while not drawing.
        cursor_moved(float, float)
            Every pointer move (lon, lat).

        Parameters
        ----------
        engine : Optional[MeasurementEngine]
            Engine to drive. A new one is created if omitted.
        parent : QObject, optional
        """

        drawing_changed = pyqtSignal(dict)
        results_changed = pyqtSignal(dict)
        idle_click = pyqtSignal(float, float)
        cursor_moved = pyqtSignal(float, float)

        def __init__(
            self,
            engine: Optional[MeasurementEngine] = None,
            parent: Optional[Any] = None,
        ) -> None:
            super().__init__(parent)
            self._engine = engine or MeasurementEngine()

        @property
        def engine(self) -> MeasurementEngine:
            return self._engine

        def start_drawing(self, mode: Any) -> None:
            self._engine.start_drawing(mode)
            self.drawing_changed.emit(self._engine.preview_geometry())

        def cancel(self) -> None:
            self._engine.cancel()
            self.drawing_changed.emit(self._engine.preview_geometry())

        def set_unit(
            self,
            length_unit: Optional[Any] = None,
            area_unit: Optional[Any] = None,
        ) -> None:
            """Change display units and republish both layers."""
            self._engine.set_unit(length_unit=length_unit, area_unit=area_unit)
            self.results_changed.emit(self._engine.result_collection())
            if self._engine.state is DrawingState.DRAWING:
                self.drawing_changed.emit(self._engine.preview_geometry())

        def remove(self, feature_id: str) -> bool:
            removed = self._engine.remove(feature_id)
            if removed:
                self.results_changed.emit(self._engine.result_collection())
            return removed

        def on_click(self, lng: float, lat: float) -> None:
            if self._engine.state is DrawingState.DRAWING:
                self._engine.add_vertex((lng, lat))
                self.drawing_changed.emit(self._engine.preview_geometry())
            else:
                self.idle_click.emit(lng, lat)

        def on_double_click(self, lng: float, lat: float) -> None:
            """Finish the drawing.

            The host delivers the clicks of a double-click first, so the
            final vertex is already committed.
            """
            if self._engine.state is not DrawingState.DRAWING:
                return
            feature = self._engine.finish()
            self.drawing_changed.emit(self._engine.preview_geometry())
            if feature is not None:
                self.results_changed.emit(self._engine.result_collection())

        def on_mouse_move(self, lng: float, lat: float) -> None:
            self.cursor_moved.emit(lng, lat)
            if self._engine.state is DrawingState.DRAWING:
                self._engine.preview_vertex((lng, lat))
                self.drawing_changed.emit(self._engine.preview_geometry())

else:

    class MapEventBridge:  # type: ignore[no-redef]
        """Stub when Qt is unavailable."""

        def __init__(self, *args: Any, **kwargs: Any) -> None:
            raise ImportError("Qt is required for MapEventBridge")
