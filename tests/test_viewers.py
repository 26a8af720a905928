# -*- coding: utf-8 -*-
"""
Tests for gmtk.viewers — MapEventBridge and CoordinateBar.

Qt-dependent tests are skipped when PyQt6 or a display is unavailable.

Author
------
GMTK Contributors

Created
-------
2026-10-19
"""

import pytest

from gmtk.core.coordinates import CoordinateSystem, format_for_system
from gmtk.core.measurement import DrawingState, MeasurementEngine


try:
    from PyQt6.QtWidgets import QApplication
    from gmtk.viewers import CoordinateBar, MapEventBridge

    _QT_SKIP = False
    # Ensure QApplication exists for tests
    if QApplication.instance() is None:
        _app = QApplication([])
except (ImportError, RuntimeError):
    _QT_SKIP = True


class _Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, *args):
        self.calls.append(args)


@pytest.mark.skipif(_QT_SKIP, reason="Qt not available")
class TestMapEventBridge:
    def test_idle_click_passthrough(self):
        bridge = MapEventBridge()
        clicks = _Recorder()
        bridge.idle_click.connect(clicks)
        bridge.on_click(100.5, 13.7)
        assert clicks.calls == [(100.5, 13.7)]

    def test_length_measurement(self):
        bridge = MapEventBridge()
        drawings, results = _Recorder(), _Recorder()
        bridge.drawing_changed.connect(drawings)
        bridge.results_changed.connect(results)

        bridge.start_drawing('length')
        bridge.on_click(100.50, 13.70)
        bridge.on_mouse_move(100.505, 13.70)
        bridge.on_click(100.51, 13.70)
        bridge.on_double_click(100.51, 13.70)

        assert bridge.engine.state is DrawingState.IDLE
        assert len(bridge.engine.features) == 1
        assert drawings.calls[-1][0]['features'] == []
        collection = results.calls[-1][0]
        assert collection['features'][0]['geometry']['type'] == 'LineString'

    def test_early_double_click_creates_nothing(self):
        bridge = MapEventBridge()
        results = _Recorder()
        bridge.results_changed.connect(results)
        bridge.start_drawing('area')
        bridge.on_click(0.0, 0.0)
        bridge.on_click(0.01, 0.0)
        bridge.on_double_click(0.01, 0.0)
        assert bridge.engine.features == []
        assert results.calls == []

    def test_mouse_move_emits_cursor(self):
        bridge = MapEventBridge()
        moves = _Recorder()
        bridge.cursor_moved.connect(moves)
        bridge.on_mouse_move(1.0, 2.0)
        assert moves.calls == [(1.0, 2.0)]

    def test_set_unit_republishes(self):
        engine = MeasurementEngine()
        bridge = MapEventBridge(engine)
        results = _Recorder()
        bridge.results_changed.connect(results)
        bridge.start_drawing('length')
        bridge.on_click(100.50, 13.70)
        bridge.on_click(100.51, 13.70)
        bridge.on_double_click(100.51, 13.70)
        bridge.set_unit(length_unit='meter')
        display = results.calls[-1][0]['features'][0]['properties']['display']
        assert display.endswith(' m')

    def test_remove(self):
        bridge = MapEventBridge()
        bridge.start_drawing('length')
        bridge.on_click(100.50, 13.70)
        bridge.on_click(100.51, 13.70)
        bridge.on_double_click(100.51, 13.70)
        feature_id = bridge.engine.features[0].id
        assert bridge.remove(feature_id) is True
        assert bridge.remove(feature_id) is False


@pytest.mark.skipif(_QT_SKIP, reason="Qt not available")
class TestCoordinateBar:
    def test_initial_text(self):
        bar = CoordinateBar()
        assert bar.system is CoordinateSystem.DD
        assert bar.text == "—"

    def test_show_position(self):
        bar = CoordinateBar()
        bar.show_position(100.5231, 13.7497)
        assert bar.text == format_for_system((100.5231, 13.7497), CoordinateSystem.DD)

    def test_switch_system(self):
        bar = CoordinateBar()
        bar.show_position(100.5231, 13.7497)
        bar.set_system('MGRS')
        assert bar.system is CoordinateSystem.MGRS
        assert bar.text.startswith("47P")

    def test_unformattable_position(self):
        bar = CoordinateBar()
        bar.set_system(CoordinateSystem.MGRS)
        bar.show_position(0.0, 88.0)
        assert bar.text == "—"

    def test_throttled_update_applies_latest(self):
        bar = CoordinateBar()
        bar.update_position(1.0, 1.0)
        bar.update_position(100.5231, 13.7497)
        bar._do_update()
        assert bar.text == format_for_system((100.5231, 13.7497), CoordinateSystem.DD)

    def test_connect_bridge(self):
        bar = CoordinateBar()
        bridge = MapEventBridge()
        bar.connect_bridge(bridge)
        bridge.on_mouse_move(100.5231, 13.7497)
        bar._do_update()
        assert bar.text.startswith("13.749700")


class TestStubs:
    @pytest.mark.skipif(not _QT_SKIP, reason="Qt is available")
    def test_stubs_raise(self):
        from gmtk.viewers import CoordinateBar, MapEventBridge

        with pytest.raises(ImportError):
            CoordinateBar()
        with pytest.raises(ImportError):
            MapEventBridge()
