"""
Tests for the editing session.

Tests cover:
- Dispatch, validation and listener notification
- Gesture lifecycle (down, move, up) and duplicate-cell suppression
- Touch input using the first touch point
- Import and export through the session
- The end-to-end fill and undo example on the default start state
"""

from unittest.mock import Mock

import logging

import pytest
from PIL import Image

from OP_Libs.editor_config import EditorConfig
from OP_Libs.HistoryLib.app_state import ApplicationState
from OP_Libs.RasterLib.errors import EmptySourceError, InvalidActionError
from OP_Libs.RasterLib.raster import GridPos, Raster
from OP_Libs.SessionLib.editor_session import ControlConfig, PixelEditorSession, pointer_position
from OP_Libs.ToolsLib.tool_registry import ToolRegistry


@pytest.fixture
def session(start_state, fake_clock):
    return PixelEditorSession(state=start_state, clock=fake_clock)


class TestPointerPosition:
    """Tests for pointer_position."""

    def test_floors_by_scale(self):
        assert pointer_position(25, 39, 10) == GridPos(2, 3)

    def test_applies_origin(self):
        assert pointer_position(115, 209, 10, origin=(100, 200)) == GridPos(1, 0)

    def test_negative_coordinates_floor_down(self):
        assert pointer_position(-1, 5, 10) == GridPos(-1, 0)

    def test_rejects_bad_scale(self):
        with pytest.raises(ValueError):
            pointer_position(1, 1, 0)


class TestStartTool:
    """Tests for the start tool check."""

    def test_unknown_config_tool_falls_back_to_draw(self, caplog):
        with caplog.at_level(logging.WARNING):
            session = PixelEditorSession(config=EditorConfig(width=4, height=4, tool="brush"))

        assert session.state.tool == "draw"
        assert "brush" in caplog.text

        session.pointer_down((0, 0))
        assert session.state.picture.pixel_at(0, 0) == "#000000"

    def test_falls_back_to_first_tool_without_draw(self, start_state):
        def stamp(pos, state, dispatch):
            return None

        session = PixelEditorSession(state=start_state, tools={"stamp": stamp})

        assert session.state.tool == "stamp"

    def test_known_tool_kept(self, start_state):
        session = PixelEditorSession(state=start_state)
        assert session.state is start_state

    def test_empty_registry_rejected(self, start_state):
        with pytest.raises(ValueError):
            PixelEditorSession(state=start_state, tools={})


class TestDispatch:
    """Tests for dispatch and listeners."""

    def test_dispatch_updates_state(self, session):
        session.dispatch({"color": "#FF0000"})
        assert session.state.color == "#ff0000"

    def test_listener_objects_receive_new_state(self, session):
        listener = Mock()
        session.subscribe(listener)

        session.set_tool("fill")

        listener.sync_state.assert_called_once_with(session.state)

    def test_callable_listener(self, session):
        received = []
        session.subscribe(received.append)

        session.set_color("#00ff00")

        assert received == [session.state]

    def test_listeners_notified_in_order(self, session):
        calls = []
        session.subscribe(lambda state: calls.append("first"))
        session.subscribe(lambda state: calls.append("second"))

        session.set_tool("pick")

        assert calls == ["first", "second"]

    def test_unsubscribe(self, session):
        received = []
        unsubscribe = session.subscribe(received.append)
        unsubscribe()

        session.set_tool("fill")

        assert received == []

    def test_rejects_invalid_listener(self, session):
        with pytest.raises(ValueError):
            session.subscribe(42)

    def test_no_notification_for_empty_undo(self, session):
        received = []
        session.subscribe(received.append)

        session.undo()

        assert received == []
        assert not session.can_undo

    def test_invalid_action_rejected(self, session):
        with pytest.raises(InvalidActionError):
            session.dispatch({"tool": "spray"})
        assert session.state.tool == "draw"

    def test_control_config(self, session):
        config = session.control_config()

        assert isinstance(config, ControlConfig)
        assert config.tools is session.tools
        assert config.dispatch == session.dispatch
        assert config.load_picture == session.load_picture
        assert config.save_picture == session.save_picture

    def test_plain_tool_mapping_is_wrapped(self, start_state):
        calls = []

        def stamp(pos, state, dispatch):
            calls.append(pos)

        session = PixelEditorSession(state=start_state, tools={"draw": stamp})

        assert isinstance(session.tools, ToolRegistry)
        session.pointer_down((1, 1))
        assert calls == [GridPos(1, 1)]


class TestGestures:
    """Tests for pointer gesture handling."""

    def test_draw_stroke(self, session):
        assert session.pointer_down((0, 0)) is True
        assert session.pointer_move((1, 0)) is True
        assert session.pointer_move((2, 0)) is True
        session.pointer_up()

        picture = session.state.picture
        assert [picture.pixel_at(x, 0) for x in range(4)] == ["#000000"] * 3 + ["#ffffff"]
        assert not session.gesture_active

    def test_stroke_within_window_is_one_undo_step(self, session, fake_clock):
        session.pointer_down((0, 0))
        fake_clock.advance(0.2)
        session.pointer_move((1, 0))
        fake_clock.advance(0.2)
        session.pointer_move((2, 0))
        session.pointer_up()

        assert len(session.state.done) == 1
        session.undo()
        assert set(session.state.picture.cells) == {"#ffffff"}

    def test_same_cell_move_suppressed(self, session):
        notifications = []
        session.pointer_down((3, 3))
        session.subscribe(notifications.append)

        assert session.pointer_move((3, 3)) is False
        assert notifications == []

    def test_continuation_receives_latest_state(self, start_state, fake_clock):
        seen = []

        def probe(pos, state, dispatch):
            def on_move(pos, state):
                seen.append(state)
            return on_move

        session = PixelEditorSession(state=start_state, tools={"draw": probe, "fill": probe}, clock=fake_clock)
        session.pointer_down((0, 0))
        session.set_color("#ff0000")
        session.pointer_move((1, 0))

        assert seen[-1] is session.state
        assert seen[-1].color == "#ff0000"

    def test_move_without_buttons_ends_gesture(self, session):
        session.pointer_down((0, 0))

        assert session.pointer_move((1, 0), buttons=0) is False
        assert not session.gesture_active
        assert session.state.picture.pixel_at(1, 0) == "#ffffff"

    def test_secondary_button_ignored(self, session):
        assert session.pointer_down((0, 0), button=2) is False
        assert session.state.picture.pixel_at(0, 0) == "#ffffff"

    def test_press_outside_grid_ignored(self, session):
        assert session.pointer_down((10, 0)) is False
        assert session.state.done == ()

    def test_drag_outside_grid_dropped(self, session):
        session.pointer_down((9, 9))
        assert session.pointer_move((10, 9)) is False
        assert session.gesture_active

    def test_move_without_gesture(self, session):
        assert session.pointer_move((1, 1)) is False

    def test_fill_has_no_continuation(self, session):
        session.set_tool("fill")
        session.set_color("#00ff00")

        assert session.pointer_down((5, 5)) is False
        assert set(session.state.picture.cells) == {"#00ff00"}
        assert session.pointer_move((6, 6)) is False

    def test_pick_changes_color(self, session):
        session.pointer_down((0, 0))
        session.pointer_up()
        session.set_color("#ff0000")
        session.set_tool("pick")

        session.pointer_down((0, 0))

        assert session.state.color == "#000000"

    def test_rectangle_gesture(self, session):
        session.set_tool("rectangle")
        session.pointer_down((2, 2))
        session.pointer_move((7, 7))
        session.pointer_move((5, 4))
        session.pointer_up()

        picture = session.state.picture
        painted = {(x, y) for y in range(10) for x in range(10) if picture.pixel_at(x, y) == "#000000"}
        assert painted == {(x, y) for x in range(2, 6) for y in range(2, 5)}


class TestTouch:
    """Tests for touch gestures."""

    def test_uses_first_touch_point(self, session):
        session.touch_start([(1, 1), (8, 8)])
        session.touch_move([(2, 1), (9, 9)])
        session.touch_end()

        picture = session.state.picture
        assert picture.pixel_at(1, 1) == "#000000"
        assert picture.pixel_at(2, 1) == "#000000"
        assert picture.pixel_at(8, 8) == "#ffffff"
        assert picture.pixel_at(9, 9) == "#ffffff"
        assert not session.gesture_active

    def test_empty_touch_list(self, session):
        assert session.touch_start([]) is False
        assert session.touch_move([]) is False


class TestImportExport:
    """Tests for load_picture, import_bitmap and save_picture."""

    def test_load_picture_is_undoable(self, session, tmp_path):
        path = tmp_path / "in.png"
        Image.new("RGBA", (4, 3), (255, 0, 0, 255)).save(path)
        original = session.state.picture

        raster = session.load_picture(path)

        assert session.state.picture is raster
        assert raster.size == (4, 3)
        session.undo()
        assert session.state.picture == original

    def test_control_config_load_goes_through_session(self, session, tmp_path):
        path = tmp_path / "in.png"
        Image.new("RGBA", (3, 3), (0, 0, 255, 255)).save(path)
        received = []
        session.subscribe(received.append)

        raster = session.control_config().load_picture(path)

        assert received == [session.state]
        assert session.state.picture is raster
        assert session.can_undo

    def test_load_picture_without_pixels_dispatches_nothing(self, session, tmp_path, monkeypatch):
        def empty_load(file_path, max_size):
            raise EmptySourceError("no pixels")

        monkeypatch.setattr("OP_Libs.SessionLib.editor_session.load_raster", empty_load)
        received = []
        session.subscribe(received.append)

        assert session.load_picture(tmp_path / "empty.png") is None
        assert received == []

    def test_load_picture_missing_file(self, session, tmp_path):
        with pytest.raises(FileNotFoundError):
            session.load_picture(tmp_path / "missing.png")

    def test_import_bitmap_without_source_dispatches_nothing(self, session):
        received = []
        session.subscribe(received.append)

        assert session.import_bitmap(0, 0, None) is None
        assert received == []

    def test_import_bitmap_clamps(self, start_state):
        session = PixelEditorSession(state=start_state, config=EditorConfig(max_import_size=3))

        raster = session.import_bitmap(5, 2, bytes([0, 0, 255, 255]) * 10)

        assert raster.size == (3, 2)
        assert session.state.picture is raster

    def test_save_picture(self, session, tmp_path):
        session.pointer_down((0, 0))
        path = session.save_picture(tmp_path / "out.png")

        with Image.open(path) as img:
            assert img.size == (10, 10)
            assert img.convert("RGBA").getpixel((0, 0)) == (0, 0, 0, 255)

    def test_control_config_save_writes_current_picture(self, session, tmp_path):
        save_picture = session.control_config().save_picture
        session.pointer_down((1, 0))

        path = save_picture(tmp_path / "out.png")

        with Image.open(path) as img:
            assert img.convert("RGBA").getpixel((1, 0)) == (0, 0, 0, 255)

    def test_save_picture_default_name(self, session, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        path = session.save_picture()
        assert path.name == "pixelart.png"
        assert path.exists()


class TestEndToEnd:
    """The default start state filled and undone."""

    def test_fill_whole_grid_then_undo(self, fake_clock):
        session = PixelEditorSession(clock=fake_clock)
        assert session.state.picture.size == (70, 50)

        session.set_tool("fill")
        session.set_color("#000000")
        session.pointer_down((0, 0))

        assert set(session.state.picture.cells) == {"#000000"}

        session.undo()

        assert set(session.state.picture.cells) == {"#f0f0f0"}
        assert isinstance(session.state, ApplicationState)
        assert isinstance(session.state.picture, Raster)
