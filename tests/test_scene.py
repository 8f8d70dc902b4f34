"""Tests for the GL-free parts of the viewer: orbit camera, modes and input state."""

import numpy as np
import pytest

from camera import OrbitCamera
from scene import (CUBE_CENTER, CUBE_SIZE, MODES, ViewerState, cube_faces,
                   projection, scene_copies, transform_faces)
from transform import reflect_origin, reflect_x


class TestOrbitCamera:
    def test_eye_at_angle_zero(self):
        cam = OrbitCamera(radius=10.0, height=5.0)
        assert cam.eye() == pytest.approx([0.0, 5.0, 10.0])

    def test_rotate_wraps(self):
        cam = OrbitCamera()
        cam.rotate(350.0)
        cam.rotate(20.0)
        assert cam.angle == pytest.approx(10.0)

    def test_zoom_keeps_height_ratio(self):
        cam = OrbitCamera(radius=100.0, height=50.0)
        cam.zoom(0.5)
        assert cam.radius == pytest.approx(50.0)
        assert cam.height == pytest.approx(25.0)

    def test_zoom_clamped(self):
        cam = OrbitCamera(radius=100.0, height=40.0, min_radius=20.0, max_radius=300.0)
        cam.zoom(0.01)
        assert cam.radius == 20.0
        assert cam.height == pytest.approx(8.0)
        cam.zoom(1000.0)
        assert cam.radius == 300.0
        assert cam.height == pytest.approx(120.0)

    def test_tilt_clamped(self):
        cam = OrbitCamera(radius=10.0, height=0.0)
        cam.tilt(1000.0)
        assert cam.height == pytest.approx(40.0)
        cam.tilt(-1000.0)
        assert cam.height == pytest.approx(-40.0)

    def test_view_matrix_moves_eye_to_origin(self):
        cam = OrbitCamera(radius=10.0, height=5.0)
        cam.rotate(30.0)
        V, eye = cam.get_view_matrix()
        assert V @ np.append(eye, 1.0) == pytest.approx([0, 0, 0, 1], abs=1e-5)


class TestCube:
    def test_six_quads_around_center(self):
        faces = cube_faces()
        assert len(faces) == 6
        assert all(len(f) == 4 for f in faces)
        verts = np.array([v for f in faces for v in f])
        assert verts.min(axis=0) == pytest.approx(np.array(CUBE_CENTER) - CUBE_SIZE / 2)
        assert verts.max(axis=0) == pytest.approx(np.array(CUBE_CENTER) + CUBE_SIZE / 2)

    def test_reflect_x_mirrors_vertices(self):
        faces = cube_faces()
        mirrored = transform_faces(reflect_x(), faces)
        for face, mface in zip(faces, mirrored):
            for (x, y, z), (mx, my, mz) in zip(face, mface):
                assert (mx, my, mz) == (-x, y, z)

    def test_reflect_origin_center(self):
        faces = transform_faces(reflect_origin(), cube_faces())
        verts = np.array([v for f in faces for v in f], dtype=float)
        assert verts.mean(axis=0) == pytest.approx([-c for c in CUBE_CENTER])


class TestModes:
    def test_modes_zero_to_five(self):
        assert sorted(MODES) == [0, 1, 2, 3, 4, 5]

    def test_original_always_first(self):
        for mode in MODES:
            copies = scene_copies(mode)
            assert copies[0].name == "Original"
            assert copies[0].matrix is None

    def test_mode_zero_shows_all_reflections(self):
        assert len(scene_copies(0)) == 5

    def test_single_reflection_modes(self):
        for mode in (1, 2, 3, 4, 5):
            assert len(scene_copies(mode)) == 2

    def test_scale_mode_keeps_center(self):
        copy = scene_copies(5)[1]
        verts = np.array([v for f in copy.faces() for v in f], dtype=float)
        assert verts.mean(axis=0) == pytest.approx(CUBE_CENTER)
        extent = verts.max(axis=0) - verts.min(axis=0)
        assert extent == pytest.approx([CUBE_SIZE * 2] * 3)


class TestProjection:
    @pytest.mark.parametrize("width, height", [(0, 0), (0, 600), (800, 0)])
    def test_empty_framebuffer_skips_frame(self, width, height):
        assert projection(width, height) is None

    def test_aspect_from_framebuffer(self):
        P = projection(800, 400)
        assert P[1, 1] / P[0, 0] == pytest.approx(2.0)


class TestViewerState:
    def test_digit_selects_mode(self):
        state = ViewerState()
        assert state.key("3") is True
        assert state.mode == 3
        assert state.key("3") is False

    def test_unknown_keys_ignored(self):
        state = ViewerState(mode=2)
        assert state.key("9") is False
        assert state.key("a") is False
        assert state.mode == 2

    @pytest.mark.parametrize("char", ["\u00b2", "\u0663", "\u00bd", ""])
    def test_non_ascii_digits_ignored(self, char):
        state = ViewerState(mode=2)
        assert state.key(char) is False
        assert state.mode == 2

    def test_escape_requests_close(self):
        state = ViewerState()
        state.key("\x1b")
        assert state.should_close

    def test_invalid_initial_mode_falls_back(self):
        assert ViewerState(mode=42).mode == 0

    def test_drag_rotates_only_while_pressed(self):
        state = ViewerState()
        state.move(100, 100)
        assert state.camera.angle == 0.0
        state.press(100, 100)
        state.move(110, 100)
        assert state.camera.angle == pytest.approx(360.0 - 10 * state.rotate_speed)
        state.release()
        angle = state.camera.angle
        state.move(300, 300)
        assert state.camera.angle == angle

    def test_vertical_drag_tilts(self):
        state = ViewerState()
        h = state.camera.height
        state.press(0, 0)
        state.move(0, 10)
        assert state.camera.height == pytest.approx(h + 10 * state.tilt_speed)

    def test_scroll_zooms(self):
        state = ViewerState()
        r = state.camera.radius
        state.scroll(1)
        assert state.camera.radius == pytest.approx(r * 0.9)
        state.scroll(-1)
        assert state.camera.radius == pytest.approx(r * 0.9 * 1.1)

    def test_title_shows_mode(self):
        state = ViewerState(mode=4)
        assert "[4]" in state.title()
        assert MODES[4][0] in state.title()
