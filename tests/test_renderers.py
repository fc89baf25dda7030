import numpy as np
import pytest

from solarflare3d.models import Cartesian3D, FlareView
from solarflare3d.ranking import build_flare_view
from solarflare3d.renderers.plotly_3d import render_animated_figure, render_flare_figure
from solarflare3d.renderers.static import save_static_chart
from solarflare3d.renderers.textures import load_texture, texture_luminance


@pytest.fixture
def placed_view(flare_factory) -> FlareView:
    return build_flare_view(flare_factory(class_type="M2", source_location="N10E20"))


def test_figure_without_marker_is_sun_only():
    fig = render_flare_figure(build_flare_view(None))
    assert [trace.name for trace in fig.data] == ["sun"]


def test_figure_with_marker(placed_view):
    fig = render_flare_figure(placed_view)
    assert [trace.name for trace in fig.data] == [
        "sun",
        "glow_outer",
        "glow_middle",
        "core",
        "center",
        "particles",
    ]
    assert len(fig.data[-1].x) == 12


def test_marker_is_centred_on_flare_position(placed_view):
    fig = render_flare_figure(placed_view)
    center = fig.data[4]
    pos = placed_view.position
    assert np.mean(np.asarray(center.y)) == pytest.approx(pos.y, abs=0.05)


def test_camera_looks_from_plus_z(placed_view):
    camera = render_flare_figure(placed_view).layout.scene.camera
    assert camera.eye.z > 0
    assert camera.up.y == 1


def test_particle_ring_turns_with_time(placed_view):
    x0 = render_flare_figure(placed_view, elapsed=0.0).data[-1].x
    x1 = render_flare_figure(placed_view, elapsed=1.0).data[-1].x
    assert tuple(x0) != tuple(x1)


def test_texture_drives_surface_colour(placed_view):
    texture = np.zeros((4, 8, 3), dtype=np.uint8)
    texture[:, 4:] = 255
    fig = render_flare_figure(placed_view, texture=texture)
    colours = np.asarray(fig.data[0].surfacecolor)
    assert colours.shape == (64, 128)
    assert np.all(np.isclose(colours, 0.0) | np.isclose(colours, 1.0))
    assert np.isclose(colours, 1.0).any()


def test_animated_figure_has_frames(placed_view):
    fig = render_animated_figure(placed_view, n_frames=6)
    assert len(fig.frames) == 6
    assert fig.layout.updatemenus[0].buttons[0].method == "animate"


def test_texture_luminance_grayscale_passthrough():
    gray = np.full((2, 2), 0.5)
    assert np.allclose(texture_luminance(gray), 0.5)


def test_load_texture_missing_returns_none(tmp_path):
    assert load_texture("nope.png", directory=tmp_path) is None


def test_save_static_chart(tmp_path, placed_view):
    path = save_static_chart(placed_view, tmp_path / "flare.png")
    assert path.exists()
    assert path.stat().st_size > 0


def test_save_static_chart_far_side_marker(tmp_path):
    view = FlareView(flare=None, position=Cartesian3D(0, 0, -2), intensity=1.0, color="#ff0000")
    assert save_static_chart(view, tmp_path / "far.png").exists()


def test_animation_frames_update_marker_traces_only(placed_view):
    fig = render_animated_figure(placed_view, n_frames=4)
    for frame in fig.frames:
        assert list(frame.traces) == [1, 2, 3, 4, 5]
        assert [trace.name for trace in frame.data] == [
            "glow_outer",
            "glow_middle",
            "core",
            "center",
            "particles",
        ]


def test_animation_loops_seamlessly(placed_view):
    fig = render_animated_figure(placed_view, n_frames=8)
    first = fig.frames[0]
    wrapped = render_flare_figure(placed_view, elapsed=2 * np.pi)
    assert np.allclose(np.asarray(first.data[2].x), np.asarray(wrapped.data[3].x))
    ring_first = sorted((round(x, 6), round(y, 6)) for x, y in zip(first.data[4].x, first.data[4].y))
    ring_wrapped = sorted((round(x, 6), round(y, 6)) for x, y in zip(wrapped.data[5].x, wrapped.data[5].y))
    assert np.allclose(ring_first, ring_wrapped)


def test_animated_figure_without_marker_has_no_frames():
    fig = render_animated_figure(build_flare_view(None))
    assert len(fig.frames) == 0
