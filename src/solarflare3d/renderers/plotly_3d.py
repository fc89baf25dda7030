"""Plotly 3D Sun renderer.

Scene coordinates follow geometry.project_to_sphere: +z faces the camera,
+y is solar north, and heliographic (0°, 0°) sits at the centre of the disk.
Drag to orbit, wheel to zoom.
"""

import math

import numpy as np
import plotly.graph_objects as go

from solarflare3d import animation, config
from solarflare3d.models import Cartesian3D, FlareView
from solarflare3d.renderers.textures import texture_luminance

_BG = "#000000"
_SUN_COLORSCALE = [[0.0, "#7a1f00"], [0.45, "#d94f00"], [0.8, "#ff8800"], [1.0, "#ffe08a"]]
_CORE_WHITE = "#ffffff"

_MARKER_BASE_SIZE = 0.15  # Scene units, multiplied by flare intensity
_RING_PARTICLES = 12
_PARTICLE_PX_PER_UNIT = 40  # Scatter3d markers are sized in pixels


def _sphere_grid(n_lat: int, n_lon: int) -> tuple[np.ndarray, np.ndarray]:
    lat = np.linspace(-math.pi / 2, math.pi / 2, n_lat)
    lon = np.linspace(-math.pi, math.pi, n_lon)
    lon_g, lat_g = np.meshgrid(lon, lat)
    return lat_g, lon_g


def _sphere_xyz(
    lat: np.ndarray, lon: np.ndarray, radius: float, center: Cartesian3D | None = None
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    x = radius * np.cos(lat) * np.sin(lon)
    y = radius * np.sin(lat)
    z = radius * np.cos(lat) * np.cos(lon)
    if center is not None:
        x, y, z = x + center.x, y + center.y, z + center.z
    return x, y, z


def _surface_color(
    lat: np.ndarray, lon: np.ndarray, rotation: float, texture: np.ndarray | None
) -> np.ndarray:
    """Per-vertex shade in [0, 1] for the Sun surface, spun by rotation radians."""
    src_lon = np.mod(lon - rotation + math.pi, 2 * math.pi) - math.pi
    if texture is not None:
        lum = texture_luminance(texture)
        h, w = lum.shape
        cols = ((src_lon + math.pi) / (2 * math.pi) * (w - 1)).astype(int)
        rows = ((math.pi / 2 - lat) / math.pi * (h - 1)).astype(int)
        return lum[rows, cols]
    # Limb darkening toward the disk edge plus faint granulation bands that turn with the Sun
    facing = np.clip(np.cos(lat) * np.cos(lon), 0.0, 1.0)
    bands = 0.06 * np.sin(8 * src_lon) * np.cos(3 * lat)
    return np.clip(0.35 + 0.6 * facing + bands, 0.0, 1.0)


def _sun_trace(elapsed: float, texture: np.ndarray | None) -> go.Surface:
    lat, lon = _sphere_grid(64, 128)
    x, y, z = _sphere_xyz(lat, lon, config.SUN_RADIUS)
    return go.Surface(
        x=x,
        y=y,
        z=z,
        surfacecolor=_surface_color(lat, lon, animation.sun_rotation(elapsed), texture),
        colorscale=_SUN_COLORSCALE,
        cmin=0,
        cmax=1,
        showscale=False,
        hoverinfo="skip",
        lighting=dict(ambient=0.8, diffuse=0.5, roughness=1.0, specular=0.1),
        name="sun",
    )


def _shell_trace(
    center: Cartesian3D, radius: float, color: str, opacity: float, name: str
) -> go.Surface:
    lat, lon = _sphere_grid(12, 16)
    x, y, z = _sphere_xyz(lat, lon, radius, center)
    return go.Surface(
        x=x,
        y=y,
        z=z,
        surfacecolor=np.zeros_like(x),
        colorscale=[[0, color], [1, color]],
        showscale=False,
        opacity=opacity,
        hoverinfo="skip",
        name=name,
    )


def _ring_trace(center: Cartesian3D, size: float, color: str, elapsed: float) -> go.Scatter3d:
    dist = size * 4
    rot = animation.ring_rotation(elapsed)
    angles = [rot + i / _RING_PARTICLES * 2 * math.pi for i in range(_RING_PARTICLES)]
    return go.Scatter3d(
        x=[center.x + math.cos(a) * dist for a in angles],
        y=[center.y + math.sin(a) * dist for a in angles],
        z=[center.z] * _RING_PARTICLES,
        mode="markers",
        marker=dict(size=max(2.0, size * 0.3 * _PARTICLE_PX_PER_UNIT), color=color, opacity=0.6),
        hoverinfo="skip",
        name="particles",
    )


def _traces(view: FlareView, elapsed: float, texture: np.ndarray | None) -> list:
    traces: list = [_sun_trace(elapsed, texture)]
    if view.position is None:
        return traces

    pos = view.position
    size = _MARKER_BASE_SIZE * view.intensity
    traces += [
        _shell_trace(pos, size * 3 * animation.glow_pulse(elapsed), view.color, 0.2, "glow_outer"),
        _shell_trace(pos, size * 2, view.color, 0.4, "glow_middle"),
        _shell_trace(pos, size * animation.core_pulse(elapsed), view.color, 0.9, "core"),
        _shell_trace(pos, size * 0.5, _CORE_WHITE, 1.0, "center"),
        _ring_trace(pos, size, view.color, elapsed),
    ]
    return traces


def _apply_layout(fig: go.Figure) -> None:
    axis = dict(visible=False, showbackground=False)
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        showlegend=False,
        margin=dict(l=0, r=0, t=0, b=0),
        scene=dict(
            xaxis=axis,
            yaxis=axis,
            zaxis=axis,
            aspectmode="data",
            dragmode="orbit",
            camera=dict(
                eye=dict(x=0.0, y=0.0, z=1.8),
                up=dict(x=0.0, y=1.0, z=0.0),
                center=dict(x=0.0, y=0.0, z=0.0),
            ),
        ),
    )


def render_flare_figure(
    view: FlareView, elapsed: float = 0.0, texture: np.ndarray | None = None
) -> go.Figure:
    """Render the Sun and the selected flare marker as a Plotly 3D figure.

    Args:
        view: Selected flare, its position and styling.
        elapsed: Seconds since start, for the cosmetic pulse/rotation state.
        texture: Optional equirectangular Sun texture.

    Returns:
        Plotly Figure. Without a marker position only the Sun is drawn.
    """
    fig = go.Figure(data=_traces(view, elapsed, texture))
    _apply_layout(fig)
    return fig


def render_animated_figure(
    view: FlareView,
    n_frames: int = 24,
    period: float = 2 * math.pi,
    texture: np.ndarray | None = None,
) -> go.Figure:
    """Like render_flare_figure, with client-side frames for the marker pulse and ring.

    Frames update only the marker traces; the Sun stays at its elapsed=0 pose.
    The default 2π period is a whole number of cycles for both pulses and for
    the 12-fold particle ring, so the last frame runs straight into the first.
    Without a marker there is nothing to animate and no frames are added.
    """
    fig = render_flare_figure(view, 0.0, texture)
    if view.position is None:
        return fig

    times = animation.frame_times(n_frames, period)
    marker_idx = list(range(1, len(fig.data)))
    fig.frames = [
        go.Frame(data=_traces(view, t, texture)[1:], traces=marker_idx, name=str(i))
        for i, t in enumerate(times)
    ]
    frame_ms = int(period / max(n_frames, 1) * 1000)
    fig.update_layout(
        updatemenus=[
            dict(
                type="buttons",
                showactive=False,
                x=0.02,
                y=0.02,
                buttons=[
                    dict(
                        label="▶",
                        method="animate",
                        args=[
                            None,
                            dict(
                                frame=dict(duration=frame_ms, redraw=True),
                                transition=dict(duration=0),
                                fromcurrent=True,
                                mode="immediate",
                            ),
                        ],
                    )
                ],
            )
        ]
    )
    return fig
