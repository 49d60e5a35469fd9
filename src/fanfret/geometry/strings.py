"""Lateral string layout at the nut and the bridge.

Strings sit inside the string span; the board edges sit one overhang
outside it, symmetric about the centerline. Overhang moves only the edges,
never the strings.
"""

from __future__ import annotations

__all__ = ["compute_string_layout"]

from fanfret.geometry.model import LayoutParams, StringLayout


def compute_string_layout(
    string_count: int,
    span_nut: float,
    span_bridge: float,
    overhang: float,
) -> StringLayout:
    """Place edges at +/-(span + 2*overhang)/2 and space strings linearly.

    A single string sits at the span midpoint.
    """
    params = LayoutParams(
        string_count=max(1, int(string_count)),
        span_nut=max(0.0, span_nut or 0.0),
        span_bridge=max(0.0, span_bridge or 0.0),
        overhang=max(0.0, overhang or 0.0),
    )
    oh = params.overhang
    half_nut = params.board_width_nut / 2
    half_bridge = params.board_width_bridge / 2

    nut_start = -half_nut + oh
    bridge_start = -half_bridge + oh
    n = params.string_count

    if n == 1:
        nut_positions = ((nut_start + half_nut - oh) / 2,)
        bridge_positions = ((bridge_start + half_bridge - oh) / 2,)
    else:
        nut_positions = tuple(nut_start + params.span_nut * i / (n - 1) for i in range(n))
        bridge_positions = tuple(
            bridge_start + params.span_bridge * i / (n - 1) for i in range(n)
        )

    return StringLayout(
        edge_nut=(-half_nut, half_nut),
        edge_bridge=(-half_bridge, half_bridge),
        nut_positions=nut_positions,
        bridge_positions=bridge_positions,
    )
