"""Interpolation over curved six-node triangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .vec3 import Vec3

_NORMAL_EPS = 1e-14


@dataclass(frozen=True)
class Interpolation:
    """Position and, optionally, local geometry at a point of an element.

    ``hxi`` and ``het`` are the lengths of the tangent vectors and ``hs`` is the
    surface metric (length of their cross product). The derivative fields are
    ``None`` when only the position was requested.
    """

    position: Vec3
    dx_dxi: Vec3 | None = None
    dx_deta: Vec3 | None = None
    normal: Vec3 | None = None
    hxi: float | None = None
    het: float | None = None
    hs: float | None = None


def _combine(coefficients: Sequence[float], points: Sequence[Vec3]) -> Vec3:
    return Vec3(
        sum(c * p.x for c, p in zip(coefficients, points)),
        sum(c * p.y for c, p in zip(coefficients, points)),
        sum(c * p.z for c, p in zip(coefficients, points)),
    )


def _check_nodes(nodes: Sequence[Vec3]) -> None:
    if len(nodes) != 6:
        raise ValueError(f"a six-node triangle needs 6 nodes, got {len(nodes)}")


def element_shape_parameters(nodes: Sequence[Vec3]) -> tuple[float, float, float]:
    """Return the (alpha, beta, gamma) positions of the mid-edge nodes."""
    _check_nodes(nodes)
    p1, p2, p3, p4, p5, p6 = nodes
    d42 = (p4 - p2).norm()
    d41 = (p4 - p1).norm()
    d63 = (p6 - p3).norm()
    d61 = (p6 - p1).norm()
    d52 = (p5 - p2).norm()
    d53 = (p5 - p3).norm()
    al = 1.0 / (1.0 + d42 / d41)
    be = 1.0 / (1.0 + d63 / d61)
    ga = 1.0 / (1.0 + d52 / d53)
    return al, be, ga


def interp_p(
    nodes: Sequence[Vec3],
    al: float,
    be: float,
    ga: float,
    xi: float,
    eta: float,
    with_derivatives: bool = True,
) -> Interpolation:
    """Interpolate a six-node triangle at local coordinates (xi, eta)."""
    _check_nodes(nodes)
    alc = 1.0 - al
    bec = 1.0 - be
    gac = 1.0 - ga
    alalc = al * alc
    bebec = be * bec
    gagac = ga * gac

    ph2 = xi * (xi - al + eta * (al - ga) / gac) / alc
    ph3 = eta * (eta - be + xi * (be + ga - 1.0) / ga) / bec
    ph4 = xi * (1.0 - xi - eta) / alalc
    ph5 = xi * eta / gagac
    ph6 = eta * (1.0 - xi - eta) / bebec
    ph1 = 1.0 - ph2 - ph3 - ph4 - ph5 - ph6

    position = _combine((ph1, ph2, ph3, ph4, ph5, ph6), nodes)
    if not with_derivatives:
        return Interpolation(position=position)

    dph2 = (2.0 * xi - al + eta * (al - ga) / gac) / alc
    dph3 = eta * (be + ga - 1.0) / (ga * bec)
    dph4 = (1.0 - 2.0 * xi - eta) / alalc
    dph5 = eta / gagac
    dph6 = -eta / bebec
    dph1 = -dph2 - dph3 - dph4 - dph5 - dph6
    dx_dxi = _combine((dph1, dph2, dph3, dph4, dph5, dph6), nodes)

    pph2 = xi * (al - ga) / (alc * gac)
    pph3 = (2.0 * eta - be + xi * (be + ga - 1.0) / ga) / bec
    pph4 = -xi / alalc
    pph5 = xi / gagac
    pph6 = (1.0 - xi - 2.0 * eta) / bebec
    pph1 = -pph2 - pph3 - pph4 - pph5 - pph6
    dx_deta = _combine((pph1, pph2, pph3, pph4, pph5, pph6), nodes)

    raw_normal = dx_dxi.cross(dx_deta)
    hs = raw_normal.norm()
    normal = raw_normal / hs if hs > _NORMAL_EPS else Vec3(0.0, 0.0, 0.0)

    return Interpolation(
        position=position,
        dx_dxi=dx_dxi,
        dx_deta=dx_deta,
        normal=normal,
        hxi=dx_dxi.norm(),
        het=dx_deta.norm(),
        hs=hs,
    )