"""Gauss-Legendre and triangle quadrature rules."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class QuadratureData:
    """Quadrature points and weights.

    ``abscissae``/``weights`` hold a Gauss-Legendre rule on [-1, 1];
    ``xi``/``eta``/``triangle_weights`` hold a rule on the unit triangle,
    with weights summing to one.
    """

    abscissae: tuple[float, ...] = ()
    weights: tuple[float, ...] = ()
    xi: tuple[float, ...] = ()
    eta: tuple[float, ...] = ()
    triangle_weights: tuple[float, ...] = ()


def _symmetric(half: tuple[float, ...], middle: float | None = None) -> tuple[float, ...]:
    centre = () if middle is None else (middle,)
    return tuple(-v for v in half) + centre + tuple(reversed(half))


def _mirrored(half: tuple[float, ...], middle: float | None = None) -> tuple[float, ...]:
    centre = () if middle is None else (middle,)
    return half + centre + tuple(reversed(half))


_LEGENDRE: dict[int, tuple[tuple[float, ...], tuple[float, ...]]] = {
    1: ((0.0,), (2.0,)),
    2: (_symmetric((0.5773502691896257,)), (1.0, 1.0)),
    3: (
        _symmetric((0.7745966692414834,), 0.0),
        _mirrored((0.5555555555555556,), 0.8888888888888888),
    ),
    4: (
        _symmetric((0.8611363115940526, 0.3399810435848563)),
        _mirrored((0.3478548451374538, 0.6521451548625461)),
    ),
    5: (
        _symmetric((0.9061798459386640, 0.5384693101056831), 0.0),
        _mirrored((0.2369268850561891, 0.4786286704993665), 0.5688888888888889),
    ),
    6: (
        _symmetric((0.932469514203152, 0.661209386466265, 0.238619186083197)),
        _mirrored((0.171324492379170, 0.360761573048139, 0.467913934572691)),
    ),
    8: (
        _symmetric(
            (0.9602898564975363, 0.7966664774136267, 0.5255324099163290, 0.1834346424956498)
        ),
        _mirrored(
            (0.1012285362903763, 0.2223810344533745, 0.3137066458778873, 0.3626837833783619)
        ),
    ),
    12: (
        _symmetric(
            (
                0.981560634246719, 0.904117256370475, 0.769902674194305,
                0.587317954286617, 0.367831498998180, 0.125233408511469,
            )
        ),
        _mirrored(
            (
                0.047175336386512, 0.106939325995318, 0.160078328543346,
                0.203167426723066, 0.233492536538355, 0.249147045813403,
            )
        ),
    ),
    20: (
        _symmetric(
            (
                0.9931285991850949, 0.9639719272779138, 0.9122344282513259,
                0.8391169718222188, 0.7463319064601508, 0.6360536807265150,
                0.5108670019508271, 0.3737060887154196, 0.2277858511416451,
                0.0765265211334973,
            )
        ),
        _mirrored(
            (
                0.0176140071391521, 0.0406014298003869, 0.0626720483341091,
                0.0832767415767047, 0.1019301198172404, 0.1181945319615184,
                0.1316886384491766, 0.1420961093183820, 0.1491729864726037,
                0.1527533871307259,
            )
        ),
    ),
}


def _triangle_rule(n: int) -> tuple[tuple[float, ...], tuple[float, ...], tuple[float, ...]]:
    third = 1.0 / 3.0
    if n == 1:
        return (third,), (third,), (1.0,)
    if n == 3:
        return (
            (1.0 / 6.0, 2.0 / 3.0, 1.0 / 6.0),
            (1.0 / 6.0, 1.0 / 6.0, 2.0 / 3.0),
            (third, third, third),
        )
    if n == 4:
        return (
            (third, 1.0 / 5.0, 3.0 / 5.0, 1.0 / 5.0),
            (third, 1.0 / 5.0, 1.0 / 5.0, 3.0 / 5.0),
            (-27.0 / 48.0, 25.0 / 48.0, 25.0 / 48.0, 25.0 / 48.0),
        )
    if n == 6:
        al, be, ga, de = 0.816847572980459, 0.445948490915965, 0.108103018168070, 0.091576213509771
        o1, o2 = 0.109951743655322, 0.223381589678011
        return (de, al, de, be, ga, be), (de, de, al, be, be, ga), (o1, o1, o1, o2, o2, o2)
    if n == 7:
        al, be, ga, de = 0.797426958353087, 0.470142064105115, 0.059715871789770, 0.101286507323456
        o1, o2 = 0.125939180544827, 0.132394152788506
        return (
            (de, al, de, be, ga, be, third),
            (de, de, al, be, be, ga, third),
            (o1, o1, o1, o2, o2, o2, 0.225),
        )
    if n == 9:
        al, qa, rh = 0.124949503233232, 0.165409927389841, 0.797112651860071
        de, ru = 0.437525248383384, 0.037477420750088
        o1, o2 = 0.205950504760887, 0.063691414286223
        return (
            (de, al, de, qa, ru, rh, qa, ru, rh),
            (de, de, al, ru, qa, qa, rh, rh, ru),
            (o1, o1, o1, o2, o2, o2, o2, o2, o2),
        )
    if n == 12:
        al, be, ga, de = 0.873821971016996, 0.249286745170910, 0.501426509658179, 0.063089014491502
        rh, qa, ru = 0.636502499121399, 0.310352451033785, 0.053145049844816
        o1, o2, o3 = 0.050844906370207, 0.116786275726379, 0.082851075618374
        return (
            (de, al, de, be, ga, be, qa, ru, rh, qa, ru, rh),
            (de, de, al, be, be, ga, ru, qa, qa, rh, rh, ru),
            (o1, o1, o1, o2, o2, o2, o3, o3, o3, o3, o3, o3),
        )
    if n == 13:
        al, be, ga, de = 0.479308067841923, 0.065130102902216, 0.869739794195568, 0.260345966079038
        rh, qa, ru = 0.638444188569809, 0.312865496004875, 0.048690315425316
        o1, o2, o3, o4 = 0.175615257433204, 0.053347235608839, 0.077113760890257, -0.149570044467670
        return (
            (de, al, de, be, ga, be, qa, ru, rh, qa, ru, rh, third),
            (de, de, al, be, be, ga, ru, qa, qa, rh, rh, ru, third),
            (o1, o1, o1, o2, o2, o2, o3, o3, o3, o3, o3, o3, o4),
        )
    raise ValueError(f"Unsupported triangle quadrature order: {n}")


def gauss_legendre(n: int) -> QuadratureData:
    """Gauss-Legendre rule with ``n`` points on [-1, 1]."""
    try:
        abscissae, weights = _LEGENDRE[n]
    except KeyError:
        raise ValueError(f"Unsupported Gauss-Legendre order: {n}") from None
    return QuadratureData(abscissae=abscissae, weights=weights)


def gauss_triangle(n: int) -> QuadratureData:
    """Quadrature rule with ``n`` points on the unit triangle."""
    xi, eta, weights = _triangle_rule(n)
    return QuadratureData(xi=xi, eta=eta, triangle_weights=weights)