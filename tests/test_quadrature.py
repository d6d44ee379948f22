import pytest

from meshgen.quadrature import gauss_legendre, gauss_triangle

LEGENDRE_ORDERS = [1, 2, 3, 4, 5, 6, 8, 12, 20]
TRIANGLE_ORDERS = [1, 3, 4, 6, 7, 9, 12, 13]


def test_legendre_two_point_rule_values():
    rule = gauss_legendre(2)
    assert rule.abscissae == (-0.5773502691896257, 0.5773502691896257)
    assert rule.weights == (1.0, 1.0)


@pytest.mark.parametrize("n", LEGENDRE_ORDERS)
def test_legendre_sizes_and_weight_sum(n):
    rule = gauss_legendre(n)
    assert len(rule.abscissae) == n
    assert len(rule.weights) == n
    assert sum(rule.weights) == pytest.approx(2.0, abs=1e-12)


@pytest.mark.parametrize("n", LEGENDRE_ORDERS)
def test_legendre_points_symmetric_and_sorted(n):
    rule = gauss_legendre(n)
    pts = rule.abscissae
    assert list(pts) == sorted(pts)
    for a, b in zip(pts, reversed(pts)):
        assert a == pytest.approx(-b)
    for a, b in zip(rule.weights, reversed(rule.weights)):
        assert a == pytest.approx(b)


@pytest.mark.parametrize("n", [2, 3, 4, 5, 6, 8, 12])
def test_legendre_exact_polynomials_agree_with_high_order(n):
    degree = 2 * n - 2
    low = gauss_legendre(n)
    high = gauss_legendre(20)
    low_val = sum(w * z**degree for z, w in zip(low.abscissae, low.weights))
    high_val = sum(w * z**degree for z, w in zip(high.abscissae, high.weights))
    assert low_val == pytest.approx(high_val, rel=1e-10)


@pytest.mark.parametrize("n", [0, 7, 10, 21])
def test_legendre_unsupported_order(n):
    with pytest.raises(ValueError):
        gauss_legendre(n)


def test_legendre_rule_has_no_triangle_data():
    rule = gauss_legendre(3)
    assert rule.xi == () and rule.eta == () and rule.triangle_weights == ()


def test_triangle_one_point_rule():
    rule = gauss_triangle(1)
    assert rule.xi == (1.0 / 3.0,)
    assert rule.eta == (1.0 / 3.0,)
    assert rule.triangle_weights == (1.0,)


@pytest.mark.parametrize("n", TRIANGLE_ORDERS)
def test_triangle_sizes_and_weight_sum(n):
    rule = gauss_triangle(n)
    assert len(rule.xi) == len(rule.eta) == len(rule.triangle_weights) == n
    assert sum(rule.triangle_weights) == pytest.approx(1.0, abs=1e-9)


@pytest.mark.parametrize("n", TRIANGLE_ORDERS)
def test_triangle_points_lie_inside_unit_triangle(n):
    rule = gauss_triangle(n)
    for xi, eta in zip(rule.xi, rule.eta):
        assert xi >= 0.0
        assert eta >= 0.0
        assert xi + eta <= 1.0 + 1e-12


@pytest.mark.parametrize("n", [3, 4, 6, 7, 9, 12])
def test_triangle_quadratic_integral_matches_high_order(n):
    def integrate(rule):
        return sum(
            w * (xi * eta + xi * xi - 0.5 * eta)
            for xi, eta, w in zip(rule.xi, rule.eta, rule.triangle_weights)
        )

    assert integrate(gauss_triangle(n)) == pytest.approx(
        integrate(gauss_triangle(13)), abs=1e-9
    )


@pytest.mark.parametrize("n", [0, 2, 5, 8, 14])
def test_triangle_unsupported_order(n):
    with pytest.raises(ValueError):
        gauss_triangle(n)


def test_triangle_rule_has_no_legendre_data():
    rule = gauss_triangle(6)
    assert rule.abscissae == () and rule.weights == ()