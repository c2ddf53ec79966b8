import pytest

from ivo import square
from ivo.geometry import Point21

POINTS = [(0.3, 0.4, 0.6), (0.1, 0.7, 0.2), (0.8, 0.25, 0.9)]
H = 1.0e-5
H2 = 1.0e-3


def _d_dx(x, y, t):
    return (square.u(x + H, y, t) - square.u(x - H, y, t)) / (2 * H)


def _d_dy(x, y, t):
    return (square.u(x, y + H, t) - square.u(x, y - H, t)) / (2 * H)


def _d_dt(x, y, t):
    return (square.u(x, y, t + H) - square.u(x, y, t - H)) / (2 * H)


def _laplacian(x, y, t):
    c = square.u(x, y, t)
    return (
        square.u(x + H2, y, t) + square.u(x - H2, y, t)
        + square.u(x, y + H2, t) + square.u(x, y - H2, t) - 4 * c
    ) / H2 ** 2


def test_domain_is_unit_square():
    polygon = square.domain()
    assert list(polygon) == [
        Point21(0.0, 0.0), Point21(1.0, 0.0), Point21(1.0, 1.0), Point21(0.0, 1.0)
    ]


def test_coefficients():
    assert square.convection(0.2, 0.3, 0.4) == (1.0, 1.0)
    assert square.reaction(0.2, 0.3, 0.4) == 0.5
    assert square.DIFFUSION == 0.005
    assert square.BOUNDARY == 0.05


def test_solution_vanishes_at_start():
    assert square.u0(0.3, 0.8) == 0.0
    assert square.u(0.9, 0.1, 0.0) == square.u0(0.9, 0.1)


@pytest.mark.parametrize("x, y, t", POINTS)
def test_dirichlet_matches_solution(x, y, t):
    assert square.gd(x, y, t) == square.u(x, y, t)


@pytest.mark.parametrize("x, y, t", POINTS)
def test_gradient_matches_finite_differences(x, y, t):
    du_x, du_y = square.u_xy(x, y, t)
    assert du_x == pytest.approx(_d_dx(x, y, t), rel=1e-6, abs=1e-8)
    assert du_y == pytest.approx(_d_dy(x, y, t), rel=1e-6, abs=1e-8)


@pytest.mark.parametrize("x, y, t", POINTS)
def test_time_derivative_matches_finite_differences(x, y, t):
    assert square.u_t(x, y, t) == pytest.approx(_d_dt(x, y, t), rel=1e-6, abs=1e-8)


@pytest.mark.parametrize("x, y, t", POINTS[:2])
def test_laplacian_matches_finite_differences(x, y, t):
    assert square.u_xxyy(x, y, t) == pytest.approx(_laplacian(x, y, t), abs=1e-4)


@pytest.mark.parametrize("x, y, t", POINTS[:2])
def test_source_satisfies_equation(x, y, t):
    residual = (
        _d_dt(x, y, t)
        - square.DIFFUSION * _laplacian(x, y, t)
        + _d_dx(x, y, t) + _d_dy(x, y, t)
        + 0.5 * square.u(x, y, t)
    )
    assert square.g(x, y, t) == pytest.approx(residual, rel=1e-5, abs=1e-6)


def test_neumann_uses_outward_flux_per_side():
    t = 0.5
    assert square.gn(0.0, 0.5, t) == -square.DIFFUSION * square.u_xy(0.0, 0.5, t)[0]
    assert square.gn(1.0, 0.5, t) == square.DIFFUSION * square.u_xy(1.0, 0.5, t)[0]
    assert square.gn(0.5, 0.0, t) == -square.DIFFUSION * square.u_xy(0.5, 0.0, t)[1]
    assert square.gn(0.5, 1.0, t) == square.DIFFUSION * square.u_xy(0.5, 1.0, t)[1]