import pytest

from gridpath import build_grid


def spaced(spacing=10.0):
    """Positions on the XZ plane, `spacing` world units apart."""
    return lambda x, y: (x * spacing, 0.0, y * spacing)


@pytest.fixture
def grid3():
    return build_grid(3, 3, spaced())


@pytest.fixture
def grid10():
    return build_grid(10, 10, spaced())
