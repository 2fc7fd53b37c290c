"""Shared fixtures for the Tincture test-suite."""
import itertools

import numpy as np
import pytest

from tincture_colors import RGB
from tincture_gamut import set_strict_ieee


@pytest.fixture(autouse=True)
def _fast_kernels():
    """Every test starts (and ends) with the default fast kernels."""
    set_strict_ieee(False)
    yield
    set_strict_ieee(False)


@pytest.fixture(scope="session")
def rgb_grid():
    """A 6x6x6 lattice over the unit RGB cube, corners and grays included."""
    steps = np.linspace(0.0, 1.0, 6)
    return [RGB(r, g, b) for r, g, b in itertools.product(steps, repeat=3)]


@pytest.fixture(scope="session")
def rgb_random():
    """Reproducible random in-gamut RGB samples."""
    rng = np.random.default_rng(1234)
    return [RGB(*v) for v in rng.uniform(0.0, 1.0, size=(200, 3))]
