# Shared fixtures for the ribbon solver tests. The reference scenario uses a
# saturated blue base with near-black / near-white inks.

import pytest

from ribbon_solver import Inks, RibbonConfig, build_family_ribbons


BLUE = "#2563EB"
# Gray with Y ~= 0.5: too close to midtone to serve as text-on-light ink
MIDTONE_INK = "#BCBCBC"


@pytest.fixture
def config():
    return RibbonConfig.default()


@pytest.fixture
def inks():
    return Inks("#111111", "#FAFAFA")


@pytest.fixture
def midtone_inks():
    return Inks(MIDTONE_INK, "#FAFAFA")


@pytest.fixture
def blue_ribbons(inks, config):
    return build_family_ribbons(BLUE, inks, config, family="primary")


@pytest.fixture
def palette():
    return {
        "primary": BLUE,
        "secondary": "#0F766E",
        "tertiary": "#9333EA",
        "accent": "#F59E0B",
    }
