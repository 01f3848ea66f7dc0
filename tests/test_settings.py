"""Environment overrides for the default constants."""

import importlib

import pytest

from config import settings


@pytest.fixture
def reload_settings(monkeypatch):
    """Reload settings under patched env vars, restoring the defaults afterwards."""

    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv("RIBBON_SOLVER_" + name, value)
        return importlib.reload(settings)

    yield _reload
    for name in list(settings.__dict__):
        monkeypatch.delenv("RIBBON_SOLVER_" + name, raising=False)
    importlib.reload(settings)


def test_defaults_match_documented_values():
    assert settings.AAA_MIN == 7.05
    assert settings.AA_SMALL_MIN == 4.5
    assert settings.RECOMMENDED_TINT_Y_GAP == 0.20
    assert settings.LIGHTER_MIN_Y < settings.LIGHTER_MAX_Y


def test_threshold_overrides_use_constant_names(reload_settings):
    mod = reload_settings(AAA_MIN="9.5", AA_SMALL_MIN="5")
    assert mod.AAA_MIN == 9.5
    assert mod.AA_SMALL_MIN == 5.0


def test_overrides_are_clamped(reload_settings):
    mod = reload_settings(AAA_MIN="40", TINT_TARGET_COUNT="0")
    assert mod.AAA_MIN == 21.0
    assert mod.TINT_TARGET_COUNT == 1


def test_garbage_overrides_fall_back(reload_settings):
    mod = reload_settings(SWEEP_STEP="fast", LIGHTER_MAX_Y="nan")
    assert mod.SWEEP_STEP == 0.005
    assert mod.LIGHTER_MAX_Y == 0.95
