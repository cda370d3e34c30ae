"""Pytest configuration and shared fixtures."""

from datetime import timedelta, timezone

import pytest

from passcal.config.env import EnvConfig
from passcal.config.settings import ConfigurationManager
from passcal.models import Observer, PassRecord

# 2023-02-25 12:00:00 UTC
NOON_JD = 2460001.0

@pytest.fixture
def iss_pass():
    """Pass of 675 seconds (2**-7 day) starting at noon UTC."""
    return PassRecord(
        satellite_name="ISS",
        orbit_number=12345,
        aos=NOON_JD,
        los=NOON_JD + 0.0078125,
        max_elevation_deg=45.6,
        aos_azimuth_deg=200.25,
        los_azimuth_deg=5.5
    )

@pytest.fixture
def evening_pass():
    """Pass of 1350 seconds (2**-6 day) starting at 18:00 UTC."""
    return PassRecord(
        satellite_name="ISS",
        orbit_number=12349,
        aos=NOON_JD + 0.25,
        los=NOON_JD + 0.265625,
        max_elevation_deg=12.2,
        aos_azimuth_deg=310.0,
        los_azimuth_deg=90.75
    )

@pytest.fixture
def observer():
    """Ground station in Copenhagen."""
    return Observer(latitude_deg=55.68, longitude_deg=12.57, name="Copenhagen")

@pytest.fixture
def cet():
    """Fixed UTC+1 zone so local rendering does not depend on the host."""
    return timezone(timedelta(hours=1))

@pytest.fixture(autouse=True)
def setup_test_env(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and cached config."""
    for env_var in EnvConfig.ENV_MAPPING:
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setenv("PASSCAL_CONFIG_DIR", str(tmp_path / "config"))
    
    manager = ConfigurationManager()
    manager._config = None
    
    yield
    
    manager._config = None
