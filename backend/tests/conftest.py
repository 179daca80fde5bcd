"""Shared fixtures for the shadercheck test suite."""

import pytest
from fastapi.testclient import TestClient

from shadercheck.config import get_settings


VALID_SPATIAL = """shader_type spatial;
render_mode unshaded;

uniform vec4 tint : source_color = vec4(1.0);

// Entry point
void fragment() {
    vec3 x = vec3(1.0, 0.0, 0.0);
    ALBEDO = x;
}
"""


@pytest.fixture
def valid_spatial() -> str:
    return VALID_SPATIAL


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def client() -> TestClient:
    from shadercheck.main import app

    return TestClient(app)
