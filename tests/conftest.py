"""Pytest configuration and fixtures."""

import pytest

from jsdoc_parser.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make each test read settings from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_javascript_code() -> str:
    """Sample JavaScript module covering every supported function shape."""
    return '''import { helper } from './helper';

function add(a, b) {
  return a + b;
}

export function greet(name = "world") {
  return helper(name);
}

const handler = function (event, ...rest) {
  function inner(x) {}
  return inner(event);
};

api.routes.fetch = function ({ id, limit = 10 }) {};

export const main = function () {};
'''
