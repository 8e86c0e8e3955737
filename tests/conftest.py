"""Pytest configuration and shared fixtures."""

from unittest.mock import MagicMock

import pytest

from ydt.config import create_default_config
from ydt.presenters import NullPresenter

ENGLISH_HTML = """
<div class="trans-container">
  <div class="per-phone">
    <span>英</span><span class="phonetic">/həˈləʊ/</span>
  </div>
</div>
<div class="trans-container">
  <li class="word-exp">
    <span class="pos">int.</span>
    <span class="trans">你好</span>
  </li>
</div>
"""

CHINESE_HTML = """
<li class="word-exp-ce mcols-layout">
  <a class="point">study</a>
</li>
<li class="word-exp-ce mcols-layout">
  <a class="point">learn</a>
</li>
"""


@pytest.fixture
def test_config():
    """Provide a test configuration pointing at a fake endpoint."""
    return create_default_config(
        result_url="https://dict.example.test/result",
        request_timeout=1.0,
    )


@pytest.fixture
def null_presenter():
    """Provide a presenter that records output instead of printing it."""
    return NullPresenter()


@pytest.fixture
def english_html():
    """Provide a minimal result page for an English word."""
    return ENGLISH_HTML


@pytest.fixture
def chinese_html():
    """Provide a minimal result page for a Chinese word."""
    return CHINESE_HTML


@pytest.fixture
def make_response():
    """Factory fixture for creating fake requests.Response objects."""

    def _make(status_code=200, text=""):
        response = MagicMock()
        response.status_code = status_code
        response.text = text
        return response

    return _make
