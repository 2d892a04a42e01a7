import logging
from unittest.mock import MagicMock

import pytest


def make_response(chunks, content_type="application/json", encoding=None):
    """Build a fake streamed ``requests`` response."""
    response = MagicMock()
    response.headers = {"content-type": content_type}
    response.encoding = encoding
    response.iter_content.return_value = iter(chunks)
    return response


@pytest.fixture
def fake_response():
    return make_response


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
