from __future__ import annotations

import logging

import pytest

from solid_playground.utils.logger import PlaygroundHandler


@pytest.fixture(autouse=True)
def _detach_playground_handler():
    """CLI tests attach a handler bound to a captured stream; drop it and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, PlaygroundHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
