import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler


@pytest.fixture(autouse=True)
def restore_root_logging() -> Iterator[None]:
    """Undo configure_logging's changes to the root logger after each test.

    configure_logging installs a RichHandler with basicConfig(force=True);
    left in place it would swallow log records meant for pytest's capture
    handlers in every later test.
    """
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
