import logging
from unittest.mock import MagicMock, patch

import pytest

from resume_builder.app.core.logging_config import LOG_FORMAT, configure_logging


@pytest.fixture
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


@pytest.mark.parametrize(
    ("name", "expected"),
    [("debug", logging.DEBUG), ("WARNING", logging.WARNING), ("chatty", logging.INFO)],
)
def test_configure_logging_sets_root_level(restore_root_level, name, expected):
    settings = MagicMock(log_level=name)

    with patch("resume_builder.app.core.logging_config.logging.basicConfig") as mock_basic:
        configure_logging(settings)

    mock_basic.assert_called_once_with(level=expected, format=LOG_FORMAT)
    assert logging.getLogger().level == expected
