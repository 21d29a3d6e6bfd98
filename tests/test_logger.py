import logging

import pytest

from utils.logger import get_logger, resolve_level


@pytest.mark.parametrize("name, expected", [
    ("DEBUG", logging.DEBUG),
    ("warning", logging.WARNING),
    ("ERROR", logging.ERROR),
])
def test_resolve_level_known_names(name, expected):
    assert resolve_level(name) == expected


@pytest.mark.parametrize("name", ["BASIC_FORMAT", "LOUD", ""])
def test_resolve_level_unknown_names_fall_back_to_info(name):
    assert resolve_level(name) == logging.INFO


def test_get_logger_returns_named_logger():
    assert get_logger("repositories.room_repo").name == "repositories.room_repo"
