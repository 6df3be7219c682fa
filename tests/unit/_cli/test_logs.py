"""Test domain_manager._cli.logs."""

from __future__ import annotations

import io
import logging
import os
from typing import TYPE_CHECKING

import pytest

from domain_manager._cli.logs import (
    LOG_FORMAT,
    LOG_FORMAT_VERBOSE,
    LOG_LEVEL_STYLES,
    coloredlogs_settings,
    get_log_level,
    setup_logging,
)
from domain_manager._logging import LogLevels

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

MODULE = "domain_manager._cli.logs"


@pytest.fixture(autouse=True)
def clean_log_env(mocker: MockerFixture) -> None:
    """Remove log settings from the environment."""
    mocker.patch.dict(os.environ, {})
    for key in (
        "DOMAIN_MANAGER_LOG_FIELD_STYLES",
        "DOMAIN_MANAGER_LOG_FORMAT",
        "DOMAIN_MANAGER_LOG_LEVEL_STYLES",
    ):
        os.environ.pop(key, None)


def test_coloredlogs_settings(mocker: MockerFixture) -> None:
    """Test coloredlogs_settings."""
    terminal_supports_colors = mocker.patch(
        f"{MODULE}.terminal_supports_colors", return_value=True
    )
    stream = io.StringIO()
    result = coloredlogs_settings(stream=stream)
    terminal_supports_colors.assert_called_once_with(stream)
    assert result["fmt"] == LOG_FORMAT
    assert result["isatty"] is True
    assert result["level_styles"] == LOG_LEVEL_STYLES
    assert result["stream"] is stream


def test_coloredlogs_settings_env(mocker: MockerFixture) -> None:
    """Test coloredlogs_settings with overrides from the environment."""
    mocker.patch(f"{MODULE}.terminal_supports_colors", return_value=True)
    mocker.patch.dict(
        os.environ,
        {
            "DOMAIN_MANAGER_LOG_FIELD_STYLES": "name=magenta",
            "DOMAIN_MANAGER_LOG_FORMAT": "%(levelname)s %(message)s",
            "DOMAIN_MANAGER_LOG_LEVEL_STYLES": "notice=red",
        },
    )
    result = coloredlogs_settings(verbose=True)
    assert result["fmt"] == "%(levelname)s %(message)s"
    assert result["field_styles"]["name"] == {"color": "magenta"}
    assert result["level_styles"]["notice"] == {"color": "red"}
    assert result["level_styles"]["success"] == LOG_LEVEL_STYLES["success"]


def test_coloredlogs_settings_no_color(mocker: MockerFixture) -> None:
    """Test coloredlogs_settings with color disabled."""
    terminal_supports_colors = mocker.patch(f"{MODULE}.terminal_supports_colors")
    mocker.patch.dict(os.environ, {"DOMAIN_MANAGER_LOG_LEVEL_STYLES": "notice=red"})
    result = coloredlogs_settings(no_color=True)
    terminal_supports_colors.assert_not_called()
    assert result["isatty"] is False
    assert result["field_styles"] == {}
    assert result["level_styles"] == {}


@pytest.mark.parametrize(("debug", "verbose"), [(1, False), (0, True)])
def test_coloredlogs_settings_verbose_format(debug: int, verbose: bool) -> None:
    """Test the verbose format is used with --debug or --verbose."""
    assert coloredlogs_settings(debug=debug, no_color=True, verbose=verbose)["fmt"] == (
        LOG_FORMAT_VERBOSE
    )


@pytest.mark.parametrize(
    ("debug", "verbose", "expected"),
    [
        (0, False, LogLevels.INFO),
        (1, False, LogLevels.DEBUG),
        (2, True, LogLevels.DEBUG),
        (0, True, LogLevels.VERBOSE),
    ],
)
def test_get_log_level(debug: int, expected: LogLevels, verbose: bool) -> None:
    """Test get_log_level."""
    assert get_log_level(debug=debug, verbose=verbose) is expected


@pytest.mark.parametrize(("debug", "expected_calls"), [(0, 1), (1, 1), (2, 2)])
def test_setup_logging(debug: int, expected_calls: int, mocker: MockerFixture) -> None:
    """Test setup_logging."""
    mock_install = mocker.patch(f"{MODULE}.coloredlogs.install")
    setup_logging(debug=debug, no_color=True)
    assert mock_install.call_count == expected_calls
    assert mock_install.call_args_list[0].args == (get_log_level(debug=debug),)
    assert mock_install.call_args_list[0].kwargs["logger"] is logging.getLogger("domain_manager")
    assert mock_install.call_args_list[0].kwargs["isatty"] is False
    if debug == 2:
        assert mock_install.call_args_list[1].kwargs["logger"] is logging.getLogger("botocore")


def test_setup_logging_output(mocker: MockerFixture) -> None:
    """Test records of the domain manager are written with the configured format."""
    stream = io.StringIO()
    mocker.patch.dict(os.environ, {"DOMAIN_MANAGER_LOG_FORMAT": "%(levelname)s|%(message)s"})
    mocker.patch(f"{MODULE}.sys.stdout", stream)
    logger = logging.getLogger("domain_manager")
    mocker.patch.object(logger, "handlers", [])
    mocker.patch.object(logger, "level", logger.level)
    setup_logging(no_color=True, verbose=True)
    logging.getLogger("domain_manager.manager").notice("Domain Manager Summary")  # type: ignore
    assert "NOTICE|Domain Manager Summary" in stream.getvalue()
