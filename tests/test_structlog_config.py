"""Structlog configuration state."""

import logging

import pytest

from moe_common.config import configure_structlog, get_logger, is_configured
from moe_common.logger import get_app_logger, safe_fields


@pytest.mark.unit
def test_get_logger_before_configure_raises():
    assert not is_configured()
    with pytest.raises(RuntimeError, match="not configured"):
        get_logger("moe")


@pytest.mark.unit
def test_configure_is_idempotent_for_same_level():
    configure_structlog(logging.INFO)
    configure_structlog(logging.INFO)
    assert is_configured()


@pytest.mark.unit
def test_reconfigure_with_different_level_raises():
    configure_structlog(logging.INFO)
    with pytest.raises(RuntimeError, match="already configured"):
        configure_structlog(logging.DEBUG)


@pytest.mark.unit
def test_app_logger_resolves_lazily(capsys):
    logger = get_app_logger("moe.arbiter")
    configure_structlog(logging.INFO)

    logger.info("arbiter.started", experts=4)
    logger.debug("arbiter.hidden")

    err = capsys.readouterr().err
    assert "arbiter.started" in err
    assert "arbiter.hidden" not in err


@pytest.mark.unit
def test_app_logger_accepts_msg_and_event_fields(capsys):
    configure_structlog(logging.INFO)
    logger = get_app_logger("moe.dispatcher")

    logger.info("dispatch.routed", msg="expert-a", event="route")

    err = capsys.readouterr().err
    assert "dispatch.routed" in err
    assert "expert-a" in err
    assert "event_field" in err
    assert "route" in err


@pytest.mark.unit
def test_safe_fields_renames_reserved_keys():
    assert safe_fields({"event": "route", "count": 2}) == {
        "event_field": "route",
        "count": 2,
    }
