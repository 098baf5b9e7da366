"""Tests for log redaction."""

import json
import logging

import structlog

from aabot.logging_config import REDACTED, configure_logging, redact_sensitive


def test_redacts_sensitive_keys():
    event = redact_sensitive(
        None,
        "info",
        {
            "event": "config_update_audit",
            "slack_bot_token": "xoxb-AAA",
            "api_key": "ak-1",
            "encryption_salt": "abcd",
            "workspace_name": "Team",
        },
    )
    assert event["event"] == "config_update_audit"
    assert event["slack_bot_token"] == REDACTED
    assert event["api_key"] == REDACTED
    assert event["encryption_salt"] == REDACTED
    assert event["workspace_name"] == "Team"


def test_redacts_nested_dicts():
    event = redact_sensitive(
        None,
        "info",
        {"event": "x", "details": {"signingSecret": "s", "inner": {"Authorization": "Bearer t"}, "n": 1}},
    )
    assert event["details"]["signingSecret"] == REDACTED
    assert event["details"]["inner"]["Authorization"] == REDACTED
    assert event["details"]["n"] == 1


def test_field_names_as_values_are_kept():
    event = redact_sensitive(None, "info", {"event": "x", "updated_fields": ["slack_bot_token"]})
    assert event["updated_fields"] == ["slack_bot_token"]


def test_configured_json_output_is_redacted(capsys):
    configure_logging(json_output=True, log_level="INFO")
    try:
        structlog.get_logger("test").info("config_update_audit", slack_signing_secret="sign-me")
        line = capsys.readouterr().out.strip().splitlines()[-1]
    finally:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    record = json.loads(line)
    assert record["event"] == "config_update_audit"
    assert record["slack_signing_secret"] == REDACTED
    assert "sign-me" not in line
