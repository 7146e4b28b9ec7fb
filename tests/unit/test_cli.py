"""
Tests for the send-mail command line.
"""

import logging

import pytest

from mail_factory import __version__, cli
from mail_factory.services import DIVIDER
from tests.conftest import WELCOME_LINE, NEWSLETTER_LINE


def test_no_arguments_runs_demo_sequence(capsys):
    assert cli.main([]) == 0
    assert capsys.readouterr().out == f"{WELCOME_LINE}\n{DIVIDER}\n{NEWSLETTER_LINE}\n"


def test_single_type(capsys):
    assert cli.main(["--type", "newsletter"]) == 0
    assert capsys.readouterr().out == NEWSLETTER_LINE + "\n"


def test_repeated_types_keep_order(capsys):
    assert cli.main(["-t", "newsletter", "-t", "welcome"]) == 0
    assert capsys.readouterr().out.splitlines() == [NEWSLETTER_LINE, DIVIDER, WELCOME_LINE]


def test_list_mail_types(capsys):
    assert cli.main(["--list"]) == 0
    assert capsys.readouterr().out.splitlines() == ["welcome", "newsletter"]


def test_unknown_type_is_rejected_by_parser(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--type", "promo"])
    assert exc_info.value.code == 2
    assert "invalid choice" in capsys.readouterr().err


def test_invalid_configuration_exits_with_error(capsys, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    assert cli.main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unknown LOG_LEVEL: CHATTY" in captured.err


def test_env_file_is_loaded(capsys, monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_LEVEL=bogus\n")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    assert cli.main(["--env-file", str(env_file)]) == 1
    assert "Unknown LOG_LEVEL: BOGUS" in capsys.readouterr().err


def test_sending_failure_is_reported(capsys, monkeypatch):
    def explode():
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "run_default_sequence", explode)
    assert cli.main([]) == 1
    assert "Sending failed: boom" in capsys.readouterr().err


def test_run_exits_with_main_status(monkeypatch):
    monkeypatch.setattr(cli, "main", lambda: 0)
    with pytest.raises(SystemExit) as exc_info:
        cli.run()
    assert exc_info.value.code == 0


def test_run_handles_keyboard_interrupt(capsys, monkeypatch):
    def interrupted():
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "main", interrupted)
    with pytest.raises(SystemExit) as exc_info:
        cli.run()
    assert exc_info.value.code == 130
    assert "Cancelled by user." in capsys.readouterr().err


def test_verbose_keeps_stdout_exact(capsys):
    root = logging.getLogger()
    previous = root.level
    try:
        assert cli.main(["--verbose"]) == 0
    finally:
        root.setLevel(previous)
    assert capsys.readouterr().out == f"{WELCOME_LINE}\n{DIVIDER}\n{NEWSLETTER_LINE}\n"


def test_version(capsys):
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["--version"])
    assert exc_info.value.code == 0
    assert capsys.readouterr().out.strip() == f"send-mail {__version__}"


def test_log_file_in_missing_directory_is_a_configuration_error(capsys, monkeypatch, tmp_path):
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "no_such_dir" / "mail.log"))
    assert cli.main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid configuration" in captured.err
    assert "LOG_FILE directory does not exist" in captured.err


def test_unopenable_log_file_is_a_configuration_error(capsys, monkeypatch):
    def refuse(verbose=False, log_file=None):
        raise PermissionError("Permission denied: 'mail.log'")

    monkeypatch.setattr(cli, "setup_logging", refuse)
    assert cli.main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Invalid configuration: Permission denied" in captured.err


def test_non_integer_rotation_setting_from_environment(capsys, monkeypatch):
    monkeypatch.setenv("LOG_FILE_MAX_BYTES", "10MB")
    assert cli.main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "LOG_FILE_MAX_BYTES must be an integer, got '10MB'" in captured.err


def test_non_integer_rotation_setting_from_env_file(capsys, monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("LOG_FILE_BACKUP_COUNT=many\n")
    monkeypatch.setenv("LOG_FILE_BACKUP_COUNT", "5")
    assert cli.main(["--env-file", str(env_file)]) == 1
    assert "LOG_FILE_BACKUP_COUNT must be an integer, got 'many'" in capsys.readouterr().err
