import logging

import pytest

from .logging_setup import setup_logging


@pytest.fixture
def configured(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return calls


def describe_setup_logging():

    def it_defaults_to_warning(configured):
        setup_logging()

        assert configured[0]["level"] == logging.WARNING

    def it_reads_the_level_from_the_environment(configured, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        setup_logging()

        assert configured[0]["level"] == logging.DEBUG

    def it_prefers_an_explicit_level(configured, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        setup_logging("error")

        assert configured[0]["level"] == logging.ERROR

    def it_falls_back_to_warning_for_unknown_names(configured):
        setup_logging("chatty")

        assert configured[0]["level"] == logging.WARNING
