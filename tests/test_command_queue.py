import logging

import pytest

from timed_quiz.core.errors import InvalidCommandError
from timed_quiz.core.services.command_queue import CommandQueue


def test_returns_the_handler_result():
    queue = CommandQueue(lambda command: command * 2)

    assert queue.post(21) == 42


def test_commands_posted_during_a_handler_run_afterwards_in_order():
    handled = []

    def handler(command):
        handled.append(f"start {command}")
        if command == "open":
            assert queue.post("entered") is None
            assert queue.post("tick") is None
        handled.append(f"end {command}")

    queue = CommandQueue(handler)
    queue.post("open")

    assert handled == [
        "start open",
        "end open",
        "start entered",
        "end entered",
        "start tick",
        "end tick",
    ]


def test_rejection_of_the_posted_command_is_raised_after_draining():
    handled = []

    def handler(command):
        handled.append(command)
        if command == "bad":
            queue.post("follow-up")
            raise InvalidCommandError("nope")
        return command

    queue = CommandQueue(handler)

    with pytest.raises(InvalidCommandError):
        queue.post("bad")
    assert handled == ["bad", "follow-up"]
    assert queue.post("next") == "next"


def test_rejection_of_a_queued_command_is_logged(caplog):
    handled = []

    def handler(command):
        handled.append(command)
        if command == "first":
            queue.post("bad")
            queue.post("last")
        if command == "bad":
            raise InvalidCommandError("nope")
        return command

    queue = CommandQueue(handler)

    with caplog.at_level(logging.WARNING):
        assert queue.post("first") == "first"
    assert handled == ["first", "bad", "last"]
    assert "Rejected queued command" in caplog.text


def test_unexpected_errors_propagate_and_release_the_queue():
    def handler(command):
        if command == "anything":
            raise RuntimeError("boom")
        return command

    queue = CommandQueue(handler)

    with pytest.raises(RuntimeError):
        queue.post("anything")
    assert queue.post("later") == "later"


def test_commands_queued_behind_a_failure_are_dropped(caplog):
    handled = []

    def handler(command):
        handled.append(command)
        if command == "first":
            queue.post("queued-behind-failure")
            raise RuntimeError("boom")

    queue = CommandQueue(handler)

    with caplog.at_level(logging.ERROR), pytest.raises(RuntimeError):
        queue.post("first")
    queue.post("later")

    assert handled == ["first", "later"]
    assert "Dropping 1 queued command" in caplog.text
