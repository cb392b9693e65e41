from unittest import mock

import pytest

from vidarscan.retry import retry_call, retry_until_true


def _counter(results):
    calls = []

    def function():
        calls.append(1)
        return results[len(calls) - 1]

    return function, calls


def test_until_true_stops_at_first_success():
    function, calls = _counter([False, True, True])
    assert retry_until_true(3, 0, function) is True
    assert len(calls) == 2


def test_until_true_gives_up_after_all_attempts():
    function, calls = _counter([False, False, False])
    assert retry_until_true(3, 0, function) is False
    assert len(calls) == 3


def test_until_true_with_zero_attempts_calls_nothing():
    function, calls = _counter([True])
    assert retry_until_true(0, 0, function) is False
    assert calls == []


@mock.patch("vidarscan.retry.time.sleep")
def test_until_true_sleeps_between_attempts_only(sleep):
    function, _ = _counter([False, False, False])
    assert retry_until_true(3, 0.5, function) is False
    assert sleep.call_count == 2
    assert all(call.args == (0.5,) for call in sleep.call_args_list)


def test_call_returns_first_success():
    attempts = []

    def function():
        attempts.append(1)
        if len(attempts) < 3:
            raise RuntimeError("not yet")
        return "done"

    assert retry_call(3, 0, function) == "done"
    assert len(attempts) == 3


def test_call_reraises_last_error():
    attempts = []

    def function():
        attempts.append(1)
        raise RuntimeError(f"failure {len(attempts)}")

    with pytest.raises(RuntimeError, match="failure 3"):
        retry_call(3, 0, function)
    assert len(attempts) == 3


def test_call_with_zero_attempts_returns_none():
    attempts = []

    def function():
        attempts.append(1)
        return "value"

    assert retry_call(0, 0, function) is None
    assert attempts == []


@mock.patch("vidarscan.retry.time.sleep")
def test_call_does_not_sleep_after_success(sleep):
    assert retry_call(3, 1.0, lambda: 7) == 7
    assert sleep.call_count == 0