from basic_fixture import *


def test_initial_state(state):
    assert state.retry_count == 0
    assert not state.is_connecting
    assert not state.is_authenticating
    assert not state.is_reconnecting
    assert not state.is_shutting_down
    assert state.is_first_attempt


def test_increment_retry_ends_first_attempt(state):
    assert state.increment_retry() == 1
    assert state.increment_retry() == 2
    assert not state.is_first_attempt


def test_on_join_resets(state):
    state.retry_count = 4
    state.is_connecting = True
    state.is_authenticating = True
    state.is_reconnecting = True
    state.on_join()
    assert state.retry_count == 0
    assert not state.is_connecting
    assert not state.is_authenticating
    assert not state.is_reconnecting
    assert not state.is_first_attempt
    state.on_join()
    assert state.retry_count == 0


def test_max_retries(state, policy):
    state.retry_count = policy.max_retries - 1
    assert not state.is_max_retries_reached(policy)
    state.increment_retry()
    assert state.is_max_retries_reached(policy)


def test_policy_delay():
    assert RetryPolicy(3, 2500).delay == 2.5
    assert RetryPolicy() == (10, 5000)
