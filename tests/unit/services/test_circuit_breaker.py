"""Tests for CircuitBreaker implementation."""

from datetime import UTC, datetime, timedelta

import pytest


class TestCircuitBreaker:
    """Tests for CircuitBreaker dataclass."""

    def test_initial_state(self) -> None:
        """
        Given: New CircuitBreaker
        When: Created with defaults
        Then: State is CLOSED with threshold 5 and cooldown 30
        """
        from luna.services.base import CircuitBreaker, CircuitState

        cb = CircuitBreaker()

        assert cb.state == CircuitState.CLOSED
        assert cb.failure_threshold == 5
        assert cb.cooldown_seconds == 30
        assert cb.failure_count == 0
        assert cb.last_failure_time is None

    def test_record_success_resets(self) -> None:
        from luna.services.base import CircuitBreaker, CircuitState

        cb = CircuitBreaker()
        cb.failure_count = 3
        cb.state = CircuitState.HALF_OPEN

        cb.record_success()

        assert cb.failure_count == 0
        assert cb.state == CircuitState.CLOSED

    def test_record_failure_sets_last_failure_time(self) -> None:
        from luna.services.base import CircuitBreaker

        cb = CircuitBreaker()
        cb.record_failure()

        assert cb.failure_count == 1
        assert cb.last_failure_time is not None

    def test_opens_at_threshold(self) -> None:
        """
        Given: CircuitBreaker with threshold of 3
        When: 2 then 3 failures are recorded
        Then: Stays closed at 2, opens at 3
        """
        from luna.services.base import CircuitBreaker, CircuitState

        cb = CircuitBreaker(failure_threshold=3)

        cb.record_failure()
        cb.record_failure()
        assert cb.state == CircuitState.CLOSED

        cb.record_failure()
        assert cb.state == CircuitState.OPEN

    def test_blocks_while_open(self) -> None:
        from luna.services.base import CircuitBreaker, CircuitState

        cb = CircuitBreaker(cooldown_seconds=30)
        cb.state = CircuitState.OPEN
        cb.last_failure_time = datetime.now(UTC)

        assert cb.can_execute() is False

    def test_open_without_failure_time_blocks(self) -> None:
        from luna.services.base import CircuitBreaker, CircuitState

        cb = CircuitBreaker()
        cb.state = CircuitState.OPEN

        assert cb.can_execute() is False

    def test_half_open_after_cooldown(self) -> None:
        """
        Given: CircuitBreaker in OPEN state, cooldown elapsed
        When: can_execute() is called
        Then: Transitions to HALF_OPEN and returns True
        """
        from luna.services.base import CircuitBreaker, CircuitState

        cb = CircuitBreaker(cooldown_seconds=30)
        cb.state = CircuitState.OPEN
        cb.last_failure_time = datetime.now(UTC) - timedelta(seconds=31)

        assert cb.can_execute() is True
        assert cb.state == CircuitState.HALF_OPEN

    def test_half_open_failure_reopens(self) -> None:
        from luna.services.base import CircuitBreaker, CircuitState

        cb = CircuitBreaker(failure_threshold=5)
        cb.state = CircuitState.HALF_OPEN

        cb.record_failure()

        assert cb.state == CircuitState.OPEN


class TestRaiseIfOpen:
    """Tests for CircuitBreaker.raise_if_open."""

    def test_closed_does_not_raise(self) -> None:
        from luna.services.base import CircuitBreaker

        CircuitBreaker().raise_if_open("Helius RPC")

    def test_open_raises_with_service_name(self) -> None:
        """
        Given: CircuitBreaker in OPEN state with a recent failure
        When: raise_if_open() is called
        Then: CircuitBreakerOpenError names the service and the wait
        """
        from luna.core.exceptions import CircuitBreakerOpenError
        from luna.services.base import CircuitBreaker, CircuitState

        cb = CircuitBreaker(cooldown_seconds=30)
        cb.state = CircuitState.OPEN
        cb.last_failure_time = datetime.now(UTC)

        with pytest.raises(CircuitBreakerOpenError) as exc_info:
            cb.raise_if_open("Helius RPC")

        message = str(exc_info.value)
        assert "Helius RPC" in message
        assert "Next retry in" in message

    def test_time_until_half_open_never_negative(self) -> None:
        from luna.services.base import CircuitBreaker

        cb = CircuitBreaker(cooldown_seconds=30)
        assert cb._time_until_half_open() == 0.0

        cb.last_failure_time = datetime.now(UTC) - timedelta(seconds=120)
        assert cb._time_until_half_open() == 0.0
