"""Unit tests for custom exceptions."""

import pytest

from luna.core.exceptions import (
    CircuitBreakerOpenError,
    ConfigurationError,
    ExternalServiceError,
    LunaError,
    RpcError,
    SenderError,
    TransactionTimeoutError,
)


@pytest.mark.unit
class TestLunaExceptions:
    """Tests for custom exception hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            ConfigurationError("HELIUS_API_KEY is not set"),
            CircuitBreakerOpenError("Circuit breaker is open"),
            ExternalServiceError(service="Jito", message="boom"),
            RpcError(code=-32602, message="Invalid params"),
            SenderError("Empty response from Sender"),
            TransactionTimeoutError(signature="abc", elapsed_ms=10),
        ],
    )
    def test_all_errors_are_luna_errors(self, error: LunaError) -> None:
        """All custom exceptions inherit from LunaError."""
        with pytest.raises(LunaError):
            raise error

    def test_external_service_error(self) -> None:
        error = ExternalServiceError(service="Helius RPC", message="Rate limited", status_code=429)

        assert str(error) == "Helius RPC: Rate limited"
        assert error.service == "Helius RPC"
        assert error.status_code == 429

    def test_external_service_error_without_status(self) -> None:
        assert ExternalServiceError(service="Jito", message="timeout").status_code is None

    def test_rpc_error(self) -> None:
        """RpcError keeps the JSON-RPC code, message and data."""
        error = RpcError(code=-32005, message="Node is behind", data={"numSlotsBehind": 12})

        assert error.code == -32005
        assert error.message == "Node is behind"
        assert error.data == {"numSlotsBehind": 12}
        assert "-32005" in str(error)
        assert "Node is behind" in str(error)

    def test_sender_error_is_external_service_error(self) -> None:
        error = SenderError("Sender error: bad tx", status_code=400)

        assert isinstance(error, ExternalServiceError)
        assert error.service == "Helius Sender"
        assert error.status_code == 400
        assert str(error) == "Helius Sender: Sender error: bad tx"

    def test_transaction_timeout_error(self) -> None:
        """TransactionTimeoutError names the signature in its message."""
        error = TransactionTimeoutError(signature="5VERv8NM", elapsed_ms=60_012)

        assert error.signature == "5VERv8NM"
        assert error.elapsed_ms == 60_012
        assert str(error) == (
            "Transaction confirmation timed out for signature: 5VERv8NM after 60012ms"
        )
