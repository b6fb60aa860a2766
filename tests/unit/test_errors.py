"""Unit tests for the tunefetch exception hierarchy."""

from __future__ import annotations

from tunefetch.utils.errors import (
    ConfigurationError,
    EndOfResults,
    MirrorUnavailableError,
    PayloadDecodeError,
    TuneFetchError,
)


class TestErrors:
    def test_server_prefix_in_str(self) -> None:
        err = MirrorUnavailableError("Connection refused", server="https://m1.test/api/v1")
        assert str(err) == "[https://m1.test/api/v1] Connection refused"

    def test_str_without_server(self) -> None:
        assert str(PayloadDecodeError()) == "Response payload could not be decoded"

    def test_mirror_errors_default_to_terminal(self) -> None:
        assert MirrorUnavailableError().retryable is False
        assert MirrorUnavailableError(retryable=True).retryable is True

    def test_failures_share_a_base(self) -> None:
        for cls in (MirrorUnavailableError, PayloadDecodeError, ConfigurationError):
            assert issubclass(cls, TuneFetchError)

    def test_end_of_results_is_not_a_failure(self) -> None:
        eor = EndOfResults("trending", 3)
        assert not isinstance(eor, TuneFetchError)
        assert eor.page == 3
        assert "trending" in str(eor)
