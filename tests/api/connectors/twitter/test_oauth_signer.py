"""Testes para OAuth1RequestSigner (HMAC-SHA1 via oauthlib)."""

from __future__ import annotations

from urllib.parse import unquote

import pytest

from api.connectors.twitter.oauth_signer import OAuth1RequestSigner
from app.domain.credentials import TokenPair
from app.protocols.request_signer import SigningError

UPLOAD_URL = "https://upload.twitter.com/1.1/media/upload.json"


def _params(header: str) -> dict[str, str]:
    assert header.startswith("OAuth ")
    pairs = [item.strip() for item in header[len("OAuth "):].split(",")]
    result = {}
    for pair in pairs:
        name, _, value = pair.partition("=")
        result[name] = unquote(value.strip('"'))
    return result


def _signer(nonce: str = "fixednonce123", timestamp: float = 1318622958) -> OAuth1RequestSigner:
    return OAuth1RequestSigner(
        "consumer-key",
        "consumer-secret",
        nonce_factory=lambda: nonce,
        clock=lambda: timestamp,
    )


PAIR = TokenPair("access-token", "access-secret")


class TestOAuth1RequestSigner:
    """Geração do header Authorization."""

    def test_reference_signature(self) -> None:
        """Vetor de referência publicado na documentação da Twitter API."""
        signer = OAuth1RequestSigner(
            "xvz1evFS4wEEPTGEFPHBog",
            "kAcSOqF21Fu85e7zjz7ZN2U4ZRhfV3WpwPAoE3Z7kBw",
            nonce_factory=lambda: "kYjzVBB8Y0ZFabxSWbWovY3uYSQ2pTgmZeNu2VS4cg",
            clock=lambda: 1318622958,
        )
        header = signer.sign(
            "https://api.twitter.com/1.1/statuses/update.json?include_entities=true",
            "POST",
            TokenPair(
                "370773112-GmHxMAgYyLbNEtIKZeRNFsMKPR9EyMZeS9weJAEb",
                "LswwdoUaIvS8ltyTt5jkRh4J50vUPVVHtR2YPi5kE",
            ),
            {"status": "Hello Ladies + Gentlemen, a signed OAuth request!"},
        )

        assert _params(header)["oauth_signature"] == "hCtSmYh+iHYCEqBWrE7C7hYmtUk="

    def test_header_carries_protocol_parameters(self) -> None:
        params = _params(_signer().sign(UPLOAD_URL, "POST", PAIR))

        assert params["oauth_consumer_key"] == "consumer-key"
        assert params["oauth_token"] == "access-token"
        assert params["oauth_signature_method"] == "HMAC-SHA1"
        assert params["oauth_version"] == "1.0"
        assert params["oauth_nonce"] == "fixednonce123"
        assert params["oauth_timestamp"] == "1318622958"
        assert "consumer-secret" not in str(params)
        assert "access-secret" not in str(params)

    def test_same_inputs_produce_same_header(self) -> None:
        first = _signer().sign(UPLOAD_URL, "POST", PAIR, {"command": "FINALIZE"})
        second = _signer().sign(UPLOAD_URL, "POST", PAIR, {"command": "FINALIZE"})
        assert first == second

    @pytest.mark.parametrize(
        ("url", "method", "body"),
        [
            (UPLOAD_URL + "?command=STATUS&media_id=1", "GET", None),
            (UPLOAD_URL, "GET", None),
            (UPLOAD_URL, "POST", {"command": "FINALIZE", "media_id": "2"}),
        ],
    )
    def test_signature_depends_on_url_method_and_body(
        self,
        url: str,
        method: str,
        body: dict[str, str] | None,
    ) -> None:
        baseline = _params(
            _signer().sign(UPLOAD_URL, "POST", PAIR, {"command": "FINALIZE", "media_id": "1"})
        )
        other = _params(_signer().sign(url, method, PAIR, body))
        assert other["oauth_signature"] != baseline["oauth_signature"]

    def test_nonce_and_clock_are_consumed_per_call(self) -> None:
        nonces = iter(["nonce-a", "nonce-b"])
        signer = OAuth1RequestSigner(
            "consumer-key",
            "consumer-secret",
            nonce_factory=lambda: next(nonces),
            clock=lambda: 1700000000,
        )
        first = _params(signer.sign(UPLOAD_URL, "POST", PAIR))
        second = _params(signer.sign(UPLOAD_URL, "POST", PAIR))
        assert first["oauth_nonce"] == "nonce-a"
        assert second["oauth_nonce"] == "nonce-b"
        assert first["oauth_signature"] != second["oauth_signature"]

    def test_clock_failure_raises_signing_error(self) -> None:
        def broken_clock() -> float:
            raise OSError("relógio indisponível")

        signer = OAuth1RequestSigner("k", "s", clock=broken_clock)
        with pytest.raises(SigningError):
            signer.sign(UPLOAD_URL, "POST", PAIR)

    def test_missing_consumer_pair_raises(self) -> None:
        with pytest.raises(ValueError):
            OAuth1RequestSigner("", "secret")
