from __future__ import annotations

import textwrap
from pathlib import Path
from typing import List

import pytest

from whoiswatch.core import mailer, whois_client

EXPECTED_WHOIS = textwrap.dedent(
    """\
    % NOTICE: this banner is not part of the record
    Domain Name: EXAMPLE.COM
    Registry Domain ID: 2336799_DOMAIN_COM-VRSN
    Registrar WHOIS Server: whois.networksolutions.com
    Registrar: Network Solutions, LLC
    Name Server: NS1.EXAMPLE.COM
    Name Server: NS2.EXAMPLE.COM
    DNSSEC: unsigned
    Registrant Name: Alice
    Registrant Email: alice@example.com

    >>> Last update of whois database: 2026-10-19T00:00:00Z <<<
    """
)


@pytest.fixture
def expected_text() -> str:
    return EXPECTED_WHOIS


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    path = tmp_path / "expected-output"
    path.write_text(EXPECTED_WHOIS, encoding="utf-8")
    return path


class FakeSocket:
    """Stands in for a connected socket: records what is sent, replays a response."""

    def __init__(self, response: bytes, chunk: int = 7) -> None:
        self._response = response
        self._chunk = chunk
        self.sent = b""
        self.closed = False

    def __enter__(self) -> "FakeSocket":
        return self

    def __exit__(self, *exc: object) -> None:
        self.closed = True

    def sendall(self, data: bytes) -> None:
        self.sent += data

    def recv(self, size: int) -> bytes:
        n = min(size, self._chunk)
        data, self._response = self._response[:n], self._response[n:]
        return data


@pytest.fixture
def fake_whois(monkeypatch: pytest.MonkeyPatch):
    """Patch the whois client's socket to answer with a canned response.

    Returns a function ``serve(response)`` that installs the response and
    returns a list which collects ``(address, timeout, socket)`` per call.
    """

    def serve(response: str | bytes) -> list:
        if isinstance(response, str):
            response = response.encode("utf-8")
        calls: list = []

        def create_connection(address, timeout=None):
            sock = FakeSocket(response)
            calls.append((address, timeout, sock))
            return sock

        monkeypatch.setattr(whois_client.socket, "create_connection", create_connection)
        return calls

    return serve


class FakeSMTP:
    """Records messages instead of talking to a relay."""

    instances: List["FakeSMTP"] = []
    fail_with: Exception | None = None

    def __init__(self, host: str, port: int, timeout: float | None = None) -> None:
        if FakeSMTP.fail_with is not None:
            raise FakeSMTP.fail_with
        self.host = host
        self.port = port
        self.timeout = timeout
        self.messages: list = []
        FakeSMTP.instances.append(self)

    def __enter__(self) -> "FakeSMTP":
        return self

    def __exit__(self, *exc: object) -> None:
        pass

    def send_message(self, msg, from_addr=None, to_addrs=None) -> None:
        self.messages.append((msg, from_addr, to_addrs))


@pytest.fixture
def fake_smtp(monkeypatch: pytest.MonkeyPatch):
    FakeSMTP.instances = []
    FakeSMTP.fail_with = None
    monkeypatch.setattr(mailer.smtplib, "SMTP", FakeSMTP)
    yield FakeSMTP
    FakeSMTP.instances = []
    FakeSMTP.fail_with = None
