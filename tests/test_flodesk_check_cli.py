import json
import os
from unittest import mock
from urllib.error import HTTPError

import pytest

from scripts import flodesk_check


def _mock_response(status, body=b""):
    response = mock.Mock()
    response.status = status
    response.read.return_value = body
    response.__enter__ = mock.Mock(return_value=response)
    response.__exit__ = mock.Mock(return_value=None)
    return response


@pytest.fixture(autouse=True)
def clean_env():
    with mock.patch.dict(os.environ, {}, clear=True):
        yield


def test_connect_without_key_fails(capsys):
    assert flodesk_check.main(["connect"]) == 1
    assert "You must provide an API key" in capsys.readouterr().out


def test_connect_with_valid_key(capsys):
    with mock.patch("urllib.request.urlopen") as mock_urlopen:
        mock_urlopen.return_value = _mock_response(200, b'{"data": []}')
        assert flodesk_check.main(["--api-key", "k", "connect"]) == 0

    assert "API key is valid" in capsys.readouterr().out


def test_segments_reads_key_from_environment(capsys):
    body = json.dumps({"data": [{"id": "1", "name": "A"}]}).encode()
    with mock.patch.dict(os.environ, {"FLODESK_API_KEY": "env_key"}):
        with mock.patch("urllib.request.urlopen") as mock_urlopen:
            mock_urlopen.return_value = _mock_response(200, body)
            assert flodesk_check.main(["segments"]) == 0

        req = mock_urlopen.call_args[0][0]
        assert req.headers["Authorization"] == "Basic env_key"

    assert "1\tA" in capsys.readouterr().out


def test_subscribe_reports_vendor_error(capsys):
    with mock.patch("urllib.request.urlopen") as mock_urlopen:
        error = HTTPError("url", 400, "Bad Request", {}, None)
        error.read = mock.Mock(return_value=b'{"message": "Email is invalid"}')
        mock_urlopen.side_effect = error
        code = flodesk_check.main(
            ["--api-key", "k", "subscribe", "--email", "x", "--segment", "s1"]
        )

    assert code == 1
    assert "Error: Email is invalid" in capsys.readouterr().out


def test_subscribe_success(capsys):
    with mock.patch("urllib.request.urlopen") as mock_urlopen:
        mock_urlopen.return_value = _mock_response(200, b"{}")
        code = flodesk_check.main(
            [
                "--api-key",
                "k",
                "subscribe",
                "--email",
                "a@b.com",
                "--segment",
                "s1",
                "--name",
                "A B",
            ]
        )

    assert code == 0
    assert mock_urlopen.call_count == 2
    assert "Subscribed a@b.com" in capsys.readouterr().out
