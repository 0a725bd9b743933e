"""
Tests for HTTP sources using requests library.
"""

import os
import pytest
from unittest.mock import patch, MagicMock
import requests
from ipreport.models import AddressInformation
from ipreport.sources.base import BaseSource
from ipreport.sources.ipinfo import IPinfoSource
from ipreport.sources.public_ip import PublicAddressSource


def make_response(text, status_error=None):
    """Build a mocked requests response."""
    response = MagicMock()
    response.text = text
    if status_error:
        response.raise_for_status.side_effect = status_error
    else:
        response.raise_for_status.return_value = None
    return response


class TestBaseSource:
    """Test cases for BaseSource."""

    def test_rejects_plain_http(self):
        """Test that non-HTTPS endpoints are refused."""
        with pytest.raises(ValueError):
            BaseSource("Insecure", "http://ipinfo.io")

    def test_user_agent_header(self):
        """Test the identifying User-Agent header."""
        source = BaseSource("Test", "https://example.com")

        assert source.headers['User-Agent'].startswith('ipreport/')


class TestPublicAddressSource:
    """Test cases for PublicAddressSource."""

    @patch.dict(os.environ, {}, clear=True)
    def test_initialization(self):
        """Test source defaults."""
        source = PublicAddressSource()

        assert source.name == "ipify"
        assert source.base_url == "https://api.ipify.org"
        assert source.timeout is None

    @patch.dict(os.environ, {'IPREPORT_REQUEST_TIMEOUT': '5'})
    def test_configured_timeout(self):
        """Test that a configured timeout is applied."""
        assert PublicAddressSource().timeout == 5.0

    @patch('requests.get')
    def test_successful_lookup(self, mock_get):
        """Test that the body is returned verbatim."""
        mock_get.return_value = make_response("203.0.113.7\n")
        source = PublicAddressSource()

        assert source.get_public_address() == "203.0.113.7\n"
        mock_get.assert_called_once_with(
            "https://api.ipify.org", headers=source.headers, timeout=source.timeout
        )

    @patch('requests.get')
    def test_network_error(self, mock_get, capsys):
        """Test handling of network errors."""
        mock_get.side_effect = requests.exceptions.ConnectionError("Network unreachable")

        assert PublicAddressSource().get_public_address() is None
        output = capsys.readouterr().out
        assert "Network unreachable" in output
        assert "Error in ipify source for target https://api.ipify.org" in output

    @patch('requests.get')
    def test_http_error(self, mock_get, capsys):
        """Test handling of HTTP error statuses."""
        mock_get.return_value = make_response(
            "busy", requests.exceptions.HTTPError("503 Server Error: Service Unavailable")
        )

        assert PublicAddressSource().get_public_address() is None
        assert "503 Server Error" in capsys.readouterr().out


class TestIPinfoSource:
    """Test cases for IPinfoSource."""

    def setup_method(self):
        """Set up test fixtures."""
        with patch.dict(os.environ, {}, clear=True):
            self.source = IPinfoSource()

    def test_initialization(self):
        """Test source defaults."""
        assert self.source.name == "IPinfo"
        assert self.source.base_url == "https://ipinfo.io"
        assert self.source.timeout is None

    @patch('requests.get')
    def test_successful_lookup(self, mock_get):
        """Test successful lookup and decode."""
        mock_get.return_value = make_response(
            '{"ip":"8.8.8.8","city":"Mountain View","region":"California",'
            '"country":"US","org":"Google LLC","postal":"94043"}'
        )

        info = self.source.lookup("8.8.8.8")

        assert info == AddressInformation(
            ip="8.8.8.8", city="Mountain View", region="California",
            country="US", org="Google LLC", postal="94043",
        )
        args, kwargs = mock_get.call_args
        assert args[0] == "https://ipinfo.io/8.8.8.8"
        assert kwargs['timeout'] is None

    @patch('requests.get')
    def test_network_error(self, mock_get, capsys):
        """Test handling of network errors."""
        mock_get.side_effect = requests.exceptions.RequestException("Network error")

        with patch.object(self.source, '_handle_request_error') as mock_handle_error:
            assert self.source.lookup("8.8.8.8") is None
            mock_handle_error.assert_called_once()

    @patch('requests.get')
    def test_error_names_source_and_target(self, mock_get, capsys):
        """Test that printed errors identify the source and the address."""
        mock_get.side_effect = requests.exceptions.ConnectionError("Connection refused")

        assert self.source.lookup("1.1.1.1") is None

        assert capsys.readouterr().out.strip() == (
            "Error in IPinfo source for target 1.1.1.1: Connection refused"
        )

    @patch('requests.get')
    def test_read_error(self, mock_get, capsys):
        """Test handling of errors while reading the body."""
        mock_get.side_effect = requests.exceptions.ChunkedEncodingError("Connection broken")

        assert self.source.lookup("8.8.8.8") is None
        assert "Connection broken" in capsys.readouterr().out

    @patch('requests.get')
    def test_http_error(self, mock_get, capsys):
        """Test handling of HTTP errors."""
        mock_get.return_value = make_response(
            '{"error": {"title": "Rate limit exceeded"}}',
            requests.exceptions.HTTPError("429 Client Error: Too Many Requests"),
        )

        assert self.source.lookup("8.8.8.8") is None
        assert "429 Client Error" in capsys.readouterr().out

    @patch('requests.get')
    def test_json_decode_error(self, mock_get, capsys):
        """Test handling of malformed JSON."""
        mock_get.return_value = make_response("<html>not json</html>")

        assert self.source.lookup("8.8.8.8") is None
        assert "Expecting value" in capsys.readouterr().out

    @patch('requests.get')
    def test_incompatible_document(self, mock_get, capsys):
        """Test handling of JSON that does not describe an address."""
        mock_get.return_value = make_response('["8.8.8.8"]')

        assert self.source.lookup("8.8.8.8") is None
        assert "cannot decode list" in capsys.readouterr().out
