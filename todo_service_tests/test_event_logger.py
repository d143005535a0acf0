"""
Unit tests for event logger utility.
"""
import pytest
from unittest.mock import Mock, patch

from todo_service.utils import event_logger
from todo_service.utils.event_logger import log_auth_event, client_ip


@pytest.fixture
def mock_request():
    """Create a mock FastAPI Request object."""
    request = Mock()
    request.client = Mock()
    request.client.host = "192.168.1.1"
    request.headers = {"user-agent": "Mozilla/5.0 Test Browser"}
    return request


def test_log_auth_event_writes_line(mock_request):
    with patch.object(event_logger.logger, "info") as info:
        log_auth_event("login_success", mock_request, user_id="u-1", email="a@x.com")

    info.assert_called_once()
    args = info.call_args[0]
    assert args[1] == "login_success"
    assert "u-1" in args
    assert "a@x.com" in args
    assert "192.168.1.1" in args
    assert "Mozilla/5.0 Test Browser" in args


def test_log_auth_event_rejects_unknown_type(mock_request):
    with pytest.raises(ValueError, match="Invalid event_type"):
        log_auth_event("password_reset", mock_request)


def test_client_ip_falls_back_to_forwarded_for():
    request = Mock()
    request.client = None
    request.headers = {"x-forwarded-for": "10.0.0.5, 172.16.0.1"}
    assert client_ip(request) == "10.0.0.5"


def test_registration_does_not_log_password(client):
    with patch.object(event_logger.logger, "info") as info:
        resp = client.post(
            "/auth/register",
            json={"email": "logged@example.com", "password": "super-secret-pw", "name": "L"},
        )
    assert resp.status_code == 201
    info.assert_called_once()
    assert all("super-secret-pw" not in str(arg) for arg in info.call_args[0])
