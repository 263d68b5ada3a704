"""Tests for the /sessions Lambda handlers."""

import json
from unittest.mock import MagicMock, patch

import pytest

from tutor_backend.application.services.session_service import SessionService
from tutor_backend.handlers import sessions as sessions_handlers


@pytest.fixture
def session_table(stored_session):
    table = MagicMock()
    table.list_by_student.return_value = [stored_session]
    return table


@pytest.fixture(autouse=True)
def patched_service(session_table):
    with patch(
        "tutor_backend.handlers.sessions.get_session_service",
        return_value=SessionService(session_table),
    ):
        yield


class TestCreateHandler:
    def test_created(self, api_event, session_table) -> None:
        response = sessions_handlers.create_handler(
            api_event("POST", body={"studentId": "student-1", "sessionName": "Recursion"}), None
        )

        assert response["statusCode"] == 201
        body = json.loads(response["body"])
        assert body["studentId"] == "student-1"
        assert body["sessionName"] == "Recursion"
        assert body["sessionId"].startswith("session-")
        assert body["history"] == []
        session_table.put_session.assert_called_once()

    def test_missing_session_name(self, api_event, session_table) -> None:
        response = sessions_handlers.create_handler(
            api_event("POST", body={"studentId": "student-1"}), None
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {"message": "Session name is required."}
        session_table.put_session.assert_not_called()

    def test_write_failure(self, api_event, session_table) -> None:
        session_table.put_session.side_effect = RuntimeError("throttled")

        response = sessions_handlers.create_handler(
            api_event("POST", body={"studentId": "student-1", "sessionName": "Recursion"}), None
        )

        assert response["statusCode"] == 500
        assert json.loads(response["body"])["message"] == "Error creating session."


class TestFetchHandler:
    def test_lists_sessions(self, api_event, session_table) -> None:
        response = sessions_handlers.fetch_handler(
            api_event("GET", query={"studentId": "student-sub-1"}), None
        )

        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert [s["sessionId"] for s in body["sessions"]] == ["session-1700000000000"]
        assert response["headers"]["Access-Control-Allow-Methods"] == "GET, OPTIONS"
        session_table.list_by_student.assert_called_once_with("student-sub-1")

    def test_missing_student_id(self, api_event) -> None:
        response = sessions_handlers.fetch_handler(api_event("GET"), None)

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {"message": "Student ID is required."}

    def test_post_not_allowed(self, api_event) -> None:
        response = sessions_handlers.fetch_handler(api_event("POST", body={}), None)

        assert response["statusCode"] == 405


class TestDeleteHandler:
    def test_deleted(self, api_event, session_table) -> None:
        response = sessions_handlers.delete_handler(
            api_event("DELETE", path={"session-id": "session-1", "user-id": "student-1"}), None
        )

        assert response["statusCode"] == 200
        assert json.loads(response["body"]) == {
            "message": "Session session-1 deleted successfully."
        }
        session_table.delete_session.assert_called_once_with("session-1", "student-1")

    def test_missing_user_id(self, api_event, session_table) -> None:
        response = sessions_handlers.delete_handler(
            api_event("DELETE", path={"session-id": "session-1"}), None
        )

        assert response["statusCode"] == 400
        assert json.loads(response["body"]) == {"message": "User ID is required."}
        session_table.delete_session.assert_not_called()

    def test_options_preflight(self, api_event) -> None:
        response = sessions_handlers.delete_handler(api_event("OPTIONS"), None)

        assert response["statusCode"] == 200
        assert response["headers"]["Access-Control-Allow-Methods"] == "DELETE, OPTIONS"
