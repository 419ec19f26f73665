"""
Tests for the session negotiator.

Tests:
- Account creation, including the "already exists" case
- Password re-prompt loop on 401
- Fatal failures during startup
"""

import pytest

from ..errors import FatalError, InputClosedError
from ..session import AuthenticatedSession, SessionNegotiator
from .fake_service import BASE_URL, PASSWORD, USERNAME


class TestEnsureAccount:
    """Tests for SessionNegotiator.ensure_account."""

    def test_new_user_created(self, service, http, make_terminal):
        terminal = make_terminal()
        negotiator = SessionNegotiator(BASE_URL, terminal, http=http)

        created = negotiator.ensure_account("bob", "pw")

        assert created is True
        assert service.users["bob"] == "pw"
        assert "New user created." in terminal.stdout.getvalue()

    def test_existing_user_is_not_an_error(self, http, make_terminal):
        """A 409 is treated like success."""
        terminal = make_terminal()
        negotiator = SessionNegotiator(BASE_URL, terminal, http=http)

        created = negotiator.ensure_account(USERNAME, PASSWORD)

        assert created is False
        assert "New user created." not in terminal.stdout.getvalue()

    def test_same_username_twice_then_authenticate(self, http, make_terminal):
        terminal = make_terminal()
        negotiator = SessionNegotiator(BASE_URL, terminal, http=http)

        negotiator.ensure_account("carol", "pw")
        negotiator.ensure_account("carol", "pw")
        session = negotiator.authenticate("carol", "pw")

        assert session.username == "carol"

    def test_server_error_is_fatal(self, service, http, make_terminal):
        service.fail("PUT", "/user", 500, "boom")
        negotiator = SessionNegotiator(BASE_URL, make_terminal(), http=http)

        with pytest.raises(FatalError, match="Failed to create user: Unexpected status 500: boom"):
            negotiator.ensure_account("bob", "pw")

    def test_unreachable_service_is_fatal(self, offline_http, make_terminal):
        negotiator = SessionNegotiator(BASE_URL, make_terminal(), http=offline_http)

        with pytest.raises(FatalError, match="Failed to create user: HTTP error"):
            negotiator.ensure_account("bob", "pw")


class TestAuthenticate:
    """Tests for SessionNegotiator.authenticate."""

    def test_success_prints_stats(self, http, make_terminal):
        terminal = make_terminal()
        negotiator = SessionNegotiator(BASE_URL, terminal, http=http)

        session = negotiator.authenticate(USERNAME, PASSWORD)

        assert isinstance(session, AuthenticatedSession)
        assert session.username == USERNAME
        assert session.client.credentials.username == USERNAME
        assert session.stats.games_played == 0
        output = terminal.stdout.getvalue()
        assert (
            f"Logged in as {USERNAME} | Played: 0 | Won: 0 | Lost: 0 | Avg moves: 0.00"
            in output
        )

    def test_wrong_password_reprompts_until_correct(self, service, http, make_terminal):
        """Repeated 401s keep asking; the later success proceeds normally."""
        terminal = make_terminal("nope", "still-wrong", "", "also-wrong", PASSWORD)
        negotiator = SessionNegotiator(BASE_URL, terminal, http=http)

        session = negotiator.authenticate(USERNAME, "first-wrong")

        output = terminal.stdout.getvalue()
        assert output.count("Incorrect password. Please try again.") == 4
        assert "A value is required." in output
        assert session.client.credentials.password == PASSWORD
        assert service.count("GET", "/user") == 5

    def test_many_failures_never_abort(self, http, make_terminal):
        wrong = [f"wrong-{i}" for i in range(25)]
        terminal = make_terminal(*wrong, PASSWORD)
        negotiator = SessionNegotiator(BASE_URL, terminal, http=http)

        session = negotiator.authenticate(USERNAME, "bad")

        assert session.username == USERNAME

    def test_input_closed_during_reprompt(self, http, make_terminal):
        negotiator = SessionNegotiator(BASE_URL, make_terminal(), http=http)

        with pytest.raises(InputClosedError):
            negotiator.authenticate(USERNAME, "wrong")

    def test_other_status_is_fatal(self, service, http, make_terminal):
        service.fail("GET", "/user", 404, "User not found")
        negotiator = SessionNegotiator(BASE_URL, make_terminal(), http=http)

        with pytest.raises(FatalError, match="Failed to find user: Unexpected status 404"):
            negotiator.authenticate(USERNAME, PASSWORD)

    def test_malformed_stats_is_fatal(self, service, http, make_terminal):
        service.fail("GET", "/user", 200, "{}")
        negotiator = SessionNegotiator(BASE_URL, make_terminal(), http=http)

        with pytest.raises(FatalError, match="Failed to find user: Malformed response"):
            negotiator.authenticate(USERNAME, PASSWORD)
