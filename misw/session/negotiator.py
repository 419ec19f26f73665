"""
Session Negotiator - Turns typed credentials into a usable session.

Startup sequence:
1. Create the account without credentials (409 means it already exists)
2. Build a credentialed client and fetch the user's stats
3. On 401, ask for the password again and retry, as often as needed
4. Any other failure aborts startup

The credentialed client produced here is the only one used for the
rest of the process. No game call happens before authenticate succeeds.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

import requests

from ..api import ApiClient, ApiError, UnexpectedStatusError, UserStats
from ..config import DEFAULT_TIMEOUT
from ..errors import FatalError
from ..terminal import Terminal

logger = logging.getLogger(__name__)

HTTP_UNAUTHORIZED = 401
HTTP_CONFLICT = 409


@dataclass
class AuthenticatedSession:
    """The credentialed handle shared by every post-login operation."""
    client: ApiClient
    username: str
    stats: UserStats


def format_user_stats(stats: UserStats) -> str:
    return (
        f"Logged in as {stats.username} | Played: {stats.games_played} | "
        f"Won: {stats.games_won} | Lost: {stats.games_lost} | "
        f"Avg moves: {stats.average_moves:.2f}"
    )


def print_user_stats(terminal: Terminal, stats: UserStats) -> None:
    terminal.write()
    terminal.write(format_user_stats(stats))
    terminal.write()


class SessionNegotiator:
    """
    Establishes the authenticated session.

    Usage:
        negotiator = SessionNegotiator(base_url, terminal)
        negotiator.ensure_account(username, password)
        session = negotiator.authenticate(username, password)
    """

    def __init__(
        self,
        base_url: str,
        terminal: Terminal,
        http: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url
        self.terminal = terminal
        self.http = http or requests.Session()
        self.timeout = timeout

    def ensure_account(self, username: str, password: str) -> bool:
        """
        Make sure the user exists.

        Returns True if a new account was created, False if it already
        existed. Raises FatalError on any other failure.
        """
        setup_client = ApiClient(self.base_url, http=self.http, timeout=self.timeout)
        try:
            setup_client.create_user(username, password)
        except UnexpectedStatusError as e:
            if e.status_code == HTTP_CONFLICT:
                logger.info("User %s already exists", username)
                return False
            raise FatalError(f"Failed to create user: {e}") from e
        except ApiError as e:
            raise FatalError(f"Failed to create user: {e}") from e

        logger.info("Created user %s", username)
        self.terminal.write("New user created.")
        return True

    def authenticate(self, username: str, password: str) -> AuthenticatedSession:
        """
        Log in, re-prompting for the password after each 401.

        There is no retry limit; the loop only ends on success, on a
        non-auth failure (FatalError) or when input runs out.
        """
        attempts = 0
        while True:
            attempts += 1
            client = ApiClient.with_credentials(
                self.base_url, username, password,
                http=self.http, timeout=self.timeout,
            )
            try:
                stats = client.get_user_stats()
            except UnexpectedStatusError as e:
                if e.status_code != HTTP_UNAUTHORIZED:
                    raise FatalError(f"Failed to find user: {e}") from e
                logger.info("Authentication attempt %d for %s rejected", attempts, username)
                self.terminal.write("Incorrect password. Please try again.")
                password = self.terminal.prompt_required("Password")
                continue
            except ApiError as e:
                raise FatalError(f"Failed to find user: {e}") from e

            print_user_stats(self.terminal, stats)
            return AuthenticatedSession(client=client, username=username, stats=stats)
