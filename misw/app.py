"""
Client Application - Startup prompts, login and the menu loop.
"""

from __future__ import annotations
import logging

import requests

from .config import ClientConfig
from .session import MenuController, SessionNegotiator
from .terminal import Terminal

logger = logging.getLogger(__name__)

BANNER = [
    "--- Minesweeper CLI ---",
    "Uses the API for gameplay; coordinates are 0-indexed.",
    "",
]


def run_client(
    terminal: Terminal,
    config: ClientConfig | None = None,
    http: requests.Session | None = None,
) -> None:
    """
    Run the interactive client until the player quits.

    Raises FatalError when startup or a menu action cannot continue.
    """
    config = config or ClientConfig()

    for line in BANNER:
        terminal.write(line)

    base_url = terminal.prompt_with_default("API base URL", config.base_url)
    username = terminal.prompt_required("Username")
    password = terminal.prompt_required("Password")
    logger.info("Connecting to %s as %s", base_url, username)

    own_http = http is None
    http = http or requests.Session()
    try:
        negotiator = SessionNegotiator(base_url, terminal, http=http, timeout=config.timeout)
        negotiator.ensure_account(username, password)
        session = negotiator.authenticate(username, password)
        MenuController(session, terminal).run()
    finally:
        if own_http:
            http.close()
