"""
misw - Minesweeper Terminal Client

An interactive client for a remote minesweeper service.
The client talks to the service over HTTP and provides:
- Account creation and login
- Starting new games and resuming unfinished ones
- Move submission and board rendering
- Player statistics
"""

__version__ = "0.1.0"
