"""Concrete collaborators: HTTP client, NeoWs fetcher, curses surface."""
