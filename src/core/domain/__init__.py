"""Domain models and entities.

Pure, strict data structures (Pydantic v2). The domain knows nothing about
HTTP, curses or the CLI: only concepts of the problem.
"""
