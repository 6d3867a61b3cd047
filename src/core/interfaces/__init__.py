"""Core interfaces/abstractions.

Defines the contracts (Protocol) implemented by concrete adapters so the
core depends on abstractions, not on curses or httpx.
"""
