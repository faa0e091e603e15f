"""Scorekeeper -- check evaluation and scoring agent."""

__version__ = "0.1.0"
