"""Persistence for values that survive between scoring runs."""
