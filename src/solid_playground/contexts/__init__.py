"""Bounded contexts, one per principle."""
