"""Adapter package for external I/O implementations.

Purpose:
    Collect concrete implementations for domain ports (randomness, the
    platform URL launcher, and filesystem-backed preferences).

Call context:
    Imported by app composition modules (for runtime wiring) and by tests.
"""
