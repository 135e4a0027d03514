"""Use-case layer for session transitions and effects.

Each module coordinates the session aggregate and domain ports without
touching widgets, preserving MVVM + Hexagonal boundaries.
"""
