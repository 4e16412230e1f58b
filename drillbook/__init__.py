"""Worked answers to small programming exercises, and terminal output helpers."""

__version__ = "4.6.0"