"""Foreman: home directory layout for the Foreman tool manager."""

__version__ = "1.6.3"
