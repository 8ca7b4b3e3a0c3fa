"""Receiving text over SIGUSR1 and SIGUSR2, with the bit protocol and string helpers."""

__version__ = "0.1.0"