"""Timber: a lumberjack arcade game with pygame-free game rules and a pygame front end."""

__version__ = "0.1.0"