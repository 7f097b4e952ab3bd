"""Growable arrays, thread and polled timers, and a select-based TCP echo server and client."""

__version__ = "0.1.0"