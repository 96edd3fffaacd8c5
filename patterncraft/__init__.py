"""Runnable examples of the classic creational, structural and behavioural design patterns."""

__version__ = "1.0.0"