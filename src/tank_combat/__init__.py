"""Reinforcement-learning tank combat agent."""

__version__ = "0.1.0"
