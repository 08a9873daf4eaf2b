"""Harness-facing training environment."""
