"""Reporters — rich terminal output and JSON."""
