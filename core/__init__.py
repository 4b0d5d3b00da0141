"""Core configuration, logging and time helpers."""
