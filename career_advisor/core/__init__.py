"""Core configuration, security and error helpers."""
