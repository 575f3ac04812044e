"""Common utilities shared across layers."""
