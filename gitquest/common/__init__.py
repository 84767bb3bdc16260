"""Shared helpers used across gitquest packages."""
