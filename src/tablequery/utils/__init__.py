"""Shared utilities for tablequery."""
