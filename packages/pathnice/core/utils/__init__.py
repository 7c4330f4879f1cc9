"""Shared utilities for path-nice."""
