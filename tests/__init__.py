"""Test suite for path-nice."""
