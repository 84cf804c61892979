"""Tests for the core doubles."""
