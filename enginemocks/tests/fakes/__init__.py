"""Tests for the in-memory query fakes."""
