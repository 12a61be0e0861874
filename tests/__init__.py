"""Tests for mastoclient."""
