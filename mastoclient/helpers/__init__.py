"""Helpers for mastoclient."""
