"""Helpers for the LavaLyrics API client."""
