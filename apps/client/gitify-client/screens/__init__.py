"""Gitify Client screens."""
