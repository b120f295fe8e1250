"""Gitify Client widgets."""
