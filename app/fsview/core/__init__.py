"""Core infrastructure for fsview: errors, paths, preferences and theme."""
