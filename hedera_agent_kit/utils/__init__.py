"""Helpers shared by the normaliser and the tool prompts."""
