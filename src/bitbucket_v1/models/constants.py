"""Shared default values for Bitbucket v1 models."""

EMPTY_STRING = ""
UNKNOWN = "Unknown"
