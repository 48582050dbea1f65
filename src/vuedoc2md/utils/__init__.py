"""Shared utilities for vuedoc2md."""
