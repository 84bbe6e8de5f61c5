"""Canonical ordering and cleanup for workflow-definition JSON documents."""

__version__ = "0.1.0"
