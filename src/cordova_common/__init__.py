"""Shared pieces used by the platform parsers.

This package contains:
- The error types raised while updating platform projects
- A read-only view over the app's config.xml
- XML and filesystem helpers
"""
