"""
Unit tests package.

Contains isolated unit tests for entities, services and repositories
that run without an HTTP layer.
"""
