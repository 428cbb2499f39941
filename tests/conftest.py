"""Test configuration and fixtures for the catalog service."""

pytest_plugins = ["tests.fixtures.core"]
