"""Boxed catering order configurator."""
