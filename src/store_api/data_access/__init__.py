"""Persistence: engine and sessions, table models, criteria query engine, repositories."""
