"""
Test Package for the Store API
Unit tests for the query engine and integration tests for services and HTTP routes.
"""
