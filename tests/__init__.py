"""
Tests for the mapping metadata package.

This directory contains unit tests for:
- The fluent builders (builder/)
- Class, field, association and column metadata (metadata/)
- Naming strategies, column types, configuration and logging setup
"""
