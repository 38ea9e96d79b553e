"""
Test Suite

Contains unit tests for the client library.

Structure:
- tests/unit/: Tests for request encoding, wire decoding, configuration and the
  HTTP client against a local aiohttp test server

Uses pytest with pytest-asyncio for testing async functionality.
"""
