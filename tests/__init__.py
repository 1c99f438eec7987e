"""
Tests for the record_platform package.

Tests cover:
- Network resolution and environment overrides (test_resolver.py, test_config.py)
- Read queries and degraded defaults (test_reader.py)
- Write preconditions, pending flag and refresh ordering (test_writer.py)
- State store, models and errors (test_state.py, test_models.py)
- Controller facade end to end (test_controller.py)
- web3.py transports against mocked providers (test_transport.py)
"""
