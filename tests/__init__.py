"""
sprout test suite
=================

This package contains tests for sprout.

Test Modules
------------
- test_models.py: Tests for the config schema and render context
- test_config.py: Tests for config file loading
- test_collector.py: Tests for parameter collection
- test_prompts.py: Tests for the questionary and preset prompters
- test_paths.py: Tests for destination path resolution
- test_engine.py: Tests for Jinja2 rendering of filenames and contents
- test_template.py: Tests for the Template lifecycle and tree rendering
- test_cli.py: Tests for the command-line interface

Running Tests
-------------
    # Run all tests
    pytest

    # Run specific module
    pytest tests/test_template.py

    # Run specific test class
    pytest tests/test_template.py::TestRender
"""
