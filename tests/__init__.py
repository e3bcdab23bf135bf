"""Test suite for envdefault.

Unit tests live under unit/, grouped by package area (options, dispatch,
parsers, getenv, errors, infra), and are collected by conftest.py without
the ``test_`` file prefix.
"""
