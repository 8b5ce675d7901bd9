"""Functional tests.

What a new user sees at the ``stagestore`` prompt; no store internals.
"""
