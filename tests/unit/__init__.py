"""Unit tests.

Isolated checks of a single module. No staging root on disk; use
`MemoryDataStore` or small fakes at boundaries.
"""
