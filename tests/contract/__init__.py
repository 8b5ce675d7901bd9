"""Contract tests.

Behavior of `AbstractDataStore` written once and run against every backend
through the parametrized ``store`` fixture. Assert only the public contract.
"""
