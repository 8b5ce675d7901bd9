"""Adapters (infrastructure) for STAGESTORE.

Concrete implementations of the `stagestore.interfaces` contracts: the
local-filesystem data store and its in-memory counterpart.

Dependency rule: may import `stagestore.interfaces`, `stagestore.config` and
`stagestore.utils`; interfaces must not import this package.
"""
