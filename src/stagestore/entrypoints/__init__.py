"""Entrypoints (inbound adapters) for STAGESTORE.

Expose the staging store to the outside world through the ``stagestore``
command. Parse and validate inputs, obtain a store from
`stagestore.bootstrap`, and present results.

Dependency rule: may import `stagestore.bootstrap` and
`stagestore.interfaces`; avoid importing `stagestore.adapters` directly.
"""
