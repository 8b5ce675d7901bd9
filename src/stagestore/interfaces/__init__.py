"""Interfaces (application boundary) for STAGESTORE.

Defines framework-free contracts: the data store ABC, the content origin
variants and the small DTOs shared by adapters and entrypoints.

Dependency rule: this package is independent; do not import from any
`stagestore.*` modules. It may be imported by `stagestore.adapters`,
`stagestore.bootstrap` and `stagestore.config`.
"""
