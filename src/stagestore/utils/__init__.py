"""Dependency-light helpers shared across STAGESTORE.

Small, stateless functions that adapters and entrypoints lean on, kept out of
feature packages. Nothing here knows about content names, options or the CLI.

Modules:
- ``fs``: recursive file listing and copy-with-parent-creation.

Import specific helpers from their defining modules; nothing is re-exported
at the package level.
"""
