"""Bootstrap (composition root) for STAGESTORE.

Assembles the application at runtime: reads configuration and wires a concrete
data store backend for the entrypoints.

Import rules:
- Entry points import *this* package (not adapters directly).
- This package may import `stagestore.adapters`, `stagestore.interfaces` and
  `stagestore.config`. Inner layers must not import `stagestore.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_data_store

__all__ = ["AppContainer", "bootstrap", "build_data_store"]
