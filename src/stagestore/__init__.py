"""STAGESTORE

A file-backed staging store for package contents. Named content items are
kept 1:1 as files under a temporary directory until the package is uploaded.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
