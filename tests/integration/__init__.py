"""Integration tests.

`FileDataStore` and `stagestore.utils.fs` against real temporary directories
(``tmp_path``). Checks here may look at the files on disk.
"""
