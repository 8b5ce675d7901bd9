"""STAGESTORE test suite.

Folder taxonomy
- unit/         : Single module/class/function; the memory backend stands in for disk.
- contract/     : Data store behavior run against every backend.
- integration/  : The file backend and fs helpers against a real temporary directory.
- functional/   : First-run CLI stories (help, version).
- e2e/          : Full ``stagestore`` invocations through Click's CliRunner.

Each top-level folder's tests get a default marker of the same name (see
``tests/conftest.py``). Property-based tests use @pytest.mark.property.
"""
