"""Test suite for the versioned public API facade.

Test structure:
- unit/: Unit tests - domain, application and infrastructure in isolation
  (module loading from disk uses pytest's tmp_path)
- integration/: End-to-end resolution through importlib against on-disk
  packages
- utils/: Registry builders and sample API values shared by both
"""
