"""Application layer - Startup orchestration.

This layer resolves API modules through the module loader port and
assembles the compatibility registry. It orchestrates domain objects but
contains no version arithmetic of its own.

Structure:
- services/: ApiLoader (fallback ladder) and BundleAssembler (initialize)
"""
