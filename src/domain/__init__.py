"""Domain layer - Pure version and facade logic.

This layer contains version arithmetic, the versioned proxy, API bundles,
the compatibility registry and the protocols (ports) the facade depends on.
It has NO dependencies on any framework or infrastructure - it is pure
Python.

Structure:
- versioning/: Version parsing, encoding and registry key conversion
- public_api/: Proxies, bundles, probe outcomes and the registry
- protocols/: Module loader and logger ports
- errors/: Query failure types returned inside Result
"""
