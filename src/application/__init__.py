"""
Application layer - Validators that depend on external capabilities.

This layer contains:
- Port definitions (CUE compiler, revision store, revision gathering)
- Application services (template validation, revision immutability, admission)

IMPORT RULES:
- CAN import from: domain, infrastructure.observability
- CANNOT import from: other infrastructure modules, bootstrap
"""
