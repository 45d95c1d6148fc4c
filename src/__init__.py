"""
Vela Definition Guard - admission validators for capability definitions

Checks component, trait, policy and workflow step definitions before they
are accepted:
- spec.version is a three part numeric version
- spec.version and the revision name annotation are mutually exclusive
- embedded CUE templates compile and validate
- published definition revisions are never modified
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
