"""
Domains - Business logic modules.

Each domain is self-contained with:
- models.py: Data structures
- contracts.py: Interfaces
- Implementation modules
"""

__all__ = ["chat"]
