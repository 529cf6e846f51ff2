"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (rate feeds)
- Formatting (view output)
"""

__all__ = []
