"""minicurl package providing a small curl-like HTTP client."""

from __future__ import annotations

__all__ = ["__version__"]

# Semantic version for package consumers.
__version__ = "0.1.0"
