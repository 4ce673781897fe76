"""Package registry clients.

This module exports the client used to query published crate versions.
"""

from upstall.registry.client import CRATES_IO_API_URL, RegistryClient, RegistryError

__all__ = ["CRATES_IO_API_URL", "RegistryClient", "RegistryError"]
