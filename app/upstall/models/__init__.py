"""Data models for upstall.

This module exports the core data structures used throughout the application.
"""

from upstall.models.action import (
    Action,
    ActionResult,
    ActionType,
    create_install_action,
    create_nothing_action,
)
from upstall.models.manifest import InstalledManifest
from upstall.models.package import (
    InstalledPackage,
    SourceDescriptor,
    SourceKind,
    strip_exe_suffix,
)
from upstall.models.registry import CrateInfo, CrateResponse, CrateVersion

__all__ = [
    "Action",
    "ActionResult",
    "ActionType",
    "CrateInfo",
    "CrateResponse",
    "CrateVersion",
    "InstalledManifest",
    "InstalledPackage",
    "SourceDescriptor",
    "SourceKind",
    "create_install_action",
    "create_nothing_action",
    "strip_exe_suffix",
]
