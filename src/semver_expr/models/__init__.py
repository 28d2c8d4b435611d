"""Immutable value types for parsed versions."""

from __future__ import annotations

from .metadata_version import MetadataVersion, compare_metadata
from .normal_version import NormalVersion
from .version import BUILD_AWARE_ORDER, Builder, Version, compare_with_builds

__all__ = [
    "BUILD_AWARE_ORDER",
    "Builder",
    "MetadataVersion",
    "NormalVersion",
    "Version",
    "compare_metadata",
    "compare_with_builds",
]
