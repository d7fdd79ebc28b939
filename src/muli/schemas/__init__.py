"""Pydantic configuration schemas for MULI.

Exports
-------
resolve_build_config : function
    Single entrypoint for build-mode resolution
BuildConfig : class
    Frozen build configuration (checked or release)
"""

from muli.schemas.base import MuliBaseModel
from muli.schemas.build import BuildConfig, BUILD_MODE_ENV, resolve_build_config

__all__ = [
    'MuliBaseModel',
    'BuildConfig',
    'BUILD_MODE_ENV',
    'resolve_build_config',
]
