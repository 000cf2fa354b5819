"""
Profiling Package

Lightweight, opt-in profiling markers for the frustum geometry routines.

Quick usage:
    from conefrustum.profiling import profile, perf_marker, enable_profiling

    enable_profiling()

    @profile
    def my_function():
        with perf_marker("my_section"):
            ...
"""

from .profile import (
    enable_profiling,
    is_profiling_enabled,
    reset_profile,
    get_profile_results,
    perf_marker,
    profile,
    _PROFILING_COMPILED_OUT,
)

__all__ = [
    'enable_profiling',
    'is_profiling_enabled',
    'reset_profile',
    'get_profile_results',
    'perf_marker',
    'profile',
]
