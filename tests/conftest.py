"""Shared pytest configuration for the explorer test suite."""

from __future__ import annotations

from hypothesis import settings

# The first call of every jitted function includes compilation time.
settings.register_profile("jit", deadline=None, max_examples=200)
settings.load_profile("jit")
