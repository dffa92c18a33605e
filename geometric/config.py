"""
Geometric - Global Configuration
JIT compilation settings in one place.
"""

from dataclasses import dataclass, field
import os


def _env_flag(name: str, default: bool) -> bool:
    """Read a boolean flag from the environment ("0", "false", "no", "off" are False)."""
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


@dataclass
class JitConfig:
    """Numba compilation settings."""
    # Cache compiled kernels on disk (__pycache__)
    cache: bool = True

    # Only applied to metric kernels (area, bounds, perimeter, mean).
    # Predicates and the hull rely on exact zero tests and never use it.
    fastmath: bool = False


@dataclass
class GeometryConfig:
    """Master configuration."""
    jit: JitConfig = field(default_factory=JitConfig)


# Global configuration instance, read once at import
CONFIG = GeometryConfig(
    jit=JitConfig(
        cache=_env_flag("GEOMETRIC_JIT_CACHE", True),
        fastmath=_env_flag("GEOMETRIC_JIT_FASTMATH", False),
    )
)
