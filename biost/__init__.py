"""Three-dimensional single-precision vector arithmetic."""

from biost.logging_config import setup_logging
from biost.vector import Vector3d

__version__ = "0.1.0"

__all__ = ["Vector3d", "setup_logging", "__version__"]
