"""XCSoar output: profile store, text formats and file commit."""

from condor2nav.xcsoar.profile import ProfileStore
from condor2nav.xcsoar.writer import OutputWriter

__all__ = ["OutputWriter", "ProfileStore"]
