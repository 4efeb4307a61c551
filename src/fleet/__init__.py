"""Fleet - local state for the fleet device-management CLI.

By default, Fleet's internal logging is disabled when used as a library.
Library users can enable logging by calling fleet.enable_logging().
"""

from fleet.common import disable_library_logging, enable_library_logging

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "enable_logging",
]
