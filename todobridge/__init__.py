"""Todo bridge: todo service backed by the task API."""

from todobridge.core.constants import PACKAGE_VERSION

__version__ = PACKAGE_VERSION
