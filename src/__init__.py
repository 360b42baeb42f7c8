"""forumwire: compacted forum payloads, denormalization and one-shot hydration."""

from forumwire.version import __version__

__all__ = ["__version__"]
