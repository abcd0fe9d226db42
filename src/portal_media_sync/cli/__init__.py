from portal_media_sync import __version__

__all__ = ["__version__"]
