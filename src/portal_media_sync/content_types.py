"""MIME type and file extension lookups for media files."""

import mimetypes
from pathlib import PurePath
from typing import Optional, Union

DEFAULT_CONTENT_TYPE = "application/octet-stream"

# Web media types missing from, or mapped differently by, older interpreters
WEB_MEDIA_TYPES = {
    "image/webp": "webp",
    "image/avif": "avif",
    "image/svg+xml": "svg",
    "font/woff": "woff",
    "font/woff2": "woff2",
}


class ContentTypeRegistry:
    """
    Maps content types to file extensions and back.

    Backed by the built-in ``mimetypes`` tables only; the host's
    ``mime.types`` files are not consulted. The built-in tables change
    between Python releases, so the common web media types in
    ``WEB_MEDIA_TYPES`` are registered explicitly.
    """

    def __init__(self):
        self._types = mimetypes.MimeTypes()
        for content_type, extension in WEB_MEDIA_TYPES.items():
            self.register(content_type, extension)

    def register(self, content_type: str, extension: str) -> None:
        """Add a mapping; it takes precedence for lookups by content type."""
        ext = extension if extension.startswith(".") else f".{extension}"
        self._types.add_type(content_type, ext)
        # add_type appends, guess_extension returns the first match
        extensions = self._types.types_map_inv[True][content_type]
        extensions.remove(ext)
        extensions.insert(0, ext)

    def extension_for(self, content_type: Optional[str]) -> Optional[str]:
        """Return the extension (without dot) for *content_type*, or None if unknown."""
        if not content_type:
            return None
        mime = content_type.split(";", 1)[0].strip().lower()
        ext = self._types.guess_extension(mime)
        return ext[1:] if ext else None

    def content_type_for(self, path: Union[str, PurePath]) -> str:
        """Return the content type of *path* judged by its extension."""
        content_type, _ = self._types.guess_type(PurePath(path).name)
        return content_type or DEFAULT_CONTENT_TYPE
