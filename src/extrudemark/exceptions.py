"""Exception hierarchy for Extrudemark."""


class ExtrudeMarkError(Exception):
    """Base exception for all Extrudemark errors."""

    pass


class ConfigurationError(ExtrudeMarkError):
    """Invalid configuration or a required resource is unavailable."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class FontLoadError(ConfigurationError):
    """Error loading a font file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class GlyphError(ExtrudeMarkError):
    """Errors related to glyph lookup."""

    pass


class GlyphNotFoundError(GlyphError):
    """Requested character has no outline in the outline source."""

    def __init__(self, character: str) -> None:
        self.character = character
        code_points = " ".join(f"U+{ord(c):04X}" for c in character)
        super().__init__(f"No glyph for character {character!r} ({code_points})")


class GeometryError(ExtrudeMarkError):
    """Errors in geometric calculations."""

    pass


class MalformedOutlineError(GeometryError):
    """Path commands reference an undefined current or control point."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class OutputError(ExtrudeMarkError):
    """Error writing a rendered document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write '{path}': {reason}")
