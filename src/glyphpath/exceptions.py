"""Exception hierarchy for Glyphpath."""


class GlyphPathError(Exception):
    """Base exception for all Glyphpath errors."""

    pass


class FontError(GlyphPathError):
    """Errors related to font construction."""

    pass


class ConstructionError(FontError):
    """A Font could not be created from the given source."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load font '{source}': {reason}")


class FontParseError(ConstructionError):
    """Font data is not a valid or supported font format."""

    pass


class FontSourceError(ConstructionError):
    """Font file is missing or cannot be read."""

    pass


class GlyphError(GlyphPathError):
    """Errors related to individual glyphs."""

    pass


class ExtractionError(GlyphError):
    """The outline of a glyph could not be loaded."""

    def __init__(self, glyph: int, reason: str) -> None:
        self.glyph = glyph
        self.reason = reason
        super().__init__(f"Cannot extract outline of glyph {glyph}: {reason}")


class PathError(GlyphPathError):
    """Errors related to path construction."""

    pass


class TextPathFrozenError(PathError):
    """A frozen TextPath was modified."""

    def __init__(self) -> None:
        super().__init__("TextPath is frozen and can no longer be modified")
