"""Glyph outline representation and metadata.

A GlyphOutline holds the recorded pen operations of a glyph so it can be sent
to a worker process and replayed into any fontTools pen there.
"""

from dataclasses import dataclass, field
from typing import Any

# (operator, points) pairs as produced by fontTools' RecordingPen
PenRecording = list[tuple[str, tuple[Any, ...]]]


@dataclass
class GlyphMetadata:
    """Metadata about a glyph.

    Attributes:
        name: Glyph name (e.g., "A", "B", "exclam")
        unicode: Unicode code point (None for unencoded glyphs)
        advance_width: Horizontal advance width in font units
        left_side_bearing: Left side bearing in font units
    """

    name: str
    unicode: int | None
    advance_width: int
    left_side_bearing: int

    @property
    def char(self) -> str | None:
        """The character this glyph is mapped from, if encoded."""
        return chr(self.unicode) if self.unicode is not None else None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary representation of metadata
        """
        return {
            "name": self.name,
            "unicode": self.unicode,
            "advance_width": self.advance_width,
            "lsb": self.left_side_bearing
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphMetadata":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of metadata

        Returns:
            GlyphMetadata instance
        """
        return cls(
            name=data["name"],
            unicode=data["unicode"],
            advance_width=data["advance_width"],
            left_side_bearing=data["lsb"]
        )


@dataclass
class GlyphOutline:
    """A glyph's outline as recorded pen operations.

    Attributes:
        metadata: Glyph metadata (name, unicode, metrics)
        units_per_em: Units per em of the source font
        recording: Recorded pen operations in font units
    """

    metadata: GlyphMetadata
    units_per_em: int
    recording: PenRecording = field(default_factory=list)

    @property
    def name(self) -> str:
        """Glyph name from metadata."""
        return self.metadata.name

    def is_empty(self) -> bool:
        """Check if glyph has no outline (spaces and other non-printing glyphs)."""
        return not any(op in ("moveTo", "qCurveTo") for op, _ in self.recording)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "metadata": self.metadata.to_dict(),
            "upm": self.units_per_em,
            "recording": [(op, tuple(args)) for op, args in self.recording],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphOutline":
        """Deserialize from dictionary."""
        return cls(
            metadata=GlyphMetadata.from_dict(data["metadata"]),
            units_per_em=data["upm"],
            recording=[(op, tuple(args)) for op, args in data["recording"]],
        )
