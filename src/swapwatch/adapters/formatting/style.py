# src/swapwatch/adapters/formatting/style.py
"""
Widget Style - Explicit Display Options

Every display option has a documented default and is resolved once, when
the style is built, instead of being probed on each render.

Files that USE this module:
- swapwatch.adapters.formatting.formatter (decimals for swap lines)
- swapwatch.app (WidgetStyle.from_settings)
- tests.test_formatter (unit tests)

Files that this module USES:
- swapwatch.shared.validators (colour validation)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from swapwatch.shared.validators import validate_color

if TYPE_CHECKING:
    from swapwatch.config.settings import Settings


@dataclass(frozen=True)
class WidgetStyle:
    """
    Display options for the swap board.

    Attributes:
        title_font: Font family of the board title (default: "inherit")
        body_font: Font family of swap rows (default: "inherit")
        detail_font: Font family of the detail line (default: "inherit")
        primary_text: Colour of title and body text (default: "inherit")
        secondary_text: Colour of detail text (default: "#666")
        corner_radius: Corner radius of the board and rows (default: "8px")
        percent_decimals: Decimals shown for completion percent (default: 1)
        amount_decimals: Decimals shown for asset amounts (default: 4)
    """
    title_font: str = "inherit"
    body_font: str = "inherit"
    detail_font: str = "inherit"
    primary_text: str = "inherit"
    secondary_text: str = "#666"
    corner_radius: str = "8px"
    percent_decimals: int = 1
    amount_decimals: int = 4

    def __post_init__(self) -> None:
        for name in ("primary_text", "secondary_text"):
            if not validate_color(getattr(self, name)):
                raise ValueError(f"Invalid colour for {name}: {getattr(self, name)!r}")
        if self.percent_decimals < 0 or self.amount_decimals < 0:
            raise ValueError("Decimals must be non-negative")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "WidgetStyle":
        """Build the style from the ``style_*`` fields of Settings."""
        return cls(
            title_font=settings.style_title_font,
            body_font=settings.style_body_font,
            detail_font=settings.style_detail_font,
            primary_text=settings.style_primary_text,
            secondary_text=settings.style_secondary_text,
            corner_radius=settings.style_corner_radius,
            percent_decimals=settings.style_percent_decimals,
            amount_decimals=settings.style_amount_decimals,
        )

    def css(self) -> dict[str, dict[str, str]]:
        """Inline style blocks for the widget, title, body and detail elements."""
        return {
            "widget": {"borderRadius": self.corner_radius},
            "title": {"fontFamily": self.title_font, "color": self.primary_text},
            "body": {"fontFamily": self.body_font, "color": self.primary_text},
            "details": {"fontFamily": self.detail_font, "color": self.secondary_text},
        }
