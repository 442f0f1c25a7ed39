"""Well-known signal names grouped by semantic category."""

from __future__ import annotations

from typing import List

from .models import SignalRecord

SIGNAL_GROUPS: dict[str, tuple[tuple[str, str], ...]] = {
    "tone": (
        ("primary", "Primary visual tone"),
        ("secondary", "Secondary visual tone"),
        ("accent", "Accent visual tone"),
        ("neutral", "Neutral visual tone"),
        ("muted", "Muted visual tone"),
        ("subtle", "Subtle visual tone"),
    ),
    "size": (
        ("xs", "Extra small size"),
        ("sm", "Small size"),
        ("md", "Medium size"),
        ("lg", "Large size"),
        ("xl", "Extra large size"),
        ("2xl", "2x large size"),
        ("3xl", "3x large size"),
    ),
    "shape": (
        ("rounded", "Rounded corners"),
        ("pill", "Pill shape (fully rounded)"),
        ("square", "Square corners"),
        ("circle", "Circular shape"),
    ),
    "behavior": (
        ("hoverEnlarge", "Enlarge on hover"),
        ("hoverShrink", "Shrink on hover"),
        ("hoverFade", "Fade on hover"),
        ("pressShrink", "Shrink when pressed"),
        ("pressEnlarge", "Enlarge when pressed"),
        ("focusJump", "Jump effect on focus"),
        ("focusGlow", "Glow effect on focus"),
        ("slideUp", "Slide up animation"),
        ("slideDown", "Slide down animation"),
        ("slideLeft", "Slide left animation"),
        ("slideRight", "Slide right animation"),
        ("fadeIn", "Fade in animation"),
        ("fadeOut", "Fade out animation"),
        ("pulse", "Pulse animation"),
        ("bounce", "Bounce animation"),
        ("spin", "Spin animation"),
    ),
    "state": (
        ("loading", "Loading state"),
        ("disabled", "Disabled state"),
        ("error", "Error state"),
        ("success", "Success state"),
        ("warning", "Warning state"),
        ("active", "Active state"),
        ("selected", "Selected state"),
    ),
    "layout": (
        ("flex", "Flex layout"),
        ("grid", "Grid layout"),
        ("block", "Block layout"),
        ("inline", "Inline layout"),
        ("inlineBlock", "Inline block layout"),
        ("hidden", "Hidden element"),
        ("visible", "Visible element"),
        ("absolute", "Absolute positioning"),
        ("relative", "Relative positioning"),
        ("fixed", "Fixed positioning"),
        ("sticky", "Sticky positioning"),
    ),
    "script": (
        ("submitForm", "Submit form behavior"),
        ("confirmOnClick", "Show confirmation dialog on click"),
        ("toggle", "Toggle behavior"),
        ("expand", "Expand/collapse behavior"),
        ("modal", "Modal behavior"),
        ("dropdown", "Dropdown behavior"),
        ("tooltip", "Tooltip behavior"),
    ),
}


def all_signals() -> List[SignalRecord]:
    """Return every catalog signal as a flat list, tagged with its group."""
    return [
        SignalRecord(name=name, description=description, category=group)
        for group, entries in SIGNAL_GROUPS.items()
        for name, description in entries
    ]


__all__ = ["SIGNAL_GROUPS", "all_signals"]
