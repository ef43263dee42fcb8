"""Colour tokens for the site, rendered into templates as CSS variables."""

from typing import Dict

LATTE: Dict[str, str] = {
    "rosewater": "#dc8a78",
    "flamingo": "#dd7878",
    "magenta": "#da32a4",
    "pink": "#ea76cb",
    "mauve": "#8839ef",
    "red": "#d20f39",
    "maroon": "#e64553",
    "peach": "#fe640b",
    "yellow": "#df8e1d",
    "green": "#40a02b",
    "teal": "#179299",
    "sapphire": "#209fb5",
    "sky": "#04a5e5",
    "lavender": "#7287fd",
    "blue": "#1e66f5",
    "gray": "#3c3f59",
    "text": "#4c4f69",
    "subtext1": "#5c5f77",
    "subtext0": "#6c6f85",
    "overlay2": "#7c7f93",
    "overlay1": "#8c8fa1",
    "overlay0": "#9ca0b0",
    "surface2": "#acb0be",
    "surface1": "#bcc0cc",
    "surface0": "#ccd0da",
    "crust": "#dce0e8",
    "mantle": "#e6e9ef",
    "base": "#eff1f5",
}

# Prose element -> palette colour
PROSE: Dict[str, str] = {
    "body": "text",
    "headings": "gray",
    "links": "sapphire",
    "bold": "gray",
    "counters": "gray",
    "bullets": "gray",
    "hr": "surface2",
    "quotes": "subtext1",
    "quote-borders": "surface1",
    "code": "gray",
    "th-borders": "surface2",
    "td-borders": "surface0",
}


def css_variables(palette: Dict[str, str] = LATTE) -> str:
    lines = [f"--latte-{name}: {value};" for name, value in palette.items()]
    lines += [f"--prose-{name}: var(--latte-{color});" for name, color in PROSE.items()]
    return ":root {\n  " + "\n  ".join(lines) + "\n}"
