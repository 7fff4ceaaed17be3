"""Kinko-ryū shakuhachi notation rendering.

This package turns a sequence of score entries into vertical Kinko-ryū
notation: katakana note glyphs read top to bottom in columns, decorated with
octave, meri/kari, technique and duration marks.

A render pass consists of:
1. Resolving each entry to a base symbol and register (romaji, kana or
   Western pitch)
2. Building notes with their modifiers attached
3. Applying display options (font, theme colors, octave mark toggle)
4. Laying the notes out in fixed-capacity columns
5. Drawing them on a surface (SVG markup, matplotlib figure, or a recording)

Example:
    Render a short phrase to SVG:

    >>> from kinko_notation.models import RenderOptions, ScoreEntry
    >>> from kinko_notation.pipeline import render_svg
    >>>
    >>> entries = [
    ...     ScoreEntry(pitch="ro"),
    ...     ScoreEntry(pitch="tsu", dotted=True),
    ...     ScoreEntry(pitch="C#5"),
    ... ]
    >>> svg = render_svg(entries, RenderOptions(theme="dark"))
"""
