"""Layout and typography constants for Kinko-ryū score rendering.

Every geometric default used by the modifiers, the notes and the column
layout lives here so the values stay consistent across the package.
"""

# Octave mark (甲 / 大) drawn above-right of the note glyph
OCTAVE_MARK_FONT_SIZE = 12
OCTAVE_MARK_FONT_WEIGHT = 500
OCTAVE_MARK_OFFSET_X = 18
OCTAVE_MARK_OFFSET_Y = -22  # negative = above the baseline

# Note glyphs
NOTE_FONT_SIZE = 32
NOTE_FONT_WEIGHT = 400
NOTE_FONT_FAMILY = "Noto Sans JP, sans-serif"
NOTE_COLOR = "#000"

# Approximate glyph box relative to the font size
GLYPH_WIDTH_RATIO = 0.8
# Visual centre of a kana glyph above its baseline, as a fraction of font size
GLYPH_CENTER_RATIO = 0.4

# Meri/kari marks
ALTERATION_FONT_SIZE = 14
ALTERATION_FONT_WEIGHT = 500

# Duration dot
DURATION_DOT_EXTRA_SPACING = 12
DURATION_DOT_RADIUS = 2.5

# Column layout
COLUMN_WIDTH = 100
COLUMN_SPACING = 35
NOTES_PER_COLUMN = 10
NOTE_VERTICAL_SPACING = 44

# Smallest top margin that keeps an octave mark on the first row unclipped.
# Derived from the octave mark geometry, never set on its own.
TOP_MARGIN = abs(OCTAVE_MARK_OFFSET_Y) + OCTAVE_MARK_FONT_SIZE

# Debug labels
DEBUG_LABEL_FONT_SIZE = 7
DEBUG_LABEL_OFFSET_X = 25
DEBUG_LABEL_OFFSET_Y = -6
DEBUG_LABEL_FONT_FAMILY = "monospace"
# Advance of one monospace character as a fraction of the font size
DEBUG_LABEL_CHAR_WIDTH_RATIO = 0.6
