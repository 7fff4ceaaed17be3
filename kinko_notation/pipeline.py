"""
Render pass for Kinko-ryū scores.

This module strings the stages of one render pass together:
resolve entries, build notes, apply display options, lay out, draw.
Changing any display option means running the whole pass again.
"""

import logging

from kinko_notation import constants
from kinko_notation.layout import layout_notes
from kinko_notation.models import (
    ColumnLayout,
    RenderOptions,
    RenderResult,
    ScoreEntry,
)
from kinko_notation.modifiers import (
    AlterationMark,
    DurationDot,
    Modifier,
    OctaveMark,
    TechniqueMark,
)
from kinko_notation.notes import ShakuNote
from kinko_notation.pitch_mapper import (
    OCTAVE_NAMES,
    NotationError,
    is_western_pitch,
    lookup_pitch,
    parse_note,
)
from kinko_notation.surfaces import DrawingSurface, SvgSurface

logger = logging.getLogger(__name__)

# Blank border around the score on generated canvases
CANVAS_PADDING = 10


def _resolve_entry(entry: ScoreEntry) -> tuple[str, int, list[str]]:
    """Return the symbol to draw, its register and its alteration marks.

    A Western pitch takes step, register and meri from the fingering table;
    romaji and kana take the entry's own octave. `pitch` wins over `symbol`
    when both are given. Lookup errors propagate.
    """
    alterations = list(entry.alterations)
    if entry.pitch is None:
        return entry.symbol, entry.octave, alterations

    if is_western_pitch(entry.pitch):
        mapping = lookup_pitch(entry.pitch)
        if mapping.alteration and mapping.alteration not in alterations:
            alterations.insert(0, mapping.alteration)
        return mapping.step, mapping.octave, alterations

    return parse_note(entry.pitch).romaji, entry.octave, alterations


def build_notes(entries: list[ScoreEntry]) -> list[ShakuNote]:
    """Turn score entries into notes with their modifiers attached.

    Modifiers are attached in drawing order: octave mark, alteration marks,
    technique marks, duration dot.

    Args:
        entries: Validated score entries in reading order.

    Returns:
        One ShakuNote per entry, all at the origin.

    Raises:
        NotationError: If an entry's `pitch` cannot be resolved.
    """
    notes = []
    for i, entry in enumerate(entries):
        if entry.rest:
            note = ShakuNote(
                entry.symbol or "rest", duration=entry.duration, is_rest=True
            )
            if entry.dotted:
                note.add_modifier(DurationDot())
            notes.append(note)
            continue

        try:
            symbol, octave, alterations = _resolve_entry(entry)
        except NotationError as e:
            logger.error(f"Cannot resolve score entry {i}: {e}")
            raise

        modifiers: list[Modifier] = []
        if octave > 0:
            modifiers.append(OctaveMark(octave))
        modifiers.extend(AlterationMark(kind) for kind in alterations)
        modifiers.extend(TechniqueMark(kind) for kind in entry.techniques)
        if entry.dotted:
            modifiers.append(DurationDot())

        notes.append(
            ShakuNote(
                symbol, duration=entry.duration, modifiers=modifiers, octave=octave
            )
        )

    logger.debug("Built %d notes from %d entries", len(notes), len(entries))
    return notes


def apply_render_options(
    notes: list[ShakuNote], options: RenderOptions | None = None
) -> list[ShakuNote]:
    """Apply typography, colors and the octave-mark toggle to notes in place.

    Args:
        notes: Notes to configure.
        options: Display options; defaults when None.

    Returns:
        The same notes, for chaining.
    """
    options = options or RenderOptions()
    color = options.colors.note
    for note in notes:
        note.set_font_size(options.note_font_size)
        note.set_font_weight(options.note_font_weight)
        note.set_font_family(options.note_font_family)
        note.set_color(color)

        modifiers = note.get_modifiers()
        if not options.show_octave_marks:
            modifiers = [m for m in modifiers if not isinstance(m, OctaveMark)]
        note.set_modifiers([m.set_color(color) for m in modifiers])
    return notes


def debug_label(index: int, note: ShakuNote) -> str:
    """Label shown next to a note when debug labels are on.

    Format: "<n> <romaji> (<register>) <alterations>", with n starting at 1.
    """
    if note.is_rest:
        name = "rest"
    elif note.get_symbol_info() is not None:
        name = note.get_symbol_info().romaji
    else:
        name = note.get_kana()
    alterations = " ".join(
        m.kind for m in note.get_modifiers() if isinstance(m, AlterationMark)
    )
    return f"{index + 1} {name} ({OCTAVE_NAMES[note.get_octave()]}) {alterations}".rstrip()


def render_notes(
    notes: list[ShakuNote],
    surface: DrawingSurface,
    options: RenderOptions | None = None,
) -> None:
    """Draw positioned notes, plus debug labels when enabled."""
    options = options or RenderOptions()
    label_color = options.colors.debug_label
    for i, note in enumerate(notes):
        note.render(surface)
        if options.show_debug_labels:
            x, y = note.get_position()
            surface.draw_text(
                debug_label(i, note),
                x + constants.DEBUG_LABEL_OFFSET_X,
                y + constants.DEBUG_LABEL_OFFSET_Y,
                constants.DEBUG_LABEL_FONT_SIZE,
                constants.DEBUG_LABEL_FONT_FAMILY,
                label_color,
                "start",
            )


def prepare_score(
    entries: list[ScoreEntry], options: RenderOptions | None = None
) -> tuple[list[ShakuNote], ColumnLayout]:
    """Build, configure and lay out notes without drawing them."""
    options = options or RenderOptions()
    notes = apply_render_options(build_notes(entries), options)
    return notes, layout_notes(notes, options.layout)


def render_score(
    entries: list[ScoreEntry],
    surface: DrawingSurface,
    options: RenderOptions | None = None,
) -> RenderResult:
    """Run a complete render pass onto `surface`.

    Args:
        entries: Score entries in reading order.
        surface: Surface to draw on.
        options: Display options; defaults when None.

    Returns:
        RenderResult with the drawn notes and their layout.

    Raises:
        NotationError: If an entry's `pitch` cannot be resolved.
    """
    options = options or RenderOptions()
    notes, layout = prepare_score(entries, options)
    render_notes(notes, surface, options)
    logger.info(
        "Rendered %d notes in %d columns", len(notes), layout.total_columns
    )
    return RenderResult(notes=notes, layout=layout)


def debug_label_right(notes: list[ShakuNote]) -> float:
    """Estimated right edge of the widest debug label among positioned notes."""
    char_width = constants.DEBUG_LABEL_FONT_SIZE * constants.DEBUG_LABEL_CHAR_WIDTH_RATIO
    return max(
        note.x + constants.DEBUG_LABEL_OFFSET_X + len(debug_label(i, note)) * char_width
        for i, note in enumerate(notes)
    )


def canvas_size(
    layout: ColumnLayout,
    options: RenderOptions | None = None,
    notes: list[ShakuNote] | None = None,
) -> tuple[float, float]:
    """Canvas width and height that fit a layout with padding.

    The width covers every column, and the debug labels of `notes` when
    labels are shown. The height covers the note extent plus the gap
    reserved below dotted notes.
    """
    options = options or RenderOptions()
    params = options.layout
    if layout.extent is None:
        return params.column_width, params.top_margin + CANVAS_PADDING
    columns_width = layout.total_columns * params.column_pitch - params.column_spacing
    right = max(columns_width, layout.extent.right)
    if options.show_debug_labels and notes:
        right = max(right, debug_label_right(notes))
    width = right + CANVAS_PADDING
    height = (
        layout.extent.bottom + params.duration_dot_extra_spacing + CANVAS_PADDING
    )
    return width, height


def render_svg(
    entries: list[ScoreEntry], options: RenderOptions | None = None
) -> str:
    """Render a score to a standalone SVG document sized to fit it."""
    options = options or RenderOptions()
    notes, layout = prepare_score(entries, options)
    width, height = canvas_size(layout, options, notes)
    surface = SvgSurface(width, height, background=options.colors.background)
    surface.open_group("kinko-score")
    render_notes(notes, surface, options)
    surface.close_group()
    return surface.to_svg()
