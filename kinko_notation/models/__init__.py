"""Domain models for the kinko-notation renderer.

This module provides a centralized location for all data models used by the
render pass. It includes:

- Core domain models (KinkoSymbol, PitchMapping, Point, BoundingBox)
- Score input records (ScoreEntry)
- Configuration for display and layout (RenderOptions, LayoutParams)
- Layout and render results (ColumnLayout, RenderResult)
- Recorded draw operations (DrawCall)

All models are built using Pydantic for data validation, ensuring clear
interfaces between the mapper, the note model, the layout and the surfaces.
"""

# Re-export core models
from kinko_notation.models.core_models import (
    BoundingBox,
    KinkoSymbol,
    Octave,
    PitchMapping,
    Point,
    Step,
)

# Re-export score input models
from kinko_notation.models.score_models import (
    Alteration,
    Duration,
    ScoreEntry,
    Technique,
)

# Re-export setting models
from kinko_notation.models.settings_models import (
    THEMES,
    LayoutParams,
    RenderOptions,
    Theme,
    ThemeColors,
)

# Re-export pipeline models
from kinko_notation.models.pipeline_models import (
    ColumnInfo,
    ColumnLayout,
    NotePosition,
    RenderResult,
)

# Re-export drawing models
from kinko_notation.models.drawing_models import DrawCall, TextAnchor
