"""Stage pattern provider.

Maps a stage number to its fixed brick layout. Layouts are authored as
ASCII art in `levels/stages.yaml` and parsed once per file.

Examples:
    >>> provider = StagePatternProvider()
    >>> len(provider.pattern_for(1))
    32
    >>> provider.pattern_for(15) == provider.pattern_for(11)
    True
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from ..config import BRICK_ROWS, BRICK_COLS, MAX_STAGES
from ..exceptions import StageDataError
from ..logging import get_logger
from .entities.brick import BrickType

log = get_logger('stages')

STAGES_FILE = Path(__file__).parent / 'levels' / 'stages.yaml'

Pattern = Tuple[BrickType, ...]


@lru_cache(maxsize=8)
def load_stage_patterns(path: Path = STAGES_FILE) -> Dict[int, Tuple[str, Pattern]]:
    """Load and validate stage layouts from YAML.

    Args:
        path: Stage file to read

    Returns:
        Dict of stage number -> (stage name, pattern)

    Raises:
        StageDataError: If the file is missing, unparsable or any layout
            is not BRICK_ROWS rows of BRICK_COLS known symbols
    """
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise StageDataError(f"Failed to load stage file '{path}': {e}") from e

    if not isinstance(data, dict) or not data.get('stages'):
        raise StageDataError(f"Stage file '{path}' defines no stages")

    layout_key = data.get('layout_key', {})
    patterns: Dict[int, Tuple[str, Pattern]] = {}

    for stage, stage_data in data['stages'].items():
        pattern = _parse_layout(int(stage), stage_data, layout_key)
        patterns[int(stage)] = (stage_data.get('name', f"Stage {stage}"), pattern)

    if 1 not in patterns:
        raise StageDataError(f"Stage file '{path}' has no stage 1")

    log.debug("Loaded %d stage layouts from %s", len(patterns), path)
    return patterns


def _parse_layout(
    stage: int,
    stage_data: Dict[str, Any],
    layout_key: Dict[str, str],
) -> Pattern:
    """Parse one ASCII layout into a row-major pattern."""
    lines = [line.strip() for line in str(stage_data.get('layout', '')).strip().split('\n')]
    if len(lines) != BRICK_ROWS or any(len(line) != BRICK_COLS for line in lines):
        raise StageDataError(
            f"Stage {stage} layout must be {BRICK_ROWS} rows of {BRICK_COLS} bricks"
        )

    pattern = []
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            type_name = layout_key.get(char)
            if type_name is None or type_name not in BrickType.__members__:
                raise StageDataError(
                    f"Stage {stage} has unknown brick '{char}' at row {row}, col {col}"
                )
            pattern.append(BrickType[type_name])

    return tuple(pattern)


class StagePatternProvider:
    """Deterministic stage number -> brick layout mapping.

    Stage numbers are clamped to [1, max_stages]; stages past the last
    authored layout reuse it.
    """

    def __init__(self, path: Path = STAGES_FILE, max_stages: int = MAX_STAGES):
        self._patterns = load_stage_patterns(path)
        self._max_stages = max_stages
        self._last_authored = max(self._patterns)

    @property
    def max_stages(self) -> int:
        return self._max_stages

    def _resolve(self, stage: int) -> int:
        """Clamp a stage number to an authored layout."""
        stage = max(1, min(stage, self._max_stages, self._last_authored))
        while stage not in self._patterns:
            stage -= 1
        return stage

    def pattern_for(self, stage: int) -> Pattern:
        """Get the 32-brick row-major layout for a stage."""
        return self._patterns[self._resolve(stage)][1]

    def name_for(self, stage: int) -> str:
        """Get the display name of a stage's layout."""
        return self._patterns[self._resolve(stage)][0]
