"""Tests for stage layouts and the stage pattern provider."""

import pytest

from brickbreaker.exceptions import StageDataError
from brickbreaker.game.entities import BrickType
from brickbreaker.game.stages import StagePatternProvider, load_stage_patterns


@pytest.fixture
def provider():
    return StagePatternProvider()


def write_stage_file(tmp_path, body: str):
    path = tmp_path / 'stages.yaml'
    path.write_text(body)
    return path


class TestPackagedStages:
    """Tests for the shipped stage layouts."""

    @pytest.mark.parametrize('stage', range(1, 12))
    def test_every_authored_stage_has_32_bricks(self, provider, stage):
        assert len(provider.pattern_for(stage)) == 32

    def test_patterns_are_deterministic(self, provider):
        assert provider.pattern_for(7) == provider.pattern_for(7)
        assert provider.pattern_for(7) == StagePatternProvider().pattern_for(7)

    @pytest.mark.parametrize('stage', [1, 2, 3, 4])
    def test_early_stages_are_all_normal(self, provider, stage):
        assert set(provider.pattern_for(stage)) == {BrickType.NORMAL}

    def test_stage_5_introduces_strong(self, provider):
        assert BrickType.STRONG in provider.pattern_for(5)

    def test_stage_7_is_all_strong(self, provider):
        assert set(provider.pattern_for(7)) == {BrickType.STRONG}

    def test_late_stages_mix_special_and_unbreakable(self, provider):
        pattern = provider.pattern_for(11)
        assert BrickType.SPECIAL in pattern
        assert BrickType.UNBREAKABLE in pattern

    def test_row_major_order(self, provider):
        # Stage 8 corners of the first row are unbreakable
        pattern = provider.pattern_for(8)
        assert pattern[0] == BrickType.UNBREAKABLE
        assert pattern[7] == BrickType.UNBREAKABLE
        assert pattern[8] == BrickType.NORMAL

    @pytest.mark.parametrize('stage', [12, 15, 20])
    def test_stages_past_11_reuse_stage_11(self, provider, stage):
        assert provider.pattern_for(stage) == provider.pattern_for(11)

    @pytest.mark.parametrize('stage', [0, -3])
    def test_stages_below_1_clamp(self, provider, stage):
        assert provider.pattern_for(stage) == provider.pattern_for(1)

    def test_names(self, provider):
        assert provider.name_for(1) == "Warm Up"
        assert provider.name_for(20) == provider.name_for(11)

    def test_max_stages_default(self, provider):
        assert provider.max_stages == 20


class TestStageFileValidation:
    """Tests for malformed stage files."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(StageDataError):
            load_stage_patterns(tmp_path / 'missing.yaml')

    def test_invalid_yaml(self, tmp_path):
        path = write_stage_file(tmp_path, "stages: [unclosed\n")
        with pytest.raises(StageDataError):
            load_stage_patterns(path)

    def test_no_stages(self, tmp_path):
        path = write_stage_file(tmp_path, "layout_key: {N: NORMAL}\n")
        with pytest.raises(StageDataError, match="no stages"):
            load_stage_patterns(path)

    def test_wrong_row_count(self, tmp_path):
        path = write_stage_file(tmp_path, (
            "layout_key: {N: NORMAL}\n"
            "stages:\n"
            "  1:\n"
            "    layout: |\n"
            "      NNNNNNNN\n"
        ))
        with pytest.raises(StageDataError, match="4 rows of 8"):
            load_stage_patterns(path)

    def test_unknown_symbol(self, tmp_path):
        path = write_stage_file(tmp_path, (
            "layout_key: {N: NORMAL}\n"
            "stages:\n"
            "  1:\n"
            "    layout: |\n"
            "      NNNNNNNN\n"
            "      NNNNNNNN\n"
            "      NNNXNNNN\n"
            "      NNNNNNNN\n"
        ))
        with pytest.raises(StageDataError, match="unknown brick 'X' at row 2, col 3"):
            load_stage_patterns(path)

    def test_missing_stage_1(self, tmp_path):
        path = write_stage_file(tmp_path, (
            "layout_key: {N: NORMAL}\n"
            "stages:\n"
            "  2:\n"
            "    layout: |\n"
            "      NNNNNNNN\n"
            "      NNNNNNNN\n"
            "      NNNNNNNN\n"
            "      NNNNNNNN\n"
        ))
        with pytest.raises(StageDataError, match="no stage 1"):
            load_stage_patterns(path)

    def test_gaps_fall_back_to_previous_stage(self, tmp_path):
        path = write_stage_file(tmp_path, (
            "layout_key: {N: NORMAL, S: STRONG}\n"
            "stages:\n"
            "  1:\n"
            "    layout: |\n"
            "      NNNNNNNN\n"
            "      NNNNNNNN\n"
            "      NNNNNNNN\n"
            "      NNNNNNNN\n"
            "  3:\n"
            "    name: Third\n"
            "    layout: |\n"
            "      SSSSSSSS\n"
            "      SSSSSSSS\n"
            "      SSSSSSSS\n"
            "      SSSSSSSS\n"
        ))
        provider = StagePatternProvider(path)

        assert provider.pattern_for(2) == provider.pattern_for(1)
        assert provider.name_for(3) == "Third"
        assert provider.name_for(1) == "Stage 1"
        assert provider.pattern_for(9) == provider.pattern_for(3)
