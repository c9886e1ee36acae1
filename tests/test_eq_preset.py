"""
EQ Preset Tests
"""

from soundgraph.models.eq_preset import (
    EQ_BAND_LABELS,
    EQ_FREQUENCIES,
    EQ_PRESETS,
    EQPreset,
    get_preset_by_name,
    get_preset_gains,
    preset_equalizer,
)


class TestEQPresets:
    """Tests for EQ presets."""

    def test_eq_preset_values(self):
        """Test that all presets are defined."""
        for preset in EQPreset:
            assert preset in EQ_PRESETS
            assert len(EQ_PRESETS[preset].gains) == len(EQ_FREQUENCIES)

    def test_frequencies_ascending(self):
        assert list(EQ_FREQUENCIES) == sorted(EQ_FREQUENCIES)

    def test_preset_equalizer_is_ordered_mapping(self):
        equalizer = preset_equalizer(EQPreset.POP)
        assert list(equalizer) == list(EQ_FREQUENCIES)
        assert equalizer[500.0] == 4.0

    def test_flat_preset_is_zero(self):
        assert all(g == 0.0 for g in get_preset_gains(EQPreset.FLAT))

    def test_rock_preset_has_v_shape(self):
        """Bass and treble above the midrange."""
        rock = get_preset_gains(EQPreset.ROCK)
        assert rock[0] > rock[4]
        assert rock[8] > rock[4]

    def test_bass_boost_preset(self):
        bass = get_preset_gains(EQPreset.BASS_BOOST)
        assert bass[0] > 5.0
        assert bass[1] > 5.0
        assert bass[9] == 0.0

    def test_get_preset_by_name_valid(self):
        assert get_preset_by_name("rock") == EQPreset.ROCK
        assert get_preset_by_name("ROCK") == EQPreset.ROCK
        assert get_preset_by_name("Hip_Hop") == EQPreset.HIP_HOP

    def test_get_preset_by_name_invalid(self):
        assert get_preset_by_name("invalid") == EQPreset.FLAT
        assert get_preset_by_name("") == EQPreset.FLAT

    def test_eq_band_labels(self):
        assert len(EQ_BAND_LABELS) == len(EQ_FREQUENCIES)
        assert EQ_BAND_LABELS[0] == "31Hz"
        assert EQ_BAND_LABELS[5] == "1kHz"
        assert EQ_BAND_LABELS[9] == "16kHz"
