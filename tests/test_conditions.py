"""Tests for access profile condition bit lookup."""

import pytest
from mifare_access.rfid.conditions import (
    ConditionTriple, DataBlockProfile, TrailerProfile, InvalidProfileError,
    DATA_BLOCK_CONDITIONS, TRAILER_CONDITIONS,
    DEFAULT_DATA_BLOCK_PROFILE, DEFAULT_TRAILER_PROFILE,
    data_block_condition, trailer_condition,
    as_data_block_profile, as_trailer_profile,
)


class TestDataBlockConditions:
    @pytest.mark.parametrize("profile, bits", [
        (DataBlockProfile.KEYAB_KEYAB_KEYAB_KEYAB, (0, 0, 0)),
        (DataBlockProfile.KEYAB_NEVER_NEVER_NEVER, (0, 1, 0)),
        (DataBlockProfile.KEYAB_KEYB_NEVER_NEVER, (1, 0, 0)),
        (DataBlockProfile.KEYAB_KEYB_KEYB_KEYAB, (1, 1, 0)),
        (DataBlockProfile.KEYAB_NEVER_NEVER_KEYAB, (0, 0, 1)),
        (DataBlockProfile.KEYB_KEYB_NEVER_NEVER, (0, 1, 1)),
        (DataBlockProfile.KEYB_NEVER_NEVER_NEVER, (1, 0, 1)),
        (DataBlockProfile.NEVER_NEVER_NEVER_NEVER, (1, 1, 1)),
    ])
    def test_condition_bits(self, profile, bits):
        assert data_block_condition(profile) == ConditionTriple.from_bits(*bits)

    def test_table_covers_every_profile(self):
        assert set(DATA_BLOCK_CONDITIONS) == set(DataBlockProfile)
        assert len(DataBlockProfile) == 8

    def test_every_bit_pattern_used_once(self):
        patterns = {tuple(c.to_list()) for c in DATA_BLOCK_CONDITIONS.values()}
        assert len(patterns) == 8

    def test_string_value_accepted(self):
        assert data_block_condition("KEYAB_KEYB_KEYB_KEYAB") == ConditionTriple(True, True, False)


class TestTrailerConditions:
    @pytest.mark.parametrize("profile, bits", [
        (TrailerProfile.NEVER_KEYA_KEYA_NEVER_KEYA_KEYA, (0, 0, 0)),
        (TrailerProfile.NEVER_NEVER_KEYA_NEVER_KEYA_NEVER, (0, 1, 0)),
        (TrailerProfile.NEVER_KEYB_KEYAB_NEVER_NEVER_KEYB, (1, 0, 0)),
        (TrailerProfile.NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER, (1, 1, 0)),
        (TrailerProfile.NEVER_KEYA_KEYA_KEYA_KEYA_KEYA, (0, 0, 1)),
        (TrailerProfile.NEVER_KEYB_KEYAB_KEYB_NEVER_KEYB, (0, 1, 1)),
        (TrailerProfile.NEVER_NEVER_KEYAB_KEYB_NEVER_NEVER, (1, 0, 1)),
        (TrailerProfile.NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER_LOCKED, (1, 1, 1)),
    ])
    def test_condition_bits(self, profile, bits):
        assert trailer_condition(profile) == ConditionTriple.from_bits(*bits)

    def test_table_covers_every_profile(self):
        assert set(TRAILER_CONDITIONS) == set(TrailerProfile)
        assert len(TrailerProfile) == 8

    def test_locked_variant_is_distinct(self):
        """Both read-only trailer variants exist with different bits."""
        a = trailer_condition(TrailerProfile.NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER)
        b = trailer_condition(TrailerProfile.NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER_LOCKED)
        assert a != b


class TestDefaults:
    def test_default_profiles(self):
        assert DEFAULT_DATA_BLOCK_PROFILE is DataBlockProfile.KEYAB_KEYAB_KEYAB_KEYAB
        assert DEFAULT_TRAILER_PROFILE is TrailerProfile.NEVER_KEYA_KEYA_KEYA_KEYA_KEYA


class TestProfileValidation:
    @pytest.mark.parametrize("value", ["BOGUS", "", 0, 3, None, True, b"KEYAB_KEYAB_KEYAB_KEYAB"])
    def test_invalid_data_block_profile(self, value):
        with pytest.raises(InvalidProfileError):
            as_data_block_profile(value)

    @pytest.mark.parametrize("value", ["BOGUS", 7, None])
    def test_invalid_trailer_profile(self, value):
        with pytest.raises(InvalidProfileError):
            as_trailer_profile(value)

    def test_trailer_profile_rejected_as_data_block(self):
        with pytest.raises(InvalidProfileError):
            data_block_condition(TrailerProfile.NEVER_KEYA_KEYA_KEYA_KEYA_KEYA)

    def test_data_block_profile_rejected_as_trailer(self):
        with pytest.raises(InvalidProfileError):
            trailer_condition(DataBlockProfile.KEYAB_KEYAB_KEYAB_KEYAB)

    def test_invalid_profile_error_is_value_error(self):
        with pytest.raises(ValueError):
            as_trailer_profile("KEYAB_KEYAB_KEYAB_KEYAB")

    def test_member_passes_through(self):
        p = DataBlockProfile.KEYB_KEYB_NEVER_NEVER
        assert as_data_block_profile(p) is p
        assert as_data_block_profile("KEYB_KEYB_NEVER_NEVER") is p
