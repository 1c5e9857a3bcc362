"""Tests for MIFARE Classic 1K structure and sector trailer helpers."""

import pytest
from mifare_access.rfid.access_bits import AccessBytes, SectorAccessConfig
from mifare_access.rfid.conditions import TrailerProfile
from mifare_access.rfid.mifare import (
    sector_to_block,
    sector_trailer_block, data_blocks_for_sector,
    build_sector_trailer, parse_sector_trailer,
    NUM_SECTORS, BLOCKS_PER_SECTOR, BYTES_PER_BLOCK,
    DEFAULT_KEY_A, DEFAULT_KEY_B, DEFAULT_GENERAL_PURPOSE_BYTE,
)


class TestMifareConstants:
    def test_geometry(self):
        assert NUM_SECTORS == 16
        assert BLOCKS_PER_SECTOR == 4
        assert BYTES_PER_BLOCK == 16

    def test_transport_defaults(self):
        assert DEFAULT_KEY_A == bytes.fromhex("FFFFFFFFFFFF")
        assert DEFAULT_KEY_B == bytes.fromhex("FFFFFFFFFFFF")
        assert DEFAULT_GENERAL_PURPOSE_BYTE == 0x69


class TestBlockSectorMapping:
    def test_sector_to_block(self):
        assert sector_to_block(0) == 0
        assert sector_to_block(1) == 4
        assert sector_to_block(15) == 60

    def test_sector_trailer_block(self):
        assert sector_trailer_block(0) == 3
        assert sector_trailer_block(15) == 63

    def test_data_blocks_for_sector(self):
        assert data_blocks_for_sector(0) == [0, 1, 2]
        assert data_blocks_for_sector(15) == [60, 61, 62]


class TestBuildSectorTrailer:
    def test_factory_trailer(self):
        block = build_sector_trailer(SectorAccessConfig().value())
        assert block.hex().upper() == "FFFFFFFFFFFFFF078069FFFFFFFFFFFF"

    def test_custom_keys_and_general_purpose(self):
        config = SectorAccessConfig(trailer=TrailerProfile.NEVER_KEYB_KEYAB_KEYB_NEVER_KEYB)
        block = build_sector_trailer(
            config.value(),
            key_a=bytes.fromhex("A0A1A2A3A4A5"),
            key_b=bytes.fromhex("B0B1B2B3B4B5"),
            general_purpose=0x00,
        )
        assert block == bytes.fromhex("A0A1A2A3A4A5" "7F0788" "00" "B0B1B2B3B4B5")

    def test_short_key_raises(self):
        with pytest.raises(ValueError):
            build_sector_trailer(AccessBytes(0xFF, 0x07, 0x80), key_a=bytes(5))
        with pytest.raises(ValueError):
            build_sector_trailer(AccessBytes(0xFF, 0x07, 0x80), key_b=bytes(7))

    def test_general_purpose_out_of_range(self):
        with pytest.raises(ValueError):
            build_sector_trailer(AccessBytes(0xFF, 0x07, 0x80), general_purpose=256)


class TestParseSectorTrailer:
    def test_valid_trailer(self):
        data = bytes(range(16))
        result = parse_sector_trailer(data)
        assert result["key_a"] == bytes([0, 1, 2, 3, 4, 5])
        assert result["access_bits"] == bytes([6, 7, 8])
        assert result["general_purpose"] == 9
        assert result["key_b"] == bytes([10, 11, 12, 13, 14, 15])

    def test_built_trailer_fields(self):
        access = SectorAccessConfig().value()
        result = parse_sector_trailer(build_sector_trailer(access))
        assert result["access_bits"] == bytes(access)
        assert result["general_purpose"] == DEFAULT_GENERAL_PURPOSE_BYTE

    def test_invalid_length_raises(self):
        with pytest.raises(ValueError):
            parse_sector_trailer(bytes(10))
