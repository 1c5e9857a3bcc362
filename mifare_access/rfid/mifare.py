"""
MIFARE Classic 1K geometry and sector trailer layout.

A MIFARE Classic 1K tag has:
- 16 sectors (0-15)
- 4 blocks per sector, the last one being the sector trailer
- 16 bytes per block

Sector trailer (16 bytes):
  bytes 0-5    Key A
  bytes 6-8    access bits
  byte  9      general purpose byte (user data)
  bytes 10-15  Key B
"""

from .access_bits import AccessBytes

# Tag geometry
NUM_SECTORS = 16
BLOCKS_PER_SECTOR = 4
BYTES_PER_BLOCK = 16

# Sector trailer layout within a 16-byte block
KEY_A_OFFSET = 0
KEY_LENGTH = 6
ACCESS_BITS_OFFSET = 6
ACCESS_BITS_LENGTH = 3
GENERAL_PURPOSE_OFFSET = 9
KEY_B_OFFSET = 10

# Transport configuration
DEFAULT_KEY_A = bytes([0xFF] * 6)
DEFAULT_KEY_B = bytes([0xFF] * 6)
DEFAULT_GENERAL_PURPOSE_BYTE = 0x69


def sector_to_block(sector: int) -> int:
    """Return the first block number for a given sector."""
    return sector * BLOCKS_PER_SECTOR


def sector_trailer_block(sector: int) -> int:
    """Return the sector trailer block number for a given sector."""
    return sector_to_block(sector) + BLOCKS_PER_SECTOR - 1


def data_blocks_for_sector(sector: int) -> list[int]:
    """Return the data block numbers (non-trailer) for a given sector."""
    first = sector_to_block(sector)
    return [first + i for i in range(BLOCKS_PER_SECTOR - 1)]


def build_sector_trailer(access: AccessBytes,
                         key_a: bytes = DEFAULT_KEY_A,
                         key_b: bytes = DEFAULT_KEY_B,
                         general_purpose: int = DEFAULT_GENERAL_PURPOSE_BYTE) -> bytes:
    """
    Assemble a 16-byte sector trailer block.

    Args:
        access: Access bytes computed for the sector.
        key_a: 6-byte Key A.
        key_b: 6-byte Key B.
        general_purpose: Value of the general purpose byte (0-255).

    Returns:
        The trailer block, ready to be written to the tag.
    """
    if len(key_a) != KEY_LENGTH:
        raise ValueError(f"Key A must be {KEY_LENGTH} bytes, got {len(key_a)}")
    if len(key_b) != KEY_LENGTH:
        raise ValueError(f"Key B must be {KEY_LENGTH} bytes, got {len(key_b)}")
    if not 0 <= general_purpose <= 0xFF:
        raise ValueError(f"General purpose byte must be 0-255, got {general_purpose}")

    block = bytearray(BYTES_PER_BLOCK)
    block[KEY_A_OFFSET:KEY_A_OFFSET + KEY_LENGTH] = key_a
    block[ACCESS_BITS_OFFSET:ACCESS_BITS_OFFSET + ACCESS_BITS_LENGTH] = bytes(access)
    block[GENERAL_PURPOSE_OFFSET] = general_purpose
    block[KEY_B_OFFSET:KEY_B_OFFSET + KEY_LENGTH] = key_b
    return bytes(block)


def parse_sector_trailer(data: bytes) -> dict:
    """
    Split a 16-byte sector trailer block into its fields.

    Returns dict with key_a, access_bits and key_b as bytes, and
    general_purpose as int.
    """
    if len(data) != BYTES_PER_BLOCK:
        raise ValueError(f"Sector trailer must be {BYTES_PER_BLOCK} bytes, got {len(data)}")
    return {
        "key_a": data[KEY_A_OFFSET:KEY_A_OFFSET + KEY_LENGTH],
        "access_bits": data[ACCESS_BITS_OFFSET:ACCESS_BITS_OFFSET + ACCESS_BITS_LENGTH],
        "general_purpose": data[GENERAL_PURPOSE_OFFSET],
        "key_b": data[KEY_B_OFFSET:KEY_B_OFFSET + KEY_LENGTH],
    }
