"""
Access bits calculator for a MIFARE Classic sector.

Bytes 6-8 of a sector trailer hold the condition bits of all four blocks of
the sector. Every bit is stored twice, once inverted, split across two bytes:

          bit 7   bit 6   bit 5   bit 4   bit 3   bit 2   bit 1   bit 0
  byte 6  ~C2_3   ~C2_2   ~C2_1   ~C2_0   ~C1_3   ~C1_2   ~C1_1   ~C1_0
  byte 7   C1_3    C1_2    C1_1    C1_0   ~C3_3   ~C3_2   ~C3_1   ~C3_0
  byte 8   C3_3    C3_2    C3_1    C3_0    C2_3    C2_2    C2_1    C2_0

where Cx_i is condition bit x of block i (block 3 is the sector trailer).
"""

import logging
from dataclasses import dataclass

from .conditions import (
    ConditionTriple,
    DataBlockProfile,
    TrailerProfile,
    DEFAULT_DATA_BLOCK_PROFILE,
    DEFAULT_TRAILER_PROFILE,
    as_data_block_profile,
    as_trailer_profile,
    data_block_condition,
    trailer_condition,
)

logger = logging.getLogger(__name__)

ACCESS_BITS_LENGTH = 3
DATA_BLOCKS_PER_SECTOR = 3


@dataclass(frozen=True)
class AccessBytes:
    """The three access bytes (trailer bytes 6, 7 and 8) of a sector."""
    byte6: int
    byte7: int
    byte8: int

    def __post_init__(self):
        for name in ("byte6", "byte7", "byte8"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
                raise ValueError(f"{name} must be an integer 0-255, got {value!r}")

    def __bytes__(self) -> bytes:
        return bytes([self.byte6, self.byte7, self.byte8])

    def __iter__(self):
        return iter((self.byte6, self.byte7, self.byte8))

    def __len__(self) -> int:
        return ACCESS_BITS_LENGTH

    def hex(self) -> str:
        """Return the bytes as an uppercase hex string, e.g. "FF0780"."""
        return bytes(self).hex().upper()

    def to_dict(self) -> dict:
        return {
            "hex": self.hex(),
            "bytes": list(self),
        }


def pack_access_bits(block0: ConditionTriple, block1: ConditionTriple,
                     block2: ConditionTriple, trailer: ConditionTriple) -> AccessBytes:
    """
    Interleave the condition bits of the four blocks into the access bytes.

    Args:
        block0, block1, block2: Condition bits of the data blocks.
        trailer: Condition bits of the sector trailer.

    Returns:
        A new AccessBytes value.
    """
    b6 = b7 = b8 = 0
    for i, cond in enumerate((block0, block1, block2, trailer)):
        b6 |= (not cond.c1) << i
        b7 |= cond.c1 << (i + 4)
        b6 |= (not cond.c2) << (i + 4)
        b8 |= cond.c2 << i
        b7 |= (not cond.c3) << i
        b8 |= cond.c3 << (i + 4)
    return AccessBytes(b6, b7, b8)


class SectorAccessConfig:
    """
    Access conditions of one sector: three data blocks and the trailer.

    Starts at the transport configuration (access bytes FF 07 80). Assigning
    anything other than a profile of the right kind raises InvalidProfileError.
    Not thread-safe; share one instance across threads only with external
    locking.
    """

    def __init__(self,
                 block0: DataBlockProfile = DEFAULT_DATA_BLOCK_PROFILE,
                 block1: DataBlockProfile = DEFAULT_DATA_BLOCK_PROFILE,
                 block2: DataBlockProfile = DEFAULT_DATA_BLOCK_PROFILE,
                 trailer: TrailerProfile = DEFAULT_TRAILER_PROFILE):
        self._blocks = [
            as_data_block_profile(block0),
            as_data_block_profile(block1),
            as_data_block_profile(block2),
        ]
        self._trailer = as_trailer_profile(trailer)

    def __repr__(self) -> str:
        return (f"SectorAccessConfig(block0={self.block0.value}, "
                f"block1={self.block1.value}, block2={self.block2.value}, "
                f"trailer={self.trailer.value})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, SectorAccessConfig):
            return NotImplemented
        return self._blocks == other._blocks and self._trailer == other._trailer

    # Mutable, so explicitly unhashable
    __hash__ = None

    def get_block(self, index: int) -> DataBlockProfile:
        """Return the profile of data block *index* (0-2)."""
        self._check_index(index)
        return self._blocks[index]

    def set_block(self, index: int, profile: DataBlockProfile):
        """Set the profile of data block *index* (0-2)."""
        self._check_index(index)
        self._blocks[index] = as_data_block_profile(profile)

    @staticmethod
    def _check_index(index: int):
        if (isinstance(index, bool) or not isinstance(index, int)
                or not 0 <= index < DATA_BLOCKS_PER_SECTOR):
            raise IndexError(
                f"Data block index must be 0-{DATA_BLOCKS_PER_SECTOR - 1}, got {index!r}"
            )

    @property
    def block0(self) -> DataBlockProfile:
        return self._blocks[0]

    @block0.setter
    def block0(self, profile: DataBlockProfile):
        self.set_block(0, profile)

    @property
    def block1(self) -> DataBlockProfile:
        return self._blocks[1]

    @block1.setter
    def block1(self, profile: DataBlockProfile):
        self.set_block(1, profile)

    @property
    def block2(self) -> DataBlockProfile:
        return self._blocks[2]

    @block2.setter
    def block2(self, profile: DataBlockProfile):
        self.set_block(2, profile)

    @property
    def trailer(self) -> TrailerProfile:
        return self._trailer

    @trailer.setter
    def trailer(self, profile: TrailerProfile):
        self._trailer = as_trailer_profile(profile)

    def conditions(self) -> list[ConditionTriple]:
        """Return the condition bits of blocks 0, 1, 2 and the trailer."""
        return [data_block_condition(p) for p in self._blocks] + [
            trailer_condition(self._trailer)
        ]

    def value(self) -> AccessBytes:
        """Compute the access bytes for the current selection."""
        result = pack_access_bits(*self.conditions())
        logger.debug("Access bits for %r: %s", self, result.hex())
        return result

    def to_dict(self) -> dict:
        """Serialize the selection and its access bytes to a JSON-compatible dict."""
        return {
            "block0": self.block0.value,
            "block1": self.block1.value,
            "block2": self.block2.value,
            "trailer": self.trailer.value,
            "conditions": [c.to_list() for c in self.conditions()],
            "access_bits": self.value().to_dict(),
        }

