"""
MIFARE Classic access conditions — profile enums and condition bit tables.

Each block of a sector is governed by three condition bits (C1, C2, C3).
NXP defines a fixed set of eight meaningful combinations for data blocks and
another eight for the sector trailer; the profiles below name them after the
permissions they grant.

Reference: https://www.nxp.com/docs/en/data-sheet/MF1S50YYX_V1.pdf (section 8.7)
"""

from dataclasses import dataclass
from enum import Enum


class InvalidProfileError(ValueError):
    """Raised when a value is not one of the defined access profiles."""


# ──────────────────────────────────────────────
# Condition triple
# ──────────────────────────────────────────────

@dataclass(frozen=True)
class ConditionTriple:
    """The three access condition bits of a single block."""
    c1: bool
    c2: bool
    c3: bool

    @classmethod
    def from_bits(cls, c1: int, c2: int, c3: int) -> "ConditionTriple":
        return cls(bool(c1), bool(c2), bool(c3))

    def to_list(self) -> list[int]:
        return [int(self.c1), int(self.c2), int(self.c3)]


# ──────────────────────────────────────────────
# Data block profiles
# Read ; Write ; Increment ; Decrement, Transfer, Restore
# ──────────────────────────────────────────────

class DataBlockProfile(str, Enum):
    KEYAB_KEYAB_KEYAB_KEYAB = "KEYAB_KEYAB_KEYAB_KEYAB"    # transport configuration
    KEYAB_NEVER_NEVER_NEVER = "KEYAB_NEVER_NEVER_NEVER"
    KEYAB_KEYB_NEVER_NEVER = "KEYAB_KEYB_NEVER_NEVER"
    KEYAB_KEYB_KEYB_KEYAB = "KEYAB_KEYB_KEYB_KEYAB"        # value block
    KEYAB_NEVER_NEVER_KEYAB = "KEYAB_NEVER_NEVER_KEYAB"    # value block
    KEYB_KEYB_NEVER_NEVER = "KEYB_KEYB_NEVER_NEVER"
    KEYB_NEVER_NEVER_NEVER = "KEYB_NEVER_NEVER_NEVER"
    NEVER_NEVER_NEVER_NEVER = "NEVER_NEVER_NEVER_NEVER"


# ──────────────────────────────────────────────
# Sector trailer profiles
# Read Key A ; Write Key A ; Read Access Bits ; Write Access Bits ;
# Read Key B ; Write Key B
# ──────────────────────────────────────────────

class TrailerProfile(str, Enum):
    NEVER_KEYA_KEYA_NEVER_KEYA_KEYA = "NEVER_KEYA_KEYA_NEVER_KEYA_KEYA"
    NEVER_NEVER_KEYA_NEVER_KEYA_NEVER = "NEVER_NEVER_KEYA_NEVER_KEYA_NEVER"
    NEVER_KEYB_KEYAB_NEVER_NEVER_KEYB = "NEVER_KEYB_KEYAB_NEVER_NEVER_KEYB"
    NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER = "NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER"
    NEVER_KEYA_KEYA_KEYA_KEYA_KEYA = "NEVER_KEYA_KEYA_KEYA_KEYA_KEYA"    # transport configuration
    NEVER_KEYB_KEYAB_KEYB_NEVER_KEYB = "NEVER_KEYB_KEYAB_KEYB_NEVER_KEYB"
    NEVER_NEVER_KEYAB_KEYB_NEVER_NEVER = "NEVER_NEVER_KEYAB_KEYB_NEVER_NEVER"
    # Same permissions as NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER, but C1=C2=C3=1
    NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER_LOCKED = "NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER_LOCKED"


DEFAULT_DATA_BLOCK_PROFILE = DataBlockProfile.KEYAB_KEYAB_KEYAB_KEYAB
DEFAULT_TRAILER_PROFILE = TrailerProfile.NEVER_KEYA_KEYA_KEYA_KEYA_KEYA


# ──────────────────────────────────────────────
# Condition bit tables
# ──────────────────────────────────────────────

DATA_BLOCK_CONDITIONS: dict[DataBlockProfile, ConditionTriple] = {
    DataBlockProfile.KEYAB_KEYAB_KEYAB_KEYAB: ConditionTriple.from_bits(0, 0, 0),
    DataBlockProfile.KEYAB_NEVER_NEVER_NEVER: ConditionTriple.from_bits(0, 1, 0),
    DataBlockProfile.KEYAB_KEYB_NEVER_NEVER: ConditionTriple.from_bits(1, 0, 0),
    DataBlockProfile.KEYAB_KEYB_KEYB_KEYAB: ConditionTriple.from_bits(1, 1, 0),
    DataBlockProfile.KEYAB_NEVER_NEVER_KEYAB: ConditionTriple.from_bits(0, 0, 1),
    DataBlockProfile.KEYB_KEYB_NEVER_NEVER: ConditionTriple.from_bits(0, 1, 1),
    DataBlockProfile.KEYB_NEVER_NEVER_NEVER: ConditionTriple.from_bits(1, 0, 1),
    DataBlockProfile.NEVER_NEVER_NEVER_NEVER: ConditionTriple.from_bits(1, 1, 1),
}

TRAILER_CONDITIONS: dict[TrailerProfile, ConditionTriple] = {
    TrailerProfile.NEVER_KEYA_KEYA_NEVER_KEYA_KEYA: ConditionTriple.from_bits(0, 0, 0),
    TrailerProfile.NEVER_NEVER_KEYA_NEVER_KEYA_NEVER: ConditionTriple.from_bits(0, 1, 0),
    TrailerProfile.NEVER_KEYB_KEYAB_NEVER_NEVER_KEYB: ConditionTriple.from_bits(1, 0, 0),
    TrailerProfile.NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER: ConditionTriple.from_bits(1, 1, 0),
    TrailerProfile.NEVER_KEYA_KEYA_KEYA_KEYA_KEYA: ConditionTriple.from_bits(0, 0, 1),
    TrailerProfile.NEVER_KEYB_KEYAB_KEYB_NEVER_KEYB: ConditionTriple.from_bits(0, 1, 1),
    TrailerProfile.NEVER_NEVER_KEYAB_KEYB_NEVER_NEVER: ConditionTriple.from_bits(1, 0, 1),
    TrailerProfile.NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER_LOCKED: ConditionTriple.from_bits(1, 1, 1),
}


def _coerce(value, profile_type: type[Enum]) -> Enum:
    """Return *value* as a member of *profile_type* or raise InvalidProfileError."""
    if isinstance(value, profile_type):
        return value
    # A profile of the other kind is a str too; refuse it before value lookup
    if isinstance(value, Enum) or not isinstance(value, str):
        raise InvalidProfileError(
            f"Invalid {profile_type.__name__}: {value!r}"
        )
    try:
        return profile_type(value)
    except ValueError:
        raise InvalidProfileError(
            f"Invalid {profile_type.__name__}: {value!r}"
        ) from None


def as_data_block_profile(value) -> DataBlockProfile:
    """Validate and convert a data block profile (member or its string value)."""
    return _coerce(value, DataBlockProfile)


def as_trailer_profile(value) -> TrailerProfile:
    """Validate and convert a trailer profile (member or its string value)."""
    return _coerce(value, TrailerProfile)


def data_block_condition(profile: DataBlockProfile) -> ConditionTriple:
    """Return the condition bits for a data block profile."""
    return DATA_BLOCK_CONDITIONS[as_data_block_profile(profile)]


def trailer_condition(profile: TrailerProfile) -> ConditionTriple:
    """Return the condition bits for a sector trailer profile."""
    return TRAILER_CONDITIONS[as_trailer_profile(profile)]
