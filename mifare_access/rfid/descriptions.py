"""Human-readable permission tables for each access profile (display only)."""

from .conditions import (
    DataBlockProfile, TrailerProfile, as_data_block_profile, as_trailer_profile,
)

READ_WRITE_BLOCK = "read/write block"
VALUE_BLOCK = "value block"

DATA_BLOCK_DESCRIPTIONS: dict[DataBlockProfile, str] = {
    DataBlockProfile.KEYAB_KEYAB_KEYAB_KEYAB:
        "[Read: Key A|B; Write: Key A|B; Increment: Key A|B; Decrement, Transfer, Restore: Key A|B]",
    DataBlockProfile.KEYAB_NEVER_NEVER_NEVER:
        "[Read: Key A|B; Write: never; Increment: never; Decrement, Transfer, Restore: never]",
    DataBlockProfile.KEYAB_KEYB_NEVER_NEVER:
        "[Read: Key A|B; Write: Key B; Increment: never; Decrement, Transfer, Restore: never]",
    DataBlockProfile.KEYAB_KEYB_KEYB_KEYAB:
        "[Read: Key A|B; Write: Key B; Increment: Key B; Decrement, Transfer, Restore: Key A|B]",
    DataBlockProfile.KEYAB_NEVER_NEVER_KEYAB:
        "[Read: Key A|B; Write: never; Increment: never; Decrement, Transfer, Restore: Key A|B]",
    DataBlockProfile.KEYB_KEYB_NEVER_NEVER:
        "[Read: Key B; Write: Key B; Increment: never; Decrement, Transfer, Restore: never]",
    DataBlockProfile.KEYB_NEVER_NEVER_NEVER:
        "[Read: Key B; Write: never; Increment: never; Decrement, Transfer, Restore: never]",
    DataBlockProfile.NEVER_NEVER_NEVER_NEVER:
        "[Read: never; Write: never; Increment: never; Decrement, Transfer, Restore: never]",
}

# NXP marks C=110 and C=001 as value block configurations
DATA_BLOCK_KINDS: dict[DataBlockProfile, str] = {
    profile: VALUE_BLOCK if profile in (
        DataBlockProfile.KEYAB_KEYB_KEYB_KEYAB,
        DataBlockProfile.KEYAB_NEVER_NEVER_KEYAB,
    ) else READ_WRITE_BLOCK
    for profile in DataBlockProfile
}

TRAILER_DESCRIPTIONS: dict[TrailerProfile, str] = {
    TrailerProfile.NEVER_KEYA_KEYA_NEVER_KEYA_KEYA:
        "[Read Key A: never; Write Key A: Key A; Read Access Bits: Key A; "
        "Write Access Bits: never; Read Key B: Key A; Write Key B: Key A]",
    TrailerProfile.NEVER_NEVER_KEYA_NEVER_KEYA_NEVER:
        "[Read Key A: never; Write Key A: never; Read Access Bits: Key A; "
        "Write Access Bits: never; Read Key B: Key A; Write Key B: never]",
    TrailerProfile.NEVER_KEYB_KEYAB_NEVER_NEVER_KEYB:
        "[Read Key A: never; Write Key A: Key B; Read Access Bits: Key A|B; "
        "Write Access Bits: never; Read Key B: never; Write Key B: Key B]",
    TrailerProfile.NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER:
        "[Read Key A: never; Write Key A: never; Read Access Bits: Key A|B; "
        "Write Access Bits: never; Read Key B: never; Write Key B: never]",
    TrailerProfile.NEVER_KEYA_KEYA_KEYA_KEYA_KEYA:
        "[Read Key A: never; Write Key A: Key A; Read Access Bits: Key A; "
        "Write Access Bits: Key A; Read Key B: Key A; Write Key B: Key A]",
    TrailerProfile.NEVER_KEYB_KEYAB_KEYB_NEVER_KEYB:
        "[Read Key A: never; Write Key A: Key B; Read Access Bits: Key A|B; "
        "Write Access Bits: Key B; Read Key B: never; Write Key B: Key B]",
    TrailerProfile.NEVER_NEVER_KEYAB_KEYB_NEVER_NEVER:
        "[Read Key A: never; Write Key A: never; Read Access Bits: Key A|B; "
        "Write Access Bits: Key B; Read Key B: never; Write Key B: never]",
    TrailerProfile.NEVER_NEVER_KEYAB_NEVER_NEVER_NEVER_LOCKED:
        "[Read Key A: never; Write Key A: never; Read Access Bits: Key A|B; "
        "Write Access Bits: never; Read Key B: never; Write Key B: never]",
}


def describe_data_block(profile: DataBlockProfile) -> str:
    """Return the permission table of a data block profile with its block kind."""
    profile = as_data_block_profile(profile)
    return f"{DATA_BLOCK_DESCRIPTIONS[profile]} ({DATA_BLOCK_KINDS[profile]})"


def data_block_kind(profile: DataBlockProfile) -> str:
    return DATA_BLOCK_KINDS[as_data_block_profile(profile)]


def describe_trailer(profile: TrailerProfile) -> str:
    """Return the permission table of a sector trailer profile."""
    return TRAILER_DESCRIPTIONS[as_trailer_profile(profile)]
