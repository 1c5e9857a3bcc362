"""API routes for access bits computation and the profile catalog."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from mifare_access.rfid.conditions import (
    DataBlockProfile, TrailerProfile,
    DEFAULT_DATA_BLOCK_PROFILE, DEFAULT_TRAILER_PROFILE,
    DATA_BLOCK_CONDITIONS, TRAILER_CONDITIONS,
)
from mifare_access.rfid.access_bits import SectorAccessConfig
from mifare_access.rfid.descriptions import (
    DATA_BLOCK_DESCRIPTIONS, TRAILER_DESCRIPTIONS, data_block_kind,
)
from mifare_access.rfid.mifare import (
    build_sector_trailer, data_blocks_for_sector, sector_trailer_block,
    DEFAULT_GENERAL_PURPOSE_BYTE, NUM_SECTORS,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/access", tags=["access"])


# ──────────────────────────────────────────────
# Request models
# ──────────────────────────────────────────────

class AccessBitsRequest(BaseModel):
    block0: DataBlockProfile = DEFAULT_DATA_BLOCK_PROFILE
    block1: DataBlockProfile = DEFAULT_DATA_BLOCK_PROFILE
    block2: DataBlockProfile = DEFAULT_DATA_BLOCK_PROFILE
    trailer: TrailerProfile = DEFAULT_TRAILER_PROFILE

    # Optional trailer block assembly
    key_a: Optional[str] = None  # Hex string e.g. "FFFFFFFFFFFF"
    key_b: Optional[str] = None
    general_purpose: int = Field(DEFAULT_GENERAL_PURPOSE_BYTE, ge=0, le=255)

    # Sector the trailer belongs to, for absolute block numbers
    sector: Optional[int] = Field(None, ge=0, lt=NUM_SECTORS)


# ──────────────────────────────────────────────
# Routes
# ──────────────────────────────────────────────

@router.get("/profiles")
async def list_profiles():
    """List every data block and trailer profile with its condition bits."""
    return {
        "data_blocks": [
            {
                "name": p.value,
                "conditions": DATA_BLOCK_CONDITIONS[p].to_list(),
                "description": DATA_BLOCK_DESCRIPTIONS[p],
                "kind": data_block_kind(p),
            }
            for p in DataBlockProfile
        ],
        "trailer": [
            {
                "name": p.value,
                "conditions": TRAILER_CONDITIONS[p].to_list(),
                "description": TRAILER_DESCRIPTIONS[p],
            }
            for p in TrailerProfile
        ],
        "defaults": {
            "block": DEFAULT_DATA_BLOCK_PROFILE.value,
            "trailer": DEFAULT_TRAILER_PROFILE.value,
        },
    }


@router.post("/bits")
async def compute_access_bits(req: AccessBitsRequest):
    """Compute the access bytes (and the full trailer block) for a sector."""
    config = SectorAccessConfig(req.block0, req.block1, req.block2, req.trailer)
    result = config.to_dict()
    try:
        kwargs = {"general_purpose": req.general_purpose}
        if req.key_a is not None:
            kwargs["key_a"] = bytes.fromhex(req.key_a)
        if req.key_b is not None:
            kwargs["key_b"] = bytes.fromhex(req.key_b)
        trailer_block = build_sector_trailer(config.value(), **kwargs)
    except ValueError as e:
        logger.warning("Rejected trailer request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    result["trailer_block"] = trailer_block.hex().upper()
    if req.sector is not None:
        result["sector"] = req.sector
        result["data_block_numbers"] = data_blocks_for_sector(req.sector)
        result["trailer_block_number"] = sector_trailer_block(req.sector)
    return result
