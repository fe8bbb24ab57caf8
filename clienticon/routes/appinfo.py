# routes/appinfo.py
# API endpoints for reading the local appinfo.vdf cache

from itertools import islice
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from ..dependencies import get_appinfo_path
from ..services.clienticon import get_clienticon_from_appinfo
from ..sources.appinfo import AppInfoNotFoundError, iter_entries, read_header

router = APIRouter(tags=["AppInfo"])


class AppInfoStatus(BaseModel):
    """appinfo.vdf location and header"""
    path: str
    exists: bool
    size_bytes: Optional[int] = None
    magic: Optional[str] = None
    universe: Optional[int] = None
    key_table_offset: Optional[int] = None
    key_count: Optional[int] = None


class ClientIconResponse(BaseModel):
    app_id: str
    clienticon: Optional[str] = None


class AppInfoEntrySummary(BaseModel):
    app_id: int
    entry_size: int
    info_state: int
    last_updated: int
    change_number: int
    parsed: bool


@router.get("/api/appinfo/status")
def get_appinfo_status(appinfo_path: Path = Depends(get_appinfo_path)) -> AppInfoStatus:
    """Report whether appinfo.vdf exists and what its header says."""
    if not appinfo_path.exists():
        return AppInfoStatus(path=str(appinfo_path), exists=False)

    try:
        header = read_header(appinfo_path)
    except (OSError, EOFError, ValueError) as e:
        raise HTTPException(status_code=500, detail=f"Error reading appinfo.vdf: {str(e)}")

    return AppInfoStatus(
        path=str(appinfo_path),
        exists=True,
        size_bytes=appinfo_path.stat().st_size,
        magic=f"0x{header.magic:08X}",
        universe=header.universe,
        key_table_offset=header.key_table_offset,
        key_count=header.key_count,
    )


@router.get("/api/appinfo/entries")
def list_appinfo_entries(
    limit: int = Query(50, ge=1, le=10000),
    appinfo_path: Path = Depends(get_appinfo_path),
) -> list[AppInfoEntrySummary]:
    """List the first `limit` app entries in file order."""
    try:
        entries = list(islice(iter_entries(appinfo_path), limit))
    except AppInfoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (OSError, EOFError, ValueError) as e:
        raise HTTPException(status_code=500, detail=f"Error reading appinfo.vdf: {str(e)}")

    return [
        AppInfoEntrySummary(
            app_id=entry.app_id,
            entry_size=entry.entry_size,
            info_state=entry.info_state,
            last_updated=entry.last_updated,
            change_number=entry.change_number,
            parsed=entry.parsed,
        )
        for entry in entries
    ]


@router.get("/api/appinfo/{app_id}/clienticon")
def get_clienticon(app_id: str, appinfo_path: Path = Depends(get_appinfo_path)) -> ClientIconResponse:
    """Get the client icon id of a Steam app (null when not present)."""
    try:
        clienticon = get_clienticon_from_appinfo(app_id, appinfo_path)
    except AppInfoNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except (OSError, EOFError, ValueError) as e:
        raise HTTPException(status_code=500, detail=f"Error reading appinfo.vdf: {str(e)}")

    return ClientIconResponse(app_id=app_id, clienticon=clienticon)
