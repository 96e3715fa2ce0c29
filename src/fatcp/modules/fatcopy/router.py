# src/fatcp/modules/fatcopy/router.py
from __future__ import annotations

from fastapi import APIRouter

from fatcp.api.deps import SettingsDep
from fatcp.core.errors import to_http
from fatcp.core.paths import display_path

from .schemas import CopyItem, CopyOptions, CopyRequest, CopyResponse
from .service import FatCopyService

router = APIRouter(prefix="/fatcopy", tags=["fatcopy"])


def _printable(item: CopyItem) -> CopyItem:
    return item.model_copy(
        update={
            "source": display_path(item.source),
            "destination": display_path(item.destination),
        }
    )


@router.post(
    "/plan",
    response_model=CopyResponse,
    summary="Preview sanitized destinations",
    description="Walk `src_root` and report where each file would land under `dst_root`. Nothing is written.",
)
def plan_endpoint(req: CopyRequest, settings: SettingsDep) -> CopyResponse:
    try:
        svc = FatCopyService.from_request(req, CopyOptions.from_settings(settings))
        items = [_printable(CopyItem(source=s, destination=d)) for s, d in svc.plan()]
        return CopyResponse(dry_run=True, count=len(items), items=items)
    except Exception as err:
        raise to_http(err) from err


@router.post(
    "/apply",
    response_model=CopyResponse,
    summary="Copy a tree with FAT-safe names",
    description=(
        "Copy every file under `src_root` to `dst_root`, slugging directory and file names "
        "and keeping extensions. Stops at the first error; files copied before it remain."
    ),
)
def apply_endpoint(req: CopyRequest, settings: SettingsDep) -> CopyResponse:
    try:
        svc = FatCopyService.from_request(req, CopyOptions.from_settings(settings))
        items = [_printable(i) for i in svc.apply()]
        return CopyResponse(dry_run=False, count=len(items), items=items)
    except Exception as err:
        raise to_http(err) from err
