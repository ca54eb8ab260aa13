"""HTTP endpoints for content localization.

Controllers are thin adapters: they accept Pydantic request models, call
the LocalizationManager, and return Pydantic response models. Errors are
translated to HTTP responses by the handlers in ``server.server``.
"""

from typing import List

from fastapi import APIRouter, status

from infrastructure.logging import get_module_logger
from infrastructure.models.content import ContentRecord
from infrastructure.services import LocalizationManagerDep, RecordStoreDep
from modules.localization import schemas
from modules.localization.exceptions import RecordNotFoundError

logger = get_module_logger()

router = APIRouter(prefix="/localization", tags=["localization"])


@router.post(
    "/items", response_model=ContentRecord, status_code=status.HTTP_201_CREATED
)
async def save_item_endpoint(record: ContentRecord, store: RecordStoreDep):
    """Save a content record (insert or replace)."""
    await store.save(record)
    return record


@router.post("/items/{content_item_id}/localize", response_model=ContentRecord)
async def localize_endpoint(
    content_item_id: str,
    request: schemas.LocalizeRequest,
    manager: LocalizationManagerDep,
    store: RecordStoreDep,
):
    """Return the translation of a content item, creating it if needed.

    Calling this twice for the same locale returns the same record.
    """
    record = await store.get(content_item_id)
    if record is None:
        raise RecordNotFoundError(content_item_id)
    return await manager.localize(record, request.target_locale)


@router.post("/items/deduplicate", response_model=schemas.DeduplicateResponse)
async def deduplicate_endpoint(
    request: schemas.DeduplicateRequest, manager: LocalizationManagerDep
):
    """Keep one record per localization set for the request locale."""
    records = await manager.deduplicate_records(request.records)
    return schemas.DeduplicateResponse(records=records)


@router.post("/sets/first-items", response_model=schemas.FirstItemsResponse)
async def first_items_endpoint(
    request: schemas.FirstItemsRequest, manager: LocalizationManagerDep
):
    """Resolve one content item id per set, keeping the requested order."""
    first_items = await manager.get_first_item_id_for_sets(request.localization_sets)
    return schemas.FirstItemsResponse(
        items=[
            schemas.FirstItemEntry(localization_set=set_id, content_item_id=item_id)
            for set_id, item_id in first_items.items()
        ]
    )


@router.get("/sets/{localization_set}", response_model=List[ContentRecord])
async def list_set_endpoint(localization_set: str, manager: LocalizationManagerDep):
    """List every member of a localization set."""
    return await manager.get_records_for_set(localization_set)


@router.get("/sets/{localization_set}/{locale}", response_model=ContentRecord)
async def get_set_member_endpoint(
    localization_set: str, locale: str, manager: LocalizationManagerDep
):
    """Get the member of a set in one locale."""
    record = await manager.get_record(localization_set, locale)
    if record is None:
        raise RecordNotFoundError(f"{localization_set}/{locale}")
    return record


@router.patch("/sets/{localization_set}", response_model=schemas.SyncFieldsResponse)
async def sync_fields_endpoint(
    localization_set: str,
    request: schemas.SyncFieldsRequest,
    manager: LocalizationManagerDep,
):
    """Merge a partial payload into every member of a set."""
    records = await manager.sync_fields(
        localization_set, request.patch, array_handling=request.array_handling
    )
    return schemas.SyncFieldsResponse(
        localization_set=localization_set,
        updated=[record.content_item_id for record in records],
    )
