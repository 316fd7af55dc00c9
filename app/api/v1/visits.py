from fastapi import APIRouter, Response, status

from app.api.dependencies import VisitServiceDep
from app.exceptions import VisitNotFoundException
from app.schemas.entities import Visit, VisitItem, VisitPhoto
from app.schemas.visits import (
    AddVisitInput,
    NewVisitItem,
    NewVisitPhoto,
    VisitItemPatch,
    VisitPatch,
    VisitPhotoPatch,
)

router = APIRouter()


@router.post("/visits", response_model=Visit, status_code=status.HTTP_201_CREATED)
async def add_visit(data: AddVisitInput, service: VisitServiceDep) -> Visit:
    return await service.add_visit(data)


@router.get("/visits/{visit_id}", response_model=Visit)
async def get_visit(visit_id: str, service: VisitServiceDep) -> Visit:
    visit = await service.get_visit(visit_id)
    if not visit:
        raise VisitNotFoundException(visit_id)
    return visit


@router.patch("/visits/{visit_id}", response_model=Visit)
async def update_visit(
    visit_id: str, patch: VisitPatch, service: VisitServiceDep
) -> Visit:
    return await service.update_visit(visit_id, patch)


@router.delete("/visits/{visit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_visit(visit_id: str, service: VisitServiceDep) -> Response:
    await service.delete_visit(visit_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/visits/{visit_id}/items", response_model=list[VisitItem])
async def list_items(visit_id: str, service: VisitServiceDep) -> list[VisitItem]:
    return await service.list_items_by_visit(visit_id)


@router.post(
    "/visits/{visit_id}/items",
    response_model=VisitItem,
    status_code=status.HTTP_201_CREATED,
)
async def add_item(
    visit_id: str, data: NewVisitItem, service: VisitServiceDep
) -> VisitItem:
    return await service.add_item_to_visit(visit_id, data)


@router.get("/visits/{visit_id}/photos", response_model=list[VisitPhoto])
async def list_photos(visit_id: str, service: VisitServiceDep) -> list[VisitPhoto]:
    return await service.list_photos_by_visit(visit_id)


@router.post(
    "/visits/{visit_id}/photos",
    response_model=VisitPhoto,
    status_code=status.HTTP_201_CREATED,
)
async def add_photo(
    visit_id: str, data: NewVisitPhoto, service: VisitServiceDep
) -> VisitPhoto:
    return await service.add_photo_to_visit(visit_id, data.storage_path, data.caption)


@router.patch("/items/{item_id}", response_model=VisitItem)
async def update_item(
    item_id: str, patch: VisitItemPatch, service: VisitServiceDep
) -> VisitItem:
    return await service.update_item(item_id, patch)


@router.delete("/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(item_id: str, service: VisitServiceDep) -> Response:
    await service.delete_item(item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/photos/{photo_id}", response_model=VisitPhoto)
async def update_photo(
    photo_id: str, patch: VisitPhotoPatch, service: VisitServiceDep
) -> VisitPhoto:
    return await service.update_photo(photo_id, patch)


@router.delete("/photos/{photo_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_photo(photo_id: str, service: VisitServiceDep) -> Response:
    await service.delete_photo(photo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
