"""Court admin routes: buildings, rooms and staff."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from wayfinder.api.errors import database_errors, get_or_404
from wayfinder.api.schemas import (
    CourtAdminStats,
    CourtBuildingCreate,
    CourtBuildingEnvelope,
    CourtBuildingList,
    CourtBuildingOut,
    CourtBuildingUpdate,
    CourtRoomCreate,
    CourtRoomEnvelope,
    CourtRoomList,
    CourtRoomOut,
    CourtRoomUpdate,
    CourtStaffCreate,
    CourtStaffEnvelope,
    CourtStaffList,
    CourtStaffOut,
    CourtStaffUpdate,
    SuccessResponse,
)
from wayfinder.auth import require_admin
from wayfinder.db import crud
from wayfinder.db.models import CourtBuilding, CourtRoom, CourtStaff
from wayfinder.dependencies import get_db_session

router = APIRouter(
    prefix="/court-admin",
    tags=["Court Admin"],
    dependencies=[Depends(require_admin)],
)


@router.get("/stats", response_model=CourtAdminStats)
async def court_admin_stats(db: AsyncSession = Depends(get_db_session)) -> CourtAdminStats:
    with database_errors("fetch stats"):
        return CourtAdminStats(
            buildings=await crud.court_buildings.count(db),
            rooms=await crud.court_rooms.count(db),
            staff=await crud.court_staff.count(db),
        )


# Buildings


@router.get("/buildings", response_model=CourtBuildingList)
async def list_buildings(db: AsyncSession = Depends(get_db_session)) -> CourtBuildingList:
    with database_errors("fetch buildings"):
        rows = await crud.court_buildings.get_all(db, order_by=[CourtBuilding.building_name])
    return CourtBuildingList(buildings=[CourtBuildingOut.model_validate(row) for row in rows])


@router.post("/buildings", response_model=CourtBuildingEnvelope)
async def create_building(
    request: CourtBuildingCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CourtBuildingEnvelope:
    with database_errors("create building"):
        row = await crud.court_buildings.create(db, **request.model_dump())
    return CourtBuildingEnvelope(building=CourtBuildingOut.model_validate(row))


@router.put("/buildings/{id}", response_model=CourtBuildingEnvelope)
async def update_building(
    id: UUID,
    request: CourtBuildingUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CourtBuildingEnvelope:
    with database_errors("update building"):
        row = await get_or_404(crud.court_buildings, db, id, "Building")
        row = await crud.court_buildings.update(db, row, **request.model_dump(exclude_unset=True))
    return CourtBuildingEnvelope(building=CourtBuildingOut.model_validate(row))


@router.delete("/buildings/{id}", response_model=SuccessResponse)
async def delete_building(id: UUID, db: AsyncSession = Depends(get_db_session)) -> SuccessResponse:
    with database_errors("delete building"):
        if not await crud.court_buildings.delete_by_id(db, id):
            raise HTTPException(status_code=404, detail="Building not found")
    return SuccessResponse()


# Rooms


@router.get("/rooms", response_model=CourtRoomList)
async def list_rooms(db: AsyncSession = Depends(get_db_session)) -> CourtRoomList:
    with database_errors("fetch rooms"):
        rows = await crud.court_rooms.get_all(db, order_by=[CourtRoom.room_number])
    return CourtRoomList(rooms=[CourtRoomOut.model_validate(row) for row in rows])


@router.post("/rooms", response_model=CourtRoomEnvelope)
async def create_room(
    request: CourtRoomCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CourtRoomEnvelope:
    with database_errors("create room"):
        row = await crud.court_rooms.create(db, **request.model_dump())
    return CourtRoomEnvelope(room=CourtRoomOut.model_validate(row))


@router.put("/rooms/{id}", response_model=CourtRoomEnvelope)
async def update_room(
    id: UUID,
    request: CourtRoomUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CourtRoomEnvelope:
    with database_errors("update room"):
        row = await get_or_404(crud.court_rooms, db, id, "Room")
        row = await crud.court_rooms.update(db, row, **request.model_dump(exclude_unset=True))
    return CourtRoomEnvelope(room=CourtRoomOut.model_validate(row))


@router.delete("/rooms/{id}", response_model=SuccessResponse)
async def delete_room(id: UUID, db: AsyncSession = Depends(get_db_session)) -> SuccessResponse:
    with database_errors("delete room"):
        if not await crud.court_rooms.delete_by_id(db, id):
            raise HTTPException(status_code=404, detail="Room not found")
    return SuccessResponse()


# Staff


@router.get("/staff", response_model=CourtStaffList)
async def list_staff(db: AsyncSession = Depends(get_db_session)) -> CourtStaffList:
    with database_errors("fetch staff"):
        rows = await crud.court_staff.get_all(db, order_by=[CourtStaff.staff_name])
    return CourtStaffList(staff=[CourtStaffOut.model_validate(row) for row in rows])


@router.post("/staff", response_model=CourtStaffEnvelope)
async def create_staff(
    request: CourtStaffCreate,
    db: AsyncSession = Depends(get_db_session),
) -> CourtStaffEnvelope:
    with database_errors("create staff member"):
        row = await crud.court_staff.create(db, **request.model_dump())
    return CourtStaffEnvelope(staff=CourtStaffOut.model_validate(row))


@router.put("/staff/{id}", response_model=CourtStaffEnvelope)
async def update_staff(
    id: UUID,
    request: CourtStaffUpdate,
    db: AsyncSession = Depends(get_db_session),
) -> CourtStaffEnvelope:
    with database_errors("update staff member"):
        row = await get_or_404(crud.court_staff, db, id, "Staff member")
        row = await crud.court_staff.update(db, row, **request.model_dump(exclude_unset=True))
    return CourtStaffEnvelope(staff=CourtStaffOut.model_validate(row))


@router.delete("/staff/{id}", response_model=SuccessResponse)
async def delete_staff(id: UUID, db: AsyncSession = Depends(get_db_session)) -> SuccessResponse:
    with database_errors("delete staff member"):
        if not await crud.court_staff.delete_by_id(db, id):
            raise HTTPException(status_code=404, detail="Staff member not found")
    return SuccessResponse()
