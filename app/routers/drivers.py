# app/routers/drivers.py
"""Driver registry management (admin only). Drivers cannot be deleted over HTTP."""

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_storage, require_admin
from app.schemas.driver import DriverCreate, DriverOut, DriverUpdate
from app.services import integrity
from app.services.storage_service import Storage

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/drivers", response_model=list[DriverOut], summary="List drivers")
def list_drivers(storage: Storage = Depends(get_storage)):
    return storage.get_all_drivers()


@router.post("/drivers", response_model=DriverOut, status_code=201, summary="Register a driver")
def create_driver(body: DriverCreate, storage: Storage = Depends(get_storage)):
    integrity.ensure_license_available(storage, body.license_number)
    return storage.create_driver(body.model_dump(exclude_none=True))


@router.put("/drivers/{driver_id}", response_model=DriverOut, summary="Update a driver")
def update_driver(driver_id: int, body: DriverUpdate, storage: Storage = Depends(get_storage)):
    if storage.get_driver(driver_id) is None:
        raise HTTPException(status_code=404, detail="Driver not found")

    changes = body.changes()
    if "license_number" in changes:
        integrity.ensure_license_available(storage, changes["license_number"], exclude_id=driver_id)
    return storage.update_driver(driver_id, changes)
