# app/routers/vehicles.py
"""Vehicle registry management (admin only)."""

from fastapi import APIRouter, Depends, HTTPException

from app.dependencies import get_storage, require_admin
from app.schemas.vehicle import VehicleCreate, VehicleOut, VehicleUpdate
from app.services import integrity
from app.services.storage_service import Storage

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/vehicles", response_model=list[VehicleOut], summary="List registered vehicles")
def list_vehicles(storage: Storage = Depends(get_storage)):
    return storage.get_all_vehicles()


@router.post("/vehicles", response_model=VehicleOut, status_code=201, summary="Register a vehicle")
def register_vehicle(body: VehicleCreate, storage: Storage = Depends(get_storage)):
    integrity.ensure_plate_available(storage, body.plate_number)
    integrity.ensure_driver_exists(storage, body.driver_id)
    return storage.create_vehicle(body.model_dump(exclude_none=True))


@router.put("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Update a vehicle")
def update_vehicle(vehicle_id: int, body: VehicleUpdate, storage: Storage = Depends(get_storage)):
    existing = storage.get_vehicle(vehicle_id)
    if existing is None:
        raise HTTPException(status_code=404, detail="Vehicle not found")

    changes = body.changes()
    if "plate_number" in changes:
        integrity.ensure_plate_available(storage, changes["plate_number"], exclude_id=vehicle_id)
    if changes.get("driver_id") not in (None, existing.driver_id):
        integrity.ensure_driver_exists(storage, changes["driver_id"])
    return storage.update_vehicle(vehicle_id, changes)


@router.delete("/vehicles/{vehicle_id}", summary="Remove a vehicle")
def remove_vehicle(vehicle_id: int, storage: Storage = Depends(get_storage)):
    if storage.get_vehicle(vehicle_id) is None:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    if not storage.delete_vehicle(vehicle_id):
        raise HTTPException(status_code=500, detail="Failed to delete vehicle")
    return {"message": "Vehicle deleted successfully"}
