# app/routers/verify.py
"""Public plate verification used by passengers before boarding."""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.dependencies import get_storage
from app.schemas.verify import VerifyRequest, VerifyResponse
from app.services.storage_service import Storage
from app.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.post("/verify", response_model=VerifyResponse,
             responses={404: {"description": "Plate not registered with the park"}},
             summary="Verify a plate number")
def verify_plate(body: VerifyRequest, storage: Storage = Depends(get_storage)):
    result = storage.get_vehicle_with_driver(body.plate_number)
    if result is None:
        logger.info(f"Verification failed for plate {body.plate_number}")
        return JSONResponse(status_code=404, content={
            "verified": False,
            "message": f"This plate number ({body.plate_number}) does not belong to our park. Please verify "
                       f"the plate number or contact park management if you believe this is an error.",
        })

    vehicle, driver = result
    return {"verified": True, "vehicle": vehicle, "driver": driver}
