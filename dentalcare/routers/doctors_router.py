from typing import List
from fastapi import APIRouter, Depends, HTTPException
import logging

from ..application.services.doctor_service import DoctorService
from ..dependencies import get_doctor_service, require_admin
from ..schemas.common.common import DeleteResult, InsertResult
from ..schemas.doctors.doctor import DoctorCreate, DoctorResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/doctors", tags=["Doctors"])


@router.post("", response_model=InsertResult, response_model_exclude_none=True)
def create_doctor(
    doctor_data: DoctorCreate,
    admin_email: str = Depends(require_admin),
    doctor_service: DoctorService = Depends(get_doctor_service),
):
    try:
        d = doctor_service.add(doctor_data.name, doctor_data.specialty, doctor_data.email, doctor_data.image)
        return InsertResult(acknowledged=True, insertedId=d.id)
    except Exception as e:
        logger.error(f"Error creating doctor: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to create doctor")


@router.get("", response_model=List[DoctorResponse])
def get_doctors(
    admin_email: str = Depends(require_admin),
    doctor_service: DoctorService = Depends(get_doctor_service),
):
    try:
        return [
            DoctorResponse(id=d.id, name=d.name, specialty=d.specialty, email=d.email, image=d.image)
            for d in doctor_service.list_doctors()
        ]
    except Exception as e:
        logger.error(f"Error retrieving doctors: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to retrieve doctors")


@router.delete("/{doctor_id}", response_model=DeleteResult)
def delete_doctor(
    doctor_id: str,
    admin_email: str = Depends(require_admin),
    doctor_service: DoctorService = Depends(get_doctor_service),
):
    try:
        return DeleteResult(deletedCount=doctor_service.remove(doctor_id))
    except Exception as e:
        logger.error(f"Error deleting doctor {doctor_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to delete doctor")
