from typing import List
from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from ..application.ports.options_repo import AppointmentOptionDto
from ..application.services.availability_service import AvailabilityService
from ..dependencies import get_availability_service
from ..schemas.appointments.option import AppointmentOptionResponse, SpecialtyResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Appointments"])


def _to_response(option: AppointmentOptionDto) -> AppointmentOptionResponse:
    return AppointmentOptionResponse(id=option.id, name=option.name, price=option.price, slots=option.slots)


@router.get("/appointmentsOptions", response_model=List[AppointmentOptionResponse])
def get_appointment_options(
    date: str = Query(..., min_length=1),
    availability: AvailabilityService = Depends(get_availability_service),
):
    try:
        return [_to_response(o) for o in availability.available_options(date)]
    except Exception as e:
        logger.error(f"Error computing availability for {date}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to retrieve appointment options")


@router.get("/v2/appointmentOptions", response_model=List[AppointmentOptionResponse])
def get_appointment_options_v2(
    date: str = Query(..., min_length=1),
    availability: AvailabilityService = Depends(get_availability_service),
):
    try:
        return [_to_response(o) for o in availability.available_options_from_store(date)]
    except Exception as e:
        logger.error(f"Error computing availability (store join) for {date}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to retrieve appointment options")


@router.get("/appointmentSpecialty", response_model=List[SpecialtyResponse])
def get_appointment_specialties(
    availability: AvailabilityService = Depends(get_availability_service),
):
    try:
        return [SpecialtyResponse(id=o.id, name=o.name) for o in availability.specialties()]
    except Exception as e:
        logger.error(f"Error retrieving specialties: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to retrieve specialties")
