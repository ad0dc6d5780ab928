from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from ..application.ports.bookings_repo import BookingDto
from ..application.services.booking_service import BookingService
from ..dependencies import get_booking_service, get_current_email
from ..schemas.bookings.booking import BookingCreate, BookingResponse
from ..schemas.common.common import InsertResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["Bookings"])


def _to_response(b: BookingDto) -> BookingResponse:
    return BookingResponse(
        id=b.id,
        email=b.email,
        appointmentDate=b.appointment_date,
        treatment=b.treatment,
        slot=b.slot,
        patient=b.patient,
        phone=b.phone,
        price=b.price,
        paid=b.paid,
        transactionId=b.transaction_id,
    )


@router.post("", response_model=InsertResult, response_model_exclude_none=True)
def create_booking(
    booking: BookingCreate,
    booking_service: BookingService = Depends(get_booking_service),
):
    try:
        result = booking_service.book(
            email=booking.email,
            appointment_date=booking.appointmentDate,
            treatment=booking.treatment,
            slot=booking.slot,
            patient=booking.patient,
            phone=booking.phone,
            price=booking.price,
        )
        return InsertResult(acknowledged=result.acknowledged, insertedId=result.inserted_id, message=result.message)
    except Exception as e:
        logger.error(f"Error creating booking: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to create booking")


@router.get("", response_model=List[BookingResponse])
def get_bookings(
    email: Optional[str] = Query(None),
    current_email: str = Depends(get_current_email),
    booking_service: BookingService = Depends(get_booking_service),
):
    try:
        return [_to_response(b) for b in booking_service.list_for_identity(email, current_email)]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error retrieving bookings: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to retrieve bookings")


@router.get("/{booking_id}", response_model=BookingResponse)
def get_booking(
    booking_id: str,
    booking_service: BookingService = Depends(get_booking_service),
):
    try:
        return _to_response(booking_service.get(booking_id))
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error retrieving booking {booking_id}: {str(e)}")
        raise HTTPException(status_code=500, detail="Failed to retrieve booking")
