import logging
import os
import re
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from typing import Dict, List
from uuid import UUID, uuid4

from dubai_horizon.config import get_public_base_url, get_upload_dir
from dubai_horizon.data_managers import (
    BookingDataManager,
    DestinationDataManager,
    UserDataManager,
    get_booking_data_manager,
    get_destination_data_manager,
    get_user_data_manager,
)
from dubai_horizon.dependencies import require_admin
from dubai_horizon.models.booking import AdminSummary, Booking, BookingStatus, BookingStatusUpdate
from dubai_horizon.models.user import CurrentUser
from dubai_horizon.storage import newest_first

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin",
    tags=["admin"],
    dependencies=[Depends(require_admin)],
    responses={
        401: {"description": "Not authenticated"},
        403: {"description": "Admin access required"}
    },
)

UPLOAD_URL_PATH = "/uploads"
ALLOWED_IMAGE_TYPES = {"image/jpeg", "image/png", "image/webp", "image/gif"}


def storage_filename(original_name: str) -> str:
    """Unique, filesystem-safe name: '<uuid>-<original with odd chars replaced>'."""
    safe_name = re.sub(r'[^a-zA-Z0-9._-]', '_', os.path.basename(original_name or "upload"))
    return f"{uuid4()}-{safe_name}"


@router.get("/summary", response_model=AdminSummary)
async def get_summary(
    bookings: BookingDataManager = Depends(get_booking_data_manager),
    users: UserDataManager = Depends(get_user_data_manager),
    destinations: DestinationDataManager = Depends(get_destination_data_manager),
):
    all_bookings = bookings.get_all()
    return AdminSummary(
        total_bookings=len(all_bookings),
        pending_bookings=sum(1 for b in all_bookings if b.get("status") == BookingStatus.PENDING.value),
        registered_users=users.count(),
        featured_destinations=destinations.count(),
    )


@router.get("/bookings", response_model=List[Booking])
async def get_all_bookings(bookings: BookingDataManager = Depends(get_booking_data_manager)):
    return newest_first(bookings.get_all())


@router.patch("/bookings/{booking_id}", response_model=Booking)
async def update_booking_status(
    booking_id: UUID,
    payload: BookingStatusUpdate,
    bookings: BookingDataManager = Depends(get_booking_data_manager),
    admin: CurrentUser = Depends(require_admin),
):
    updated = bookings.update_status(booking_id, payload.status.value)
    if not updated:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"message": f"Booking with ID {booking_id} not found"}
        )
    logger.info("Booking %s set to %s by %s", booking_id, payload.status.value, admin.email)
    return updated


@router.post("/uploads", response_model=Dict, status_code=status.HTTP_201_CREATED)
async def upload_image(file: UploadFile = File(...)):
    if file.content_type not in ALLOWED_IMAGE_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported file type '{file.content_type}'. Upload a JPEG, PNG, WebP or GIF image."
        )
    filename = storage_filename(file.filename)
    upload_dir = get_upload_dir()
    os.makedirs(upload_dir, exist_ok=True)
    try:
        contents = await file.read()
        with open(os.path.join(upload_dir, filename), "wb") as f:
            f.write(contents)
    except OSError as e:
        logger.error("Error uploading %s: %s", file.filename, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Could not upload file: {str(e)}"
        )
    logger.info("Stored upload %s (%d bytes)", filename, len(contents))
    return {
        "filename": filename,
        "public_url": f"{get_public_base_url()}{UPLOAD_URL_PATH}/{filename}",
    }
