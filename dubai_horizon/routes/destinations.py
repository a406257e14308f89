import logging
from fastapi import APIRouter, HTTPException, status, Query, Depends
from typing import List, Optional, Dict
from uuid import UUID

from dubai_horizon.data_managers import (
    DestinationDataManager,
    ReviewDataManager,
    get_destination_data_manager,
    get_review_data_manager,
)
from dubai_horizon.dependencies import get_current_user, require_admin
from dubai_horizon.models.destination import (
    DESTINATION_TYPE_LABELS,
    Destination,
    DestinationCreate,
    DestinationDetail,
    DestinationType,
    DestinationTypeOption,
    DestinationUpdate,
    PaginatedDestinations,
)
from dubai_horizon.models.review import Review, ReviewCreate
from dubai_horizon.models.user import CurrentUser, review_display_name

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/destinations",
    tags=["destinations"],
    responses={
        404: {"description": "Destination not found"},
        500: {"description": "Internal server error"}
    }
)


def with_ratings(destination: Dict, ratings: List[int]) -> Destination:
    average = sum(ratings) / len(ratings) if ratings else None
    return Destination(**{**destination, "rating": average, "review_count": len(ratings)})


def not_found(destination_id: UUID):
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail={
            "message": f"Destination with ID {destination_id} not found",
            "requested_id": str(destination_id),
            "suggestion": "Verify the destination ID or use GET /destinations/"
        }
    )


@router.get("/types", response_model=List[DestinationTypeOption])
async def get_destination_types():
    return [DestinationTypeOption(value=value, label=label) for value, label in DESTINATION_TYPE_LABELS.items()]


@router.get("/", response_model=PaginatedDestinations)
async def get_all_destinations(
    page: int = Query(1, ge=1),
    page_size: int = Query(20, ge=1, le=100),
    search: Optional[str] = Query(None, description="Matches name, short description or tags"),
    type: Optional[DestinationType] = Query(None),
    destinations: DestinationDataManager = Depends(get_destination_data_manager),
    reviews: ReviewDataManager = Depends(get_review_data_manager),
):
    matches = destinations.search(term=search, destination_type=type.value if type else None)
    ratings = reviews.ratings_by_destination()

    total_count = len(matches)
    skip = (page - 1) * page_size
    items = [with_ratings(d, ratings.get(d["id"], [])) for d in matches[skip:skip + page_size]]
    total_pages = (total_count + page_size - 1) // page_size
    return PaginatedDestinations(
        items=items,
        total_count=total_count,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
        has_next_page=(page < total_pages),
        has_prev_page=(page > 1)
    )


@router.get("/{destination_id}", response_model=DestinationDetail)
async def get_destination(
    destination_id: UUID,
    destinations: DestinationDataManager = Depends(get_destination_data_manager),
    reviews: ReviewDataManager = Depends(get_review_data_manager),
):
    destination = destinations.get_by_id(destination_id)
    if not destination:
        raise not_found(destination_id)
    destination_reviews = reviews.for_destination(destination_id)
    rated = with_ratings(destination, [r["rating"] for r in destination_reviews])
    return DestinationDetail(**rated.model_dump(), reviews=destination_reviews)


@router.post("/", response_model=Destination, status_code=status.HTTP_201_CREATED)
async def create_destination(
    destination: DestinationCreate,
    destinations: DestinationDataManager = Depends(get_destination_data_manager),
    admin: CurrentUser = Depends(require_admin),
):
    new_destination = Destination(**destination.model_dump())
    destinations.add(new_destination.model_dump(mode="json", exclude={"rating", "review_count"}))
    logger.info("Destination %s created by %s", new_destination.id, admin.email)
    return new_destination


@router.put("/{destination_id}", response_model=Destination)
async def update_destination(
    destination_id: UUID,
    destination_update: DestinationUpdate,
    destinations: DestinationDataManager = Depends(get_destination_data_manager),
    admin: CurrentUser = Depends(require_admin),
):
    if not destinations.get_by_id(destination_id):
        raise not_found(destination_id)
    update_data = destination_update.model_dump(mode="json", exclude_unset=True)
    if not update_data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "message": "Update request must include at least one field to modify",
                "available_fields": ", ".join(DestinationUpdate.model_fields.keys())
            }
        )
    updated = destinations.update(destination_id, update_data)
    logger.info("Destination %s updated by %s", destination_id, admin.email)
    return Destination(**updated)


@router.delete("/{destination_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_destination(
    destination_id: UUID,
    destinations: DestinationDataManager = Depends(get_destination_data_manager),
    reviews: ReviewDataManager = Depends(get_review_data_manager),
    admin: CurrentUser = Depends(require_admin),
):
    if not destinations.delete(destination_id):
        raise not_found(destination_id)
    removed_reviews = reviews.delete_for_destination(destination_id)
    logger.info("Destination %s deleted by %s (%d reviews removed)", destination_id, admin.email, removed_reviews)


@router.get("/{destination_id}/reviews", response_model=List[Review])
async def get_destination_reviews(
    destination_id: UUID,
    destinations: DestinationDataManager = Depends(get_destination_data_manager),
    reviews: ReviewDataManager = Depends(get_review_data_manager),
):
    if not destinations.get_by_id(destination_id):
        raise not_found(destination_id)
    return reviews.for_destination(destination_id)


@router.post("/{destination_id}/reviews", response_model=Review, status_code=status.HTTP_201_CREATED)
async def create_review(
    destination_id: UUID,
    review: ReviewCreate,
    destinations: DestinationDataManager = Depends(get_destination_data_manager),
    reviews: ReviewDataManager = Depends(get_review_data_manager),
    user: CurrentUser = Depends(get_current_user),
):
    if not destinations.get_by_id(destination_id):
        raise not_found(destination_id)
    new_review = Review(
        **review.model_dump(),
        destination_id=destination_id,
        user_id=user.id,
        user_name=review_display_name(user),
    )
    reviews.add(new_review.model_dump(mode="json"))
    return new_review
