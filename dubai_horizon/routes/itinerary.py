from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.concurrency import run_in_threadpool

from dubai_horizon.models.itinerary import (
    GeneratedItinerary,
    ItinerarySuggestionRequest,
    ParsedItinerary,
    StructureRequest,
)
from dubai_horizon.services.itinerary_generator import (
    ItineraryGenerationError,
    ItineraryGenerator,
    get_itinerary_generator,
)
from dubai_horizon.services.itinerary_parser import structure_itinerary

router = APIRouter(
    prefix="/itinerary",
    tags=["itinerary"],
    responses={502: {"description": "Itinerary service failed"}},
)


@router.post("/structure", response_model=ParsedItinerary)
async def structure(payload: StructureRequest):
    return ParsedItinerary(days=structure_itinerary(payload.text))


@router.post("/generate", response_model=GeneratedItinerary)
async def generate(
    payload: ItinerarySuggestionRequest,
    generator: ItineraryGenerator = Depends(get_itinerary_generator),
):
    try:
        itinerary = await run_in_threadpool(generator.suggest, payload)
    except ItineraryGenerationError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail={"message": "Error generating itinerary", "error": str(e)}
        )
    return GeneratedItinerary(itinerary=itinerary, days=structure_itinerary(itinerary))
