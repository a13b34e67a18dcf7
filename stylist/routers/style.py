from fastapi import APIRouter, Depends

from stylist.deps import get_extractor, get_generator
from stylist.schemas.style import (
    ContextIn,
    ErrorOut,
    LooksIn,
    LooksOut,
    SuggestionsIn,
    SuggestionsOut,
)
from stylist.services.context import PromptContextExtractor
from stylist.services.directives import build_directive
from stylist.services.llm.types import OutfitContext
from stylist.services.suggestions import OutfitSuggestionGenerator

router = APIRouter(prefix="/style", tags=["style"])

_ERRORS = {
    400: {"model": ErrorOut},
    422: {"model": ErrorOut},
    502: {"model": ErrorOut},
    503: {"model": ErrorOut},
}


@router.post("/context", response_model=OutfitContext, responses=_ERRORS)
async def extract_context(
    payload: ContextIn,
    extractor: PromptContextExtractor = Depends(get_extractor),
):
    return await extractor.extract(payload.message)


@router.post("/suggestions", response_model=SuggestionsOut, responses=_ERRORS)
async def suggest_outfits(
    payload: SuggestionsIn,
    generator: OutfitSuggestionGenerator = Depends(get_generator),
):
    directive = build_directive(payload.context, payload.weather, payload.count)
    suggestions = await generator.generate(
        payload.context, payload.weather, payload.count, directive=directive
    )
    return SuggestionsOut(directive=directive, suggestions=suggestions)


@router.post("/looks", response_model=LooksOut, responses=_ERRORS)
async def inspire_looks(
    payload: LooksIn,
    extractor: PromptContextExtractor = Depends(get_extractor),
    generator: OutfitSuggestionGenerator = Depends(get_generator),
):
    context = await extractor.extract(payload.message)
    directive = build_directive(context, payload.weather, payload.count)
    suggestions = await generator.generate(context, payload.weather, payload.count, directive=directive)
    return LooksOut(context=context, directive=directive, suggestions=suggestions)
