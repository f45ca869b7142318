"""API routes for parsing ingredient lines."""

import uuid

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from recipeparse.config import get_settings
from recipeparse.errors import ParseError
from recipeparse.logging_config import LoggingContext, get_logger
from recipeparse.normalize.units import spellings_for
from recipeparse.parse.pipeline import parse_ingredient_line, parse_ingredient_lines
from recipeparse.schemas import Ingredient, MeasurementSystem, Unit

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["ingredients"])


# Request/Response schemas
class ParseListRequest(BaseModel):
    """Request to parse a list of ingredient lines."""

    lines: list[str] = Field(min_length=1)


class ParseLineRequest(BaseModel):
    """Request to parse a single ingredient line."""

    line: str


class LineError(BaseModel):
    """Why one line of a list failed to parse."""

    index: int
    line: str
    code: str
    message: str


class ParseListResponse(BaseModel):
    """Result of parsing a list of ingredient lines.

    Either every line parsed and `ingredients` holds them in order, or
    `ingredients` is null and `lines` echoes the input untouched.
    """

    parsed: bool
    ingredients: list[Ingredient] | None = None
    lines: list[str]
    errors: list[LineError] = Field(default_factory=list)


class UnitResponse(BaseModel):
    """A canonical unit and the spellings that map to it."""

    unit: Unit
    system: MeasurementSystem
    spellings: list[str]


class UnitListResponse(BaseModel):
    """List of canonical units."""

    units: list[UnitResponse]
    total: int


@router.post("/ingredients/parse", response_model=ParseListResponse)
async def parse_ingredients(request: ParseListRequest) -> ParseListResponse:
    """Parse a list of ingredient lines with all-or-nothing semantics."""
    max_batch_size = get_settings().max_batch_size
    if len(request.lines) > max_batch_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"At most {max_batch_size} lines can be parsed per request",
        )

    with LoggingContext(batch_id=uuid.uuid4().hex):
        batch = parse_ingredient_lines(request.lines)

    if not batch.succeeded:
        return ParseListResponse(
            parsed=False,
            lines=list(request.lines),
            errors=[
                LineError(
                    index=index,
                    line=result.raw,
                    code=result.error.value,
                    message=result.message or "",
                )
                for index, result in batch.failures
            ],
        )

    return ParseListResponse(parsed=True, ingredients=batch.ingredients, lines=list(request.lines))


@router.post("/ingredients/parse-line", response_model=Ingredient)
async def parse_line(request: ParseLineRequest) -> Ingredient:
    """Parse a single ingredient line."""
    try:
        return parse_ingredient_line(request.line).unwrap()
    except ParseError as e:
        logger.info(f"Rejected ingredient line: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.to_dict(),
        ) from e


@router.get("/units", response_model=UnitListResponse)
async def list_units() -> UnitListResponse:
    """List canonical units with their recognized spellings."""
    units = [
        UnitResponse(unit=unit, system=unit.system, spellings=spellings_for(unit)) for unit in Unit
    ]
    return UnitListResponse(units=units, total=len(units))
