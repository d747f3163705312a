from typing import Optional

from fastapi import APIRouter, Depends, Response
from fastapi.responses import JSONResponse

from app.api import deps
from app.schemas import quote as schemas
from app.services.errors import QuoteServiceError
from app.services.quotes import QuoteService

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": schemas.ErrorOut, "description": "Invalid request body"},
    404: {"model": schemas.ErrorOut, "description": "Quote not found"},
    500: {"model": schemas.ErrorOut, "description": "Server error"},
}


def error_response(error: QuoteServiceError) -> JSONResponse:
    return JSONResponse(status_code=error.status, content={"error": error.to_dict()})


def serialize(rows) -> list:
    return [schemas.Quote.model_validate(row) for row in rows]


@router.get("", response_model=schemas.QuoteListOut, include_in_schema=False)
@router.get("/", response_model=schemas.QuoteListOut, responses={500: ERROR_RESPONSES[500]})
async def list_quotes(service: QuoteService = Depends(deps.get_quote_service)):
    """List all quotes, most recent first"""
    result = await service.list_quotes()
    if not result.ok:
        return error_response(result.error)
    return schemas.QuoteListOut(quotes=serialize(result.value))


@router.get(
    "/{quote_id}",
    response_model=schemas.QuoteDetailOut,
    responses={404: ERROR_RESPONSES[404], 500: ERROR_RESPONSES[500]},
)
async def get_quote(
    quote_id: str,
    service: QuoteService = Depends(deps.get_quote_service),
):
    """Fetch one quote, returned as a single-item list"""
    result = await service.get_quote(quote_id)
    if not result.ok:
        return error_response(result.error)
    return schemas.QuoteDetailOut(quote=serialize([result.value]))


@router.post("", response_model=schemas.QuoteMutationOut, status_code=201, include_in_schema=False)
@router.post(
    "/",
    response_model=schemas.QuoteMutationOut,
    status_code=201,
    responses={400: ERROR_RESPONSES[400], 500: ERROR_RESPONSES[500]},
)
async def create_quote(
    quote_in: Optional[schemas.QuoteCreate] = None,
    service: QuoteService = Depends(deps.get_quote_service),
):
    """Add a new quote"""
    # A missing body is treated as {} so the service reports which field is required
    if quote_in is None:
        quote_in = schemas.QuoteCreate()
    result = await service.create_quote(quote_in.author, quote_in.content)
    if not result.ok:
        return error_response(result.error)
    return schemas.QuoteMutationOut(
        data=serialize(result.value), message="Success! A new quote was added"
    )


@router.patch("/{quote_id}", response_model=schemas.QuoteMutationOut, responses=ERROR_RESPONSES)
async def update_quote(
    quote_id: str,
    quote_in: Optional[schemas.QuoteUpdate] = None,
    service: QuoteService = Depends(deps.get_quote_service),
):
    """Change the author and/or content of a quote; omitted or blank fields are kept"""
    if quote_in is None:
        quote_in = schemas.QuoteUpdate()
    result = await service.update_quote(quote_id, quote_in.author, quote_in.content)
    if not result.ok:
        return error_response(result.error)
    return schemas.QuoteMutationOut(
        data=serialize(result.value), message="Success! Quote was updated"
    )


@router.delete(
    "/{quote_id}",
    status_code=204,
    response_class=Response,
    responses={404: ERROR_RESPONSES[404], 500: ERROR_RESPONSES[500]},
)
async def delete_quote(
    quote_id: str,
    service: QuoteService = Depends(deps.get_quote_service),
):
    result = await service.delete_quote(quote_id)
    if not result.ok:
        return error_response(result.error)
    # 204 carries no body
    return Response(status_code=204)
