"""Quote editing endpoints.

Each edit request opens a session on the stored quote, applies one edit and
saves. Edits that reference an unknown space or item leave the quote
unchanged and still return 200.
"""

from collections.abc import Callable

from fastapi import APIRouter, status

from cabinet_quotes.application.session import QuoteEditSession
from cabinet_quotes.domain.entities import Quote
from cabinet_quotes.web.dependencies import ServiceFactoryDep
from cabinet_quotes.web.exceptions import InvalidEditError, QuoteSaveFailedError
from cabinet_quotes.web.schemas.requests import (
    AdjustmentRequest,
    ClientFieldUpdateRequest,
    CreateQuoteRequest,
    ItemUpdateRequest,
    SpaceUpdateRequest,
)
from cabinet_quotes.web.schemas.responses import ErrorResponseSchema, QuoteResponseSchema

router = APIRouter(
    prefix="/quotes",
    tags=["quotes"],
    responses={
        404: {"model": ErrorResponseSchema, "description": "Quote not found"},
        422: {"model": ErrorResponseSchema, "description": "Edit rejected"},
        503: {"model": ErrorResponseSchema, "description": "Save failed, retry"},
    },
)


def _edit(
    factory: ServiceFactoryDep,
    quote_id: str,
    edit: Callable[[QuoteEditSession], object],
) -> QuoteResponseSchema:
    """Open a session, apply an edit and save.

    Raises:
        QuoteNotFoundError: If the quote does not exist (handled as 404).
        InvalidEditError: If the domain rejects the edit (handled as 422).
        QuoteSaveFailedError: If the store rejects the write (handled as 503).
    """
    session = factory.open_session(quote_id)
    try:
        edit(session)
    except ValueError as e:
        raise InvalidEditError(str(e)) from e

    result = session.save()
    if not result.saved:
        raise QuoteSaveFailedError(result.quote_id, result.message or "")
    return QuoteResponseSchema.from_summary(session.summary())


@router.post(
    "",
    response_model=QuoteResponseSchema,
    status_code=status.HTTP_201_CREATED,
)
async def create_quote(
    request: CreateQuoteRequest,
    factory: ServiceFactoryDep,
) -> QuoteResponseSchema:
    """Create an empty quote with client details.

    Args:
        request: Client details.
        factory: Injected ServiceFactory.

    Returns:
        The stored quote carrying its new id.
    """
    quote = factory.get_repository().create(
        Quote(
            client_name=request.client_name,
            email=request.email,
            phone=request.phone,
            project_name=request.project_name,
            installation_address=request.installation_address,
        )
    )
    assert quote.id is not None
    return QuoteResponseSchema.from_summary(factory.open_session(quote.id).summary())


@router.get("/{quote_id}", response_model=QuoteResponseSchema)
async def get_quote(quote_id: str, factory: ServiceFactoryDep) -> QuoteResponseSchema:
    """Get a quote and its display figures."""
    return QuoteResponseSchema.from_summary(factory.open_session(quote_id).summary())


@router.patch("/{quote_id}/client", response_model=QuoteResponseSchema)
async def update_client_field(
    quote_id: str,
    request: ClientFieldUpdateRequest,
    factory: ServiceFactoryDep,
) -> QuoteResponseSchema:
    """Change one client detail."""
    return _edit(
        factory,
        quote_id,
        lambda s: s.update_client_field(request.field, request.value),
    )


@router.post("/{quote_id}/spaces", response_model=QuoteResponseSchema)
async def add_space(quote_id: str, factory: ServiceFactoryDep) -> QuoteResponseSchema:
    """Append an empty space. The new space is last in ``spaces``."""
    return _edit(factory, quote_id, lambda s: s.add_space())


@router.patch("/{quote_id}/spaces/{space_id}", response_model=QuoteResponseSchema)
async def update_space(
    quote_id: str,
    space_id: str,
    request: SpaceUpdateRequest,
    factory: ServiceFactoryDep,
) -> QuoteResponseSchema:
    """Rename a space."""
    return _edit(factory, quote_id, lambda s: s.rename_space(space_id, request.name))


@router.delete("/{quote_id}/spaces/{space_id}", response_model=QuoteResponseSchema)
async def delete_space(
    quote_id: str,
    space_id: str,
    factory: ServiceFactoryDep,
) -> QuoteResponseSchema:
    """Delete a space and its items."""
    return _edit(factory, quote_id, lambda s: s.delete_space(space_id))


@router.post("/{quote_id}/spaces/{space_id}/items", response_model=QuoteResponseSchema)
async def add_item(
    quote_id: str,
    space_id: str,
    factory: ServiceFactoryDep,
) -> QuoteResponseSchema:
    """Append a default item to a space."""
    return _edit(factory, quote_id, lambda s: s.add_item(space_id))


@router.patch(
    "/{quote_id}/spaces/{space_id}/items/{item_id}",
    response_model=QuoteResponseSchema,
)
async def update_item(
    quote_id: str,
    space_id: str,
    item_id: str,
    request: ItemUpdateRequest,
    factory: ServiceFactoryDep,
) -> QuoteResponseSchema:
    """Change dimensions or price of an item."""
    changes = request.model_dump(exclude_none=True)
    return _edit(
        factory, quote_id, lambda s: s.update_item(space_id, item_id, changes)
    )


@router.delete(
    "/{quote_id}/spaces/{space_id}/items/{item_id}",
    response_model=QuoteResponseSchema,
)
async def delete_item(
    quote_id: str,
    space_id: str,
    item_id: str,
    factory: ServiceFactoryDep,
) -> QuoteResponseSchema:
    """Delete an item."""
    return _edit(factory, quote_id, lambda s: s.delete_item(space_id, item_id))


@router.post("/{quote_id}/adjustment", response_model=QuoteResponseSchema)
async def apply_adjustment(
    quote_id: str,
    request: AdjustmentRequest,
    factory: ServiceFactoryDep,
) -> QuoteResponseSchema:
    """Apply a discount or surcharge to the current subtotal.

    The adjusted subtotal and total are frozen until the next apply.
    """

    def edit(session: QuoteEditSession) -> None:
        session.set_adjustment_type(request.adjustment_type)
        session.set_adjustment_percentage(request.percentage)
        session.apply_adjustment()

    return _edit(factory, quote_id, edit)
