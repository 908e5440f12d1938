"""Conversion between stored quote documents and domain entities."""

from cabinet_quotes.application.config.schema import (
    CabinetItemDocument,
    QuoteDocument,
    SpaceDocument,
)
from cabinet_quotes.domain.entities import CabinetItem, Quote, Space
from cabinet_quotes.domain.value_objects import AppliedAdjustment, NoAdjustment


def document_to_quote(document: QuoteDocument) -> Quote:
    """Build a Quote entity from a validated document.

    A document without adjustment keys maps to NoAdjustment; a missing
    percentage alongside an applied adjustment is read as 0.
    """
    if document.adjustment_type is not None:
        assert document.adjusted_total is not None and document.total is not None
        adjustment = AppliedAdjustment(
            adjustment_type=document.adjustment_type,
            percentage=document.adjustment_percentage or 0.0,
            adjusted_subtotal=document.adjusted_total,
            total=document.total,
        )
    else:
        adjustment = NoAdjustment()

    return Quote(
        id=document.id,
        client_name=document.client_name,
        email=document.email,
        phone=document.phone,
        project_name=document.project_name,
        installation_address=document.installation_address,
        spaces=tuple(
            Space(
                id=space.id,
                name=space.name,
                items=tuple(
                    CabinetItem(
                        id=item.id,
                        width=item.width,
                        height=item.height,
                        depth=item.depth,
                        price=item.price,
                    )
                    for item in space.items
                ),
            )
            for space in document.spaces
        ),
        adjustment=adjustment,
        metadata=document.extra_fields,
    )


def quote_to_document(quote: Quote) -> QuoteDocument:
    """Build a document from a Quote entity, restoring carried metadata."""
    return QuoteDocument(
        **quote.metadata,
        id=quote.id,
        client_name=quote.client_name,
        email=quote.email,
        phone=quote.phone,
        project_name=quote.project_name,
        installation_address=quote.installation_address,
        spaces=[
            SpaceDocument(
                id=space.id,
                name=space.name,
                items=[
                    CabinetItemDocument(
                        id=item.id,
                        width=item.width,
                        height=item.height,
                        depth=item.depth,
                        price=item.price,
                    )
                    for item in space.items
                ],
            )
            for space in quote.spaces
        ],
        adjustment_type=quote.adjustment_type,
        adjustment_percentage=quote.adjustment_percentage,
        adjusted_total=quote.adjusted_total,
        total=quote.total,
    )
