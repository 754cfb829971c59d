"""Inquiry intake - validate and record contact form submissions."""

from typing import Any

from sabi.models.base import parse_input
from sabi.models.inquiry import Inquiry, InquiryStatus, InquirySubmission, InquiryStatusUpdate
from sabi.services.mapping import from_row, from_rows, to_row
from sabi.services.store import CollectionStore
from sabi.utils.errors import NotFoundError, ValidationError
from sabi.utils.ids import utc_now
from sabi.utils.logging import get_structured_logger, mask_sensitive_data, sanitize_message_text

logger = get_structured_logger(__name__)


async def submit_inquiry(store: CollectionStore, fields: Any) -> Inquiry:
    """
    Validate a public submission and store it as a new inquiry.

    Every well-formed submission is stored; there is no deduplication.
    Raises ValidationError (nothing stored) when a required field is blank
    or the email is not shaped like local@domain.tld.
    """
    try:
        submission = parse_input(InquirySubmission, fields)
    except ValidationError as e:
        logger.info("Inquiry rejected", field=e.field, reason=e.reason)
        raise

    row = to_row(Inquiry, {
        **submission.model_dump(mode="json"),
        "status": InquiryStatus.NEW.value,
        "created_at": utc_now().isoformat(),
    })
    inquiry = from_row(Inquiry, await store.insert(row))

    logger.info(
        "Inquiry received",
        inquiry_id=inquiry.id,
        listing_id=inquiry.listing_id,
        email=mask_sensitive_data(inquiry.email),
        message_preview=sanitize_message_text(inquiry.message),
    )
    return inquiry


async def list_inquiries(store: CollectionStore) -> list[Inquiry]:
    """All inquiries, newest first (back office)."""
    rows = await store.list(order_by="created_at", descending=True)
    return from_rows(Inquiry, rows)


async def update_inquiry_status(store: CollectionStore, inquiry_id: str, payload: Any) -> Inquiry:
    update = parse_input(InquiryStatusUpdate, payload)
    row = await store.update(inquiry_id, {"status": update.status.value})
    if row is None:
        raise NotFoundError(f"Inquiry not found: {inquiry_id}")
    logger.info("Inquiry status changed", inquiry_id=inquiry_id, status=update.status.value)
    return from_row(Inquiry, row)
