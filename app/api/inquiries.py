# app/api/inquiries.py
from typing import Any

from fastapi import APIRouter, Body, Depends

from app.core.deps import get_intake_service, require_admin
from app.schemas.inquiry import ErrorOut, InquiryCreatedOut, InquiryListOut, InquiryOut
from app.services.intake import InquiryIntakeService

router = APIRouter(prefix="/inquiries", tags=["inquiries"])


@router.post(
    "",
    response_model=InquiryCreatedOut,
    responses={400: {"model": ErrorOut}, 500: {"model": ErrorOut}},
)
def create_inquiry(
    payload: Any = Body(None),
    service: InquiryIntakeService = Depends(get_intake_service),
):
    """
    Guest contact form.
    - Body is validated by the intake service (not FastAPI) so every bad field is reported together
    - Email to the operator is best-effort and never affects the response
    """
    inquiry = service.submit(payload)
    return InquiryCreatedOut(inquiry=InquiryOut.model_validate(inquiry))


@router.get(
    "",
    response_model=InquiryListOut,
    responses={401: {"model": ErrorOut}, 500: {"model": ErrorOut}},
    dependencies=[Depends(require_admin)],
)
def list_inquiries(service: InquiryIntakeService = Depends(get_intake_service)):
    """
    All inquiries, newest first. Operator only.
    """
    rows = service.list()
    return InquiryListOut(inquiries=[InquiryOut.model_validate(r) for r in rows])
