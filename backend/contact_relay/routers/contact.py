# contact_relay/routers/contact.py
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from contact_relay.core.mailer import send_contact_email
from contact_relay.lib.validation import Submission, validate_submission

router = APIRouter(prefix="/api", tags=["contact"])
log = logging.getLogger("uvicorn.error")


def error_response(status_code: int, error: str) -> JSONResponse:
    return JSONResponse({"success": False, "error": error}, status_code=status_code)


@router.post("/contact")
async def contact(request: Request):
    content_type = request.headers.get("content-type")
    if not content_type or "application/json" not in content_type:
        log.warning(f"[contact] rejected content-type: {content_type!r}")
        return error_response(400, "Content-Type must be application/json")

    try:
        data = await request.json()
    except ValueError as exc:
        log.error(f"[contact] malformed JSON body: {exc}")
        return error_response(500, "Internal server error")

    reason = validate_submission(data)
    if reason:
        log.warning(f"[contact] validation failed: {reason}")
        return error_response(400, reason)

    sub = Submission.from_payload(data)
    log.info(f"[contact] submission from {sub.name!r} ({sub.project_label})")

    outcome = await send_contact_email(sub)
    if not outcome.ok:
        return error_response(500, outcome.error)

    return JSONResponse({
        "success": True,
        "messageId": outcome.message_id,
        "message": "Email sent successfully",
    })
