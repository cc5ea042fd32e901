import logging
from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.exception_handlers import http_exception_handler as default_http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from config import CONTACT_ENDPOINT
from helpers.contact_helper import build_submission, parse_request_body
from helpers.email_helper import EmailProvider, get_email_provider, send_email
from helpers.exceptions import ContactFormError, MethodNotAllowedError

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Contact Form"]
)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST,OPTIONS",
}

ROUTE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

def json_response(content: dict, status_code: int) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)

@router.api_route(CONTACT_ENDPOINT, methods=ROUTE_METHODS)
async def contact_email(request: Request, provider: EmailProvider = Depends(get_email_provider)):
    """Validates a contact form submission and emails it to the sales inbox."""
    if request.method == "OPTIONS":
        return Response(status_code=204, headers=CORS_HEADERS)

    try:
        if request.method != "POST":
            raise MethodNotAllowedError()

        body = await request.body()
        payload = parse_request_body(body, request.headers.get("content-type", ""))
        submission = build_submission(payload)

        await run_in_threadpool(send_email, submission, provider)
    except ContactFormError as e:
        logger.warning(f"Contact request rejected with {e.status_code}: {e.message}")
        return json_response(e.to_body(), e.status_code)

    logger.info(f"Contact form submission from {submission.full_name} sent")
    return json_response({"success": True}, 200)

async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Verbs outside ROUTE_METHODS are rejected by the router before reaching contact_email."""
    if exc.status_code == 405 and request.url.path == CONTACT_ENDPOINT:
        logger.warning(f"Contact request rejected with 405: {request.method}")
        return json_response(MethodNotAllowedError().to_body(), 405)
    return await default_http_exception_handler(request, exc)
