from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from checkoutsessions.service.error_responses import APIErrorResponse
from checkoutsessions.service.error_responses import InternalServerAPIError
from checkoutsessions.service.error_responses import ValidationError
from checkoutsessions.utils import http_headers


async def custom_exception_handler(request: Request, error: Exception):
    if not isinstance(error, APIErrorResponse):
        error = InternalServerAPIError()
    return await http_headers.add_response_headers(
        JSONResponse(
            status_code=error.to_status_code(),
            content=jsonable_encoder(
                {
                    "response": "NOK",
                    "error": {
                        "status_code": error.to_status_code(),
                        "code": error.to_code(),
                        "message": error.to_message(),
                    },
                }
            ),
        ),
    )


async def validation_exception_handler(
    request: Request, error: RequestValidationError
):
    fields = sorted(
        {".".join(str(loc) for loc in e.get("loc", ())) for e in error.errors()}
    )
    return await custom_exception_handler(
        request, ValidationError(f"invalid fields: {', '.join(fields)}")
    )
