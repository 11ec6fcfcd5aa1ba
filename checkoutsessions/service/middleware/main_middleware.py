import time

from prometheus_client import Counter
from starlette import status
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.base import RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp
from uuid_extensions import uuid7

from checkoutsessions import api_logger
from checkoutsessions.service.error_responses import APIErrorResponse
from checkoutsessions.service.middleware import util
from checkoutsessions.service.middleware.entities import RequestStateKey
from checkoutsessions.utils import http_headers

logger = api_logger.get()

response_status_codes_counter = Counter(
    "response_status_codes",
    "Total number of HTTP status codes of each endpoint",
    ["endpoint", "status_code"],
)


class MainMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp) -> None:
        super().__init__(app)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = str(uuid7())
        util.set_state(request, RequestStateKey.REQUEST_ID, request_id)

        try:
            logger.info(
                f"REQUEST STARTED "
                f"request_id={request_id} "
                f"request_path={request.url.path} "
            )
            before = time.time()
            response: Response = await call_next(request)

            response_status_codes_counter.labels(
                request.url.path, response.status_code
            ).inc()

            process_time = (time.time() - before) * 1000
            formatted_process_time = "{0:.2f}".format(process_time)
            if response.status_code != 404:
                logger.info(
                    f"REQUEST COMPLETED "
                    f"request_id={request_id} "
                    f"request_path={request.url.path} "
                    f"completed_in={formatted_process_time}ms "
                    f"status_code={response.status_code}"
                )
            return await http_headers.add_response_headers(response)
        except Exception as error:
            if isinstance(error, APIErrorResponse):
                error_status_code = error.to_status_code()
                logger.error(
                    f"Error while handling request. request_id={request_id} "
                    f"request_path={request.url.path} "
                    f"status code={error_status_code} "
                    f"code={error.to_code()} "
                    f"message={error.to_message()}",
                    exc_info=error_status_code == 500,
                )
            else:
                # Rendered as INTERNAL_SERVER_ERROR(500) by the exception handler
                error_status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
                logger.error(
                    f"Error while handling request. request_id={request_id} "
                    f"request_path={request.url.path} ",
                    exc_info=True,
                )
            response_status_codes_counter.labels(
                request.url.path, error_status_code
            ).inc()
            raise error from None
