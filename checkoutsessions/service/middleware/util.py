from typing import Any

from starlette.requests import Request

from checkoutsessions.service.middleware.entities import RequestStateKey


def set_state(request: Request, state_key: RequestStateKey, value: Any):
    setattr(request.state, state_key.value, value)
