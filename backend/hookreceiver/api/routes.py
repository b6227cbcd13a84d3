import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.requests import ClientDisconnect

from hookreceiver.core.config import Settings, get_settings
from hookreceiver.services.dispatcher import (
    BodyReadError,
    MalformedPayload,
    ResponseEncodeError,
    SchemaMismatch,
    dispatch,
)

logger = logging.getLogger(__name__)

HEALTH_MESSAGE = "Hello from localhost:3000"


async def read_body(request: Request) -> bytes:
    try:
        return await request.body()
    except ClientDisconnect as e:
        raise BodyReadError("Client disconnected before the body was read") from e


def encode_response(content: Any, status_code: int = status.HTTP_200_OK) -> Response:
    try:
        return JSONResponse(content, status_code=status_code)
    except (TypeError, ValueError) as e:
        raise ResponseEncodeError(str(e)) from e


def build_router() -> APIRouter:
    router = APIRouter()

    @router.api_route(
        "/health",
        methods=["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        include_in_schema=False,
    )
    async def health():
        try:
            return encode_response({"data": HEALTH_MESSAGE})
        except ResponseEncodeError as e:
            logger.error(f"error encoding data to send as response: {e}")
            return Response(status_code=status.HTTP_200_OK)

    @router.post("/dynamic-hook")
    async def dynamic_hook(request: Request, settings: Settings = Depends(get_settings)):
        logger.info(f"This API is connected, user={settings.user}")

        try:
            raw = await read_body(request)
            result = dispatch(raw)
        except BodyReadError as e:
            logger.error(f"error reading request body: {e}")
            return Response(status_code=status.HTTP_400_BAD_REQUEST)
        except MalformedPayload as e:
            logger.error(f"error decoding json payload: {e}")
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid JSON payload"
            )
        except SchemaMismatch as e:
            logger.error(f"{e}: {e.errors}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

        # Unrecognized kinds get a bare 500 with no body and no content type
        if result.payload is None:
            return Response(status_code=result.status_code)

        try:
            return encode_response(result.payload, result.status_code)
        except ResponseEncodeError as e:
            logger.error(f"error encoding data to send as response: {e}")
            return Response(status_code=result.status_code)

    return router
