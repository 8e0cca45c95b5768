from __future__ import annotations

from typing import Annotated, cast

from fastapi import Depends, FastAPI, HTTPException, Query, status
from starlette.middleware import Middleware
from starlette.middleware.cors import CORSMiddleware

from chss.build_position_payload__api import build_position_payload
from chss.codec import PositionCodec, get_codec
from chss.config import Settings, get_settings
from chss.models.move_request import MoveRequest
from chss.utils.logger import get_logger

logger = get_logger(__name__)

_SERVICE_NAME = "chss"
_SERVICE_VERSION = "0.1.0"


def get_api_settings() -> Settings:
    return get_settings()


CodecDependency = Annotated[PositionCodec, Depends(get_codec)]
SettingsDependency = Annotated[Settings, Depends(get_api_settings)]

app = FastAPI(
    title="CHSS",
    version=_SERVICE_VERSION,
    middleware=[
        Middleware(
            cast("type[object]", CORSMiddleware),
            allow_origins=["*"],
            allow_methods=["*"],
            allow_headers=["*"],
        )
    ],
)


@app.get("/api/health")
def health() -> dict[str, str]:
    return {"status": "ok", "service": _SERVICE_NAME, "version": _SERVICE_VERSION}


@app.get("/api/positions")
@app.get("/api/positions/{code:path}")
def resolve_position(
    codec: CodecDependency,
    settings: SettingsDependency,
    code: str = "",
    p: str | None = Query(None),
) -> dict[str, object]:
    resolved = codec.canonicalize(code)
    payload = build_position_payload(
        codec,
        settings,
        resolved.position,
        resolved.code,
        token=code,
        requested_perspective=p,
    )
    payload["needs_redirect"] = resolved.needs_redirect
    return payload


@app.get("/api/legal")
def legal_destinations(
    codec: CodecDependency,
    code: str = Query(""),
    square: str | None = Query(None),
) -> dict[str, object]:
    position = codec.parse(code)
    return {
        "square": square,
        "destinations": sorted(codec.legal_destinations(position, square)),
    }


@app.post("/api/moves")
def play_move(
    request: MoveRequest,
    codec: CodecDependency,
    settings: SettingsDependency,
) -> dict[str, object]:
    position = codec.parse(request.code)
    result = codec.apply_move(position, request.from_square, request.to_square, request.promotion)
    if not result.success or result.position is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.error)
    code = codec.generate(result.position)
    logger.debug("Played %s: %r -> %r", result.move_token, request.code, code)
    payload = build_position_payload(codec, settings, result.position, code)
    payload["move"] = result.move_token
    return payload
