from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

import structlog
from ...errors import PipelineError
from ...schemas.readings import ErrorResponse, ReadingsResponse

router = APIRouter()
logger = structlog.get_logger()


@router.get(
    "/",
    response_model=ReadingsResponse,
    response_model_exclude_none=True,
    summary="Real-time rain gauge readings",
    responses={
        500: {"model": ErrorResponse, "description": "The rainfall page could not be loaded or read"},
    },
)
def readings(request: Request):
    pipeline = request.app.state.pipeline
    try:
        data = pipeline.readings()
    except PipelineError as e:
        logger.warning("readings_failed", error=e.message)
        return JSONResponse(status_code=500, content=ErrorResponse(error=e.message).model_dump())
    except Exception as e:
        logger.exception("readings_failed", error=str(e))
        return JSONResponse(status_code=500, content=ErrorResponse(error="Unknown error").model_dump())

    return ReadingsResponse(data=list(data))
