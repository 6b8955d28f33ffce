from fastapi import Request
from fastapi.responses import JSONResponse
from core.utils.api import ApiError
import logging

logger = logging.getLogger(__name__)

def ok ( data=None, code=200 ):
    return JSONResponse(status_code=code, content=data or {})

def error ( message="Error", code=400 ):
    return JSONResponse(status_code=code, content={
        "error": message
    })

async def api_error_handler ( request: Request, exc: ApiError ):

    if exc.status >= 500: logger.error("%s %s -> %s %s", request.method, request.url.path, exc.status, exc.message)
    return error(exc.message, exc.status)
