# coding: utf8
from werkzeug.exceptions import HTTPException

from storefront.errors.exceptions import ApiError
from storefront.lib.logger import log as logger
from storefront.lib.response import Response


def api_error_handler(error):
    if isinstance(error, ApiError):
        return Response(ok=False, error=error.message, status=error.status).to_dict()

    if isinstance(error, HTTPException):
        return Response(
            ok=False, error=error.description or error.name, status=error.code
        ).to_dict()

    logger.exception(f"Unhandled error: {error}")
    return Response(ok=False, error="Internal Server Error", status=500).to_dict()
