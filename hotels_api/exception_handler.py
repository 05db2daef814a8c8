import logging

from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    Falls back to a generic 500 for anything DRF does not handle itself,
    so storage and payment errors never leak internal detail.
    """
    response = exception_handler(exc, context)
    if response is not None:
        return response

    view = context.get("view")
    logger.exception(
        "Unhandled error in %s", view.__class__.__name__ if view else "view",
        exc_info=exc,
    )
    return Response(
        {"detail": "Something went wrong"},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
