"""
프로젝트 공통 엔드포인트 (헬스체크, 루트 안내, JSON 404/500)
"""

import logging

from common.application.result import ErrorCode
from django.db import connection
from django.http import JsonResponse
from django.utils import timezone
from django.views.decorators.http import require_http_methods

logger = logging.getLogger(__name__)


@require_http_methods(["GET"])
def health_check(request):
    """헬스체크 엔드포인트"""
    try:
        connection.ensure_connection()
        database = "Connected"
    except Exception as e:
        logger.error(f"Database health check failed: {str(e)}")
        database = "Disconnected"

    return JsonResponse(
        {
            "status": "OK",
            "message": "Job board API is running",
            "timestamp": timezone.now().isoformat(),
            "database": database,
        }
    )


@require_http_methods(["GET"])
def api_root(request):
    return JsonResponse(
        {
            "message": "Job board API",
            "version": "1.0.0",
            "endpoints": {
                "auth": "/api/auth",
                "jobs": "/api/jobs",
                "health": "/health",
                "schema": "/api/schema/",
            },
        }
    )


def endpoint_not_found(request, exception=None):
    return JsonResponse(
        {
            "success": False,
            "error": "Endpoint not found",
            "error_code": ErrorCode.NOT_FOUND,
            "path": request.path,
        },
        status=404,
    )


def server_error(request):
    return JsonResponse(
        {
            "success": False,
            "error": "Internal server error",
            "error_code": ErrorCode.SERVER_ERROR,
        },
        status=500,
    )
