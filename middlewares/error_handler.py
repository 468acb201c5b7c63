import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from schemas.common import ErrorDetail, ErrorResponse
from services.record_store import RecordStoreError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, code: str, message: str, detail=None):
    body = ErrorResponse(error=ErrorDetail(code=code, message=message, detail=detail))
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))


def add_error_handlers(app: FastAPI):
    # ✅ 저장소 에러 (중복 학번, 점수 범위 등) → 재시도 가능한 알림
    @app.exception_handler(RecordStoreError)
    async def record_store_exception_handler(request: Request, exc: RecordStoreError):
        logger.info(f"요청 거부: {request.method} {request.url.path} → {exc.code} ({exc.message})")
        return _error_response(exc.status_code, exc.code, exc.message)

    # ✅ 요청 본문 검증 실패
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = [
            {"loc": [str(part) for part in e.get("loc", [])], "msg": e.get("msg", "")}
            for e in exc.errors()
        ]
        return _error_response(422, "VALIDATION", "입력값을 확인해 주세요", errors)

    # ✅ DB 연결/쿼리 실패
    @app.exception_handler(SQLAlchemyError)
    async def database_exception_handler(request: Request, exc: SQLAlchemyError):
        logger.exception(f"DB 오류: {request.method} {request.url.path}")
        return _error_response(500, "UNKNOWN", "저장소 처리 중 오류가 발생했습니다")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"처리되지 않은 오류: {request.method} {request.url.path}")
        return _error_response(500, "INTERNAL_ERROR", str(exc))
