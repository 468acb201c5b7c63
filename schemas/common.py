"""
schemas/common.py

- 프로젝트 전반에서 재사용할 공용 에러 응답 스키마 (Pydantic v2)
- middlewares/error_handler.py가 이 스키마로 응답을 만들고, 라우터는 responses= 문서화에 사용
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, ConfigDict


class ErrorDetail(BaseModel):
    """에러 코드/메시지를 담는 최소 단위"""
    code: str = Field(..., description="에러 식별 코드 (예: DUPLICATE_ROLL_NUMBER, VALIDATION)")
    message: str = Field(..., description="사용자에게 보여줄 메시지")
    detail: Optional[Any] = Field(default=None, description="필드별 검증 오류 등 부가 정보")


class ErrorResponse(BaseModel):
    """전역 에러 핸들러에서 내려주는 표준 에러 응답"""
    success: Literal[False] = False
    error: ErrorDetail
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="응답 생성 시각 (UTC)"
    )

    model_config = ConfigDict(extra="ignore")


# 라우터 responses= 에 넣어 Swagger 문서에 에러 형식 표시
ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "대상을 찾을 수 없음"},
    409: {"model": ErrorResponse, "description": "중복 (학번/과목/점수)"},
    422: {"model": ErrorResponse, "description": "입력값 검증 실패"},
}
