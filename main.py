from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config.settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
# HTTP 라이브러리 디버그 로그 비활성화
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

# ✅ DB / 모델 (create_all 전에 테이블 메타데이터 등록)
from database.db import Base, engine
import models.marks, models.students, models.subjects  # noqa: F401

# ✅ 미들웨어 임포트
from middlewares.timing import TimingMiddleware
from middlewares.error_handler import add_error_handlers

# ✅ 라우터 임포트
from routers import students, subjects, marks, results

# ✅ 쓰기 → 갱신 알림
from services.refresh import notifier

app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
)

# ✅ CORS 설정 (프론트엔드 연동)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ✅ 요청 지연 측정 미들웨어 (응답 헤더 X-Latency-Ms 추가)
app.add_middleware(TimingMiddleware)

# ✅ 전역 에러 핸들러 등록 (일관된 JSON 에러 포맷)
add_error_handlers(app)

# ✅ /v1 프리픽스 라우터 등록
app.include_router(students.router,     prefix="/v1")
app.include_router(subjects.router,     prefix="/v1")
app.include_router(marks.router,        prefix="/v1")
app.include_router(results.router,      prefix="/v1")


def _log_refresh(event):
    logger.info(f"데이터 변경 → 갱신 필요: {event.kind} (revision={event.revision})")


notifier.subscribe(_log_refresh)


@app.on_event("startup")
def _create_tables():
    Base.metadata.create_all(bind=engine)
    logger.info(f"DB 테이블 준비 완료 ({settings.ENV})")


# ✅ 헬스체크 엔드포인트
@app.get("/health")
def health_check():
    return {"status": "ok", "message": "API is running", "revision": notifier.revision}


# ✅ 루트 엔드포인트
@app.get("/")
def root():
    return {"message": f"{settings.APP_TITLE} - 학생 성적 관리"}
