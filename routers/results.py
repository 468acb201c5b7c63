from typing import Optional

from fastapi import APIRouter, Depends

from dependencies.store import get_record_store
from schemas.results import Dashboard
from services.record_store import RecordStore
from services.refresh import notifier
from services.results import compute_results, compute_stats, filter_results

router = APIRouter(prefix="/results", tags=["성적 결과"])

# 결과는 요청마다 저장소에서 다시 읽어 처음부터 계산 (캐시 없음)


# ✅ [RANKING] 학생별 총점/백분율/합격 여부/석차
@router.get("/")
def read_results(search: Optional[str] = None, store: RecordStore = Depends(get_record_store)):
    results = compute_results(store.list_students(), store.list_marks(), store.list_subjects())
    return {
        "success": True,
        "data": [r.model_dump() for r in filter_results(results, search)],
        "message": "성적 결과 조회 완료"
    }


# ✅ [SUMMARY] 통계 카드 (학생 수, 과목 수, 합격률, 평균 백분율)
@router.get("/stats")
def read_stats(store: RecordStore = Depends(get_record_store)):
    stats = compute_stats(store.list_students(), store.list_marks(), store.list_subjects())
    return {
        "success": True,
        "data": stats.model_dump(),
        "message": "통계 조회 완료"
    }


# ✅ [DASHBOARD] 통계 + 석차표 + 갱신 번호를 한 번에
@router.get("/dashboard")
def read_dashboard(search: Optional[str] = None, store: RecordStore = Depends(get_record_store)):
    revision = notifier.revision
    students = store.list_students()
    marks = store.list_marks()
    subjects = store.list_subjects()

    dashboard = Dashboard(
        revision=revision,
        stats=compute_stats(students, marks, subjects),
        results=filter_results(compute_results(students, marks, subjects), search),
    )
    return {
        "success": True,
        "data": dashboard.model_dump(),
        "message": "대시보드 조회 완료"
    }
