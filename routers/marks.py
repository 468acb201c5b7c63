from typing import Optional

from fastapi import APIRouter, Depends

from dependencies.store import get_record_store
from schemas.common import ERROR_RESPONSES
from schemas.marks import Mark as MarkSchema, MarkUpsert
from services.record_store import RecordStore

router = APIRouter(prefix="/marks", tags=["점수"], responses=ERROR_RESPONSES)


# ✅ [UPSERT] 점수 저장 - 같은 학생/과목이면 기존 점수를 덮어씀
@router.put("/")
def save_mark(mark: MarkUpsert, store: RecordStore = Depends(get_record_store)):
    db_mark = store.upsert_mark(mark.student_id, mark.subject_id, mark.marks_obtained)
    return {
        "success": True,
        "data": MarkSchema.model_validate(db_mark).model_dump(),
        "message": "점수가 저장되었습니다"
    }


# ✅ [READ] 점수 목록 (student_id 지정 시 해당 학생만)
@router.get("/")
def read_marks(student_id: Optional[int] = None, store: RecordStore = Depends(get_record_store)):
    return {
        "success": True,
        "data": [MarkSchema.model_validate(m).model_dump() for m in store.list_marks(student_id)],
        "message": "점수 목록 조회 완료"
    }
