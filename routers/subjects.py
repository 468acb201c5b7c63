from fastapi import APIRouter, Depends

from dependencies.store import get_record_store
from schemas.common import ERROR_RESPONSES
from schemas.subjects import Subject as SubjectSchema, SubjectCreate
from services.record_store import RecordStore

router = APIRouter(prefix="/subjects", tags=["과목 정보"], responses=ERROR_RESPONSES)


# ✅ [CREATE] 과목 등록
@router.post("/", status_code=201)
def create_subject(subject: SubjectCreate, store: RecordStore = Depends(get_record_store)):
    db_subject = store.insert_subject(subject.name, subject.max_marks, subject.passing_marks)
    return {
        "success": True,
        "data": SubjectSchema.model_validate(db_subject).model_dump(),
        "message": "과목이 성공적으로 등록되었습니다"
    }


# ✅ [READ] 전체 과목 조회 (이름순)
@router.get("/")
def read_subjects(store: RecordStore = Depends(get_record_store)):
    return {
        "success": True,
        "data": [SubjectSchema.model_validate(s).model_dump() for s in store.list_subjects()],
        "message": "전체 과목 조회 완료"
    }
