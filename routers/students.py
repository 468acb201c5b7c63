from fastapi import APIRouter, Depends

from dependencies.store import get_record_store
from schemas.common import ERROR_RESPONSES
from schemas.students import Student as StudentSchema, StudentCreate
from services.record_store import RecordStore

router = APIRouter(prefix="/students", tags=["학생 정보"], responses=ERROR_RESPONSES)


def _to_dict(student):
    return StudentSchema.model_validate(student).model_dump()


# ✅ [CREATE] 학생 등록 (학번 중복 시 409)
@router.post("/", status_code=201)
def create_student(student: StudentCreate, store: RecordStore = Depends(get_record_store)):
    db_student = store.insert_student(student.name, student.roll_number)
    return {
        "success": True,
        "data": _to_dict(db_student),
        "message": "학생이 성공적으로 등록되었습니다"
    }


# ✅ [READ] 전체 학생 조회 (이름순)
@router.get("/")
def read_students(store: RecordStore = Depends(get_record_store)):
    return {
        "success": True,
        "data": [_to_dict(s) for s in store.list_students()],
        "message": "전체 학생 정보 조회 완료"
    }


# ✅ [READ] 특정 학생 상세 조회
@router.get("/{student_id}")
def read_student(student_id: int, store: RecordStore = Depends(get_record_store)):
    return {
        "success": True,
        "data": _to_dict(store.get_student(student_id)),
        "message": "학생 상세 정보 조회 성공"
    }
