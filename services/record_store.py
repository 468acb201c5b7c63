"""
services/record_store.py

학생/과목/점수 저장소. SQLAlchemy 세션 위에서 동작하며 라우터와 CSV 스크립트가 함께 사용한다.
- 조회: list_students / list_subjects / list_marks (점수는 과목 정보까지 함께 로드)
- 쓰기: insert_student / insert_subject / upsert_mark
- 쓰기가 커밋되면 notifier로 갱신 알림을 보낸다.
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from models.marks import Mark as MarkModel
from models.students import Student as StudentModel
from models.subjects import Subject as SubjectModel
from services.refresh import RefreshNotifier

logger = logging.getLogger(__name__)


# ==========================================================
# [에러] 저장소 에러 분류
# ==========================================================
class RecordStoreError(Exception):
    """알 수 없는 저장소 오류 (DB 연결 실패 등)"""
    code = "UNKNOWN"
    status_code = 500

    def __init__(self, message: str = "저장소 처리 중 오류가 발생했습니다"):
        super().__init__(message)
        self.message = message


class DuplicateRollNumberError(RecordStoreError):
    code = "DUPLICATE_ROLL_NUMBER"
    status_code = 409


class DuplicateSubjectError(RecordStoreError):
    code = "DUPLICATE_SUBJECT"
    status_code = 409


class DuplicateMarkError(RecordStoreError):
    code = "DUPLICATE"
    status_code = 409


class RecordValidationError(RecordStoreError):
    code = "VALIDATION"
    status_code = 422


class RecordNotFoundError(RecordStoreError):
    code = "NOT_FOUND"
    status_code = 404


# ==========================================================
# [저장소] Record Store
# ==========================================================
class RecordStore:
    def __init__(self, db: Session, notifier: Optional[RefreshNotifier] = None):
        self.db = db
        self.notifier = notifier

    # ✅ [READ] 학생 목록 (이름순)
    def list_students(self) -> List[StudentModel]:
        return self.db.query(StudentModel).order_by(StudentModel.name, StudentModel.id).all()

    # ✅ [READ] 과목 목록 (이름순)
    def list_subjects(self) -> List[SubjectModel]:
        return self.db.query(SubjectModel).order_by(SubjectModel.name, SubjectModel.id).all()

    # ✅ [READ] 점수 목록 (과목 만점/통과 점수 조인)
    def list_marks(self, student_id: Optional[int] = None) -> List[MarkModel]:
        query = self.db.query(MarkModel).options(joinedload(MarkModel.subject))
        if student_id is not None:
            query = query.filter(MarkModel.student_id == student_id)
        return query.order_by(MarkModel.id).all()

    def get_student(self, student_id: int) -> StudentModel:
        student = self.db.get(StudentModel, student_id)
        if student is None:
            raise RecordNotFoundError("학생 정보를 찾을 수 없습니다")
        return student

    def get_subject(self, subject_id: int) -> SubjectModel:
        subject = self.db.get(SubjectModel, subject_id)
        if subject is None:
            raise RecordNotFoundError("과목 정보를 찾을 수 없습니다")
        return subject

    # ✅ [CREATE] 학생 등록
    def insert_student(self, name: str, roll_number: str) -> StudentModel:
        name, roll_number = (name or "").strip(), (roll_number or "").strip()
        if not name or not roll_number:
            raise RecordValidationError("이름과 학번을 모두 입력해 주세요")

        exists = self.db.query(StudentModel.id).filter(StudentModel.roll_number == roll_number).first()
        if exists:
            raise DuplicateRollNumberError("이미 등록된 학번입니다")

        student = StudentModel(name=name, roll_number=roll_number)
        self._commit(student, DuplicateRollNumberError("이미 등록된 학번입니다"))
        logger.info(f"학생 등록: id={student.id}, roll_number={roll_number}")
        self._notify("student_added", {"student_id": student.id})
        return student

    # ✅ [CREATE] 과목 등록
    def insert_subject(self, name: str, max_marks: int = 100, passing_marks: int = 35) -> SubjectModel:
        name = (name or "").strip()
        if not name:
            raise RecordValidationError("과목 이름을 입력해 주세요")
        if max_marks <= 0 or not 0 <= passing_marks <= max_marks:
            raise RecordValidationError(f"통과 기준 점수는 0~{max_marks} 사이여야 합니다")

        exists = self.db.query(SubjectModel.id).filter(SubjectModel.name == name).first()
        if exists:
            raise DuplicateSubjectError("이미 등록된 과목입니다")

        subject = SubjectModel(name=name, max_marks=max_marks, passing_marks=passing_marks)
        self._commit(subject, DuplicateSubjectError("이미 등록된 과목입니다"))
        logger.info(f"과목 등록: id={subject.id}, name={name}")
        self._notify("subject_added", {"subject_id": subject.id})
        return subject

    # ✅ [UPSERT] 점수 저장 (학생+과목 기준으로 덮어쓰기)
    def upsert_mark(self, student_id: int, subject_id: int, marks_obtained: int) -> MarkModel:
        self.get_student(student_id)
        subject = self.get_subject(subject_id)
        if not 0 <= marks_obtained <= subject.max_marks:
            raise RecordValidationError(f"점수는 0~{subject.max_marks} 사이여야 합니다")

        mark = (
            self.db.query(MarkModel)
            .filter(MarkModel.student_id == student_id, MarkModel.subject_id == subject_id)
            .first()
        )
        if mark is None:
            mark = MarkModel(student_id=student_id, subject_id=subject_id, marks_obtained=marks_obtained)
        else:
            mark.marks_obtained = marks_obtained

        self._commit(mark, DuplicateMarkError("같은 학생/과목 점수가 동시에 저장되었습니다. 다시 시도해 주세요"))
        logger.info(f"점수 저장: student_id={student_id}, subject_id={subject_id}, marks={marks_obtained}")
        self._notify("mark_saved", {"student_id": student_id, "subject_id": subject_id})
        return mark

    # ==========================================================
    # [내부] 커밋/알림
    # ==========================================================
    def _commit(self, obj, duplicate_error: RecordStoreError):
        try:
            self.db.add(obj)
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"무결성 제약 위반: {e.orig}")
            raise duplicate_error from e
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception("저장소 쓰기 실패")
            raise RecordStoreError() from e
        self.db.refresh(obj)

    def _notify(self, kind: str, payload: dict):
        if self.notifier is not None:
            self.notifier.notify(kind, payload)
