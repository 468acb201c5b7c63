import csv
import logging
from sqlalchemy.orm import Session
from database.db import Base, SessionLocal, engine
from services.record_store import RecordStore, RecordStoreError

logger = logging.getLogger(__name__)

CSV_PATH = "data/marks.csv"  # ✅ 파일 경로 (컬럼: roll_number, subject, marks_obtained)

def import_marks(db: Session, csv_path: str = CSV_PATH) -> int:
    """
    학번/과목 이름으로 학생과 과목을 찾아 점수 저장 (upsert).
    같은 학생/과목이 여러 번 나오면 마지막 행의 점수가 남는다.
    """
    store = RecordStore(db)
    students = {s.roll_number: s.id for s in store.list_students()}
    subjects = {s.name: s.id for s in store.list_subjects()}
    saved = 0

    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for line_no, row in enumerate(reader, start=2):
            student_id = students.get((row.get("roll_number") or "").strip())
            subject_id = subjects.get((row.get("subject") or "").strip())
            if student_id is None or subject_id is None:
                logger.warning(f"{csv_path}:{line_no} 건너뜀 - 학생/과목을 찾을 수 없음")
                continue
            try:
                store.upsert_mark(student_id, subject_id, int((row.get("marks_obtained") or "").strip()))
                saved += 1
            except ValueError:
                logger.warning(f"{csv_path}:{line_no} 건너뜀 - 점수 형식 오류")
            except RecordStoreError as e:
                logger.warning(f"{csv_path}:{line_no} 건너뜀 - {e.message}")

    return saved

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()
    try:
        count = import_marks(db)
    finally:
        db.close()
    print(f"✅ 점수 CSV → DB 저장 완료 ({count}건)")
