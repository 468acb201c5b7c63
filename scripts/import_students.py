import csv
import logging
from sqlalchemy.orm import Session
from database.db import Base, SessionLocal, engine
from services.record_store import RecordStore, RecordStoreError

logger = logging.getLogger(__name__)

CSV_PATH = "data/students.csv"  # ✅ 파일 경로 (컬럼: name, roll_number)

def import_students(db: Session, csv_path: str = CSV_PATH) -> int:
    """CSV의 학생을 저장소를 통해 등록. 중복 학번 등 실패한 행은 건너뛰고 등록 건수 반환"""
    store = RecordStore(db)
    added = 0

    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for line_no, row in enumerate(reader, start=2):
            try:
                store.insert_student(row.get("name") or "", row.get("roll_number") or "")   # 학생 이름, 학번 (빈 칸은 검증 오류)
                added += 1
            except RecordStoreError as e:
                logger.warning(f"{csv_path}:{line_no} 건너뜀 - {e.message}")

    return added

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()
    try:
        count = import_students(db)
    finally:
        db.close()
    print(f"✅ 학생 CSV → DB 등록 완료 ({count}건)")
