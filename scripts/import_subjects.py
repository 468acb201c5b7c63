import csv
import logging
from sqlalchemy.orm import Session
from database.db import Base, SessionLocal, engine
from services.record_store import RecordStore, RecordStoreError

logger = logging.getLogger(__name__)

CSV_PATH = "data/subjects.csv"  # ✅ 파일 경로 (컬럼: name, max_marks, passing_marks)

def import_subjects(db: Session, csv_path: str = CSV_PATH) -> int:
    store = RecordStore(db)
    added = 0

    with open(csv_path, newline="", encoding="utf-8-sig") as csvfile:
        reader = csv.DictReader(csvfile)
        for line_no, row in enumerate(reader, start=2):
            try:
                store.insert_subject(
                    row.get("name") or "",                      # 과목 이름
                    int(row.get("max_marks") or 100),           # 만점 (비어 있으면 100)
                    int(row.get("passing_marks") or 35),        # 통과 기준 (비어 있으면 35)
                )
                added += 1
            except ValueError:
                logger.warning(f"{csv_path}:{line_no} 건너뜀 - 점수 형식 오류")
            except RecordStoreError as e:
                logger.warning(f"{csv_path}:{line_no} 건너뜀 - {e.message}")

    return added

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)
    db: Session = SessionLocal()
    try:
        count = import_subjects(db)
    finally:
        db.close()
    print(f"✅ 과목 CSV → DB 등록 완료 ({count}건)")
