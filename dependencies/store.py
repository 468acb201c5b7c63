from fastapi import Depends
from sqlalchemy.orm import Session

from database.db import get_db
from services.record_store import RecordStore
from services.refresh import notifier


# ✅ 요청마다 DB 세션에 묶인 저장소 생성 (쓰기 알림은 앱 전역 notifier로)
def get_record_store(db: Session = Depends(get_db)) -> RecordStore:
    return RecordStore(db, notifier=notifier)
