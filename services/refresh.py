"""
services/refresh.py

쓰기 성공 → 구독자에게 갱신 알림.
- 쓰기(학생 등록, 점수 저장)가 커밋되면 notify()가 revision을 올리고 모든 구독자를 호출한다.
- 구독자는 결과표/통계를 처음부터 다시 읽어 기존 값을 통째로 교체해야 한다.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RefreshEvent:
    kind: str                                  # 예: "student_added", "mark_saved"
    revision: int
    payload: Dict = field(default_factory=dict)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


Listener = Callable[[RefreshEvent], None]


class RefreshNotifier:
    def __init__(self):
        self._listeners: List[Listener] = []
        self._revision = 0
        self._lock = threading.Lock()

    @property
    def revision(self) -> int:
        return self._revision

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """구독 등록. 반환된 함수를 호출하면 구독 해제"""
        with self._lock:
            self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def notify(self, kind: str, payload: Optional[Dict] = None) -> RefreshEvent:
        with self._lock:
            self._revision += 1
            event = RefreshEvent(kind=kind, revision=self._revision, payload=payload or {})
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(event)
            except Exception:
                # 구독자 오류는 기록만 하고 다음 구독자로 진행
                logger.exception(f"갱신 구독자 처리 실패: kind={kind}, revision={event.revision}")
        return event


# ✅ 앱 전역 알림 객체
notifier = RefreshNotifier()
