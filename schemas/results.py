"""
schemas/results.py

- 점수 테이블로부터 매번 새로 계산되는 파생 결과 스키마 (DB에 저장하지 않음)
- StudentResult: 학생별 총점/만점 합계/백분율/합격 여부/석차
- ResultStats: 전체 통계 카드 (학생 수, 과목 수, 합격률, 평균 백분율)
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, computed_field

Status = Literal["Pass", "Fail"]


class StudentResult(BaseModel):
    id: int                                          # 학생 ID
    name: str                                        # 학생 이름
    roll_number: str                                 # 학번
    total_marks: int = 0                             # 취득 점수 합계
    max_possible_marks: int = 0                      # 점수가 입력된 과목들의 만점 합계
    percentage: float = 0.0                          # 백분율 (소수 둘째 자리, 사사오입)
    status: Status = "Fail"                          # 합격 여부
    rank: int = Field(0, ge=0)                       # 석차 (점수 없는 학생은 0)
    subject_count: int = 0                           # 점수가 입력된 과목 수

    @computed_field  # type: ignore[misc]
    @property
    def rank_label(self) -> Optional[str]:
        """석차 표시용 문자열 ("1st", "2nd", "11th" ...). 순위 없음은 None"""
        if self.rank == 0:
            return None
        if 10 <= self.rank % 100 <= 20:
            suffix = "th"
        else:
            suffix = {1: "st", 2: "nd", 3: "rd"}.get(self.rank % 10, "th")
        return f"{self.rank}{suffix}"


class ResultStats(BaseModel):
    total_students: int = 0                          # 등록 학생 수
    total_subjects: int = 0                          # 등록 과목 수
    pass_rate: int = 0                               # 점수가 있는 학생 중 합격 비율 (%)
    avg_percentage: int = 0                          # 점수가 있는 학생의 평균 백분율 (%)


class Dashboard(BaseModel):
    revision: int                                    # 마지막 쓰기 이후 증가하는 갱신 번호
    stats: ResultStats
    results: List[StudentResult]
