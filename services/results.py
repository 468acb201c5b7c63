"""
services/results.py

학생 목록과 점수 목록으로부터 석차표와 통계를 계산하는 순수 함수 모음.
- DB/네트워크에 접근하지 않음. 같은 입력이면 항상 같은 결과.
- 결과표(compute_results)와 통계(compute_stats)는 evaluate_student 하나를 공유한다.

입력은 ORM 객체든 스키마든 속성만 맞으면 된다.
- student: id, name, roll_number
- mark: student_id, subject_id, marks_obtained, subject(없거나 None 가능)
- subject: id, max_marks, passing_marks
"""

import logging
from collections import defaultdict
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List, Optional, Sequence

from schemas.results import ResultStats, StudentResult

logger = logging.getLogger(__name__)

# 과목 정보를 찾지 못한 점수에 적용하는 기본값
DEFAULT_MAX_MARKS = 100
DEFAULT_PASSING_MARKS = 35


@dataclass(frozen=True)
class Evaluation:
    """학생 한 명의 집계 결과 (반올림 전 백분율 포함)"""
    total_marks: int
    max_possible_marks: int
    subject_count: int
    passed: bool
    ratio: Decimal              # 백분율 원값 (반올림 전)

    @property
    def has_marks(self) -> bool:
        return self.subject_count > 0

    @property
    def status(self) -> str:
        return "Pass" if self.passed else "Fail"


def round_half_up(value: Decimal, places: int = 0) -> Decimal:
    """사사오입 (x.xx5 → 올림). float 반올림의 플랫폼 의존성을 피하기 위해 Decimal 사용"""
    exp = Decimal(1).scaleb(-places)
    return value.quantize(exp, rounding=ROUND_HALF_UP)


def _resolve_subject(mark, subjects_by_id: Dict[int, object]):
    subject = getattr(mark, "subject", None)
    if subject is None:
        subject = subjects_by_id.get(getattr(mark, "subject_id", None))
    if subject is None:
        logger.warning(
            "과목 정보 없음 → 기본값 적용(max=%s, pass=%s): student_id=%s subject_id=%s",
            DEFAULT_MAX_MARKS, DEFAULT_PASSING_MARKS,
            getattr(mark, "student_id", None), getattr(mark, "subject_id", None),
        )
        return DEFAULT_MAX_MARKS, DEFAULT_PASSING_MARKS
    return subject.max_marks, subject.passing_marks


def evaluate_student(marks: Sequence, subjects_by_id: Optional[Dict[int, object]] = None) -> Evaluation:
    """학생 한 명의 점수들로 총점/만점 합계/합격 여부/백분율 원값을 계산"""
    subjects_by_id = subjects_by_id or {}
    total = 0
    possible = 0
    passed_all = True

    for mark in marks:
        max_marks, passing_marks = _resolve_subject(mark, subjects_by_id)
        total += mark.marks_obtained
        possible += max_marks
        if mark.marks_obtained < passing_marks:
            passed_all = False

    ratio = Decimal(total) * 100 / Decimal(possible) if possible > 0 else Decimal(0)

    # 점수가 하나도 없으면 합격 아님 (빈 조건의 참을 인정하지 않음)
    return Evaluation(
        total_marks=total,
        max_possible_marks=possible,
        subject_count=len(marks),
        passed=len(marks) > 0 and passed_all,
        ratio=ratio,
    )


def _group_by_student(marks: Iterable) -> Dict[int, list]:
    grouped = defaultdict(list)
    for mark in marks:
        grouped[mark.student_id].append(mark)
    return grouped


def _evaluate_all(students, marks, subjects):
    subjects_by_id = {s.id: s for s in (subjects or [])}
    grouped = _group_by_student(marks)
    return [(student, evaluate_student(grouped.get(student.id, []), subjects_by_id)) for student in students]


def compute_results(students: Iterable, marks: Iterable, subjects: Optional[Iterable] = None) -> List[StudentResult]:
    """
    학생별 결과 + 석차 계산
    - 정렬: 점수 있는 학생 먼저, 백분율 원값 내림차순, 동점은 학번 → ID 순
    - 석차: 점수 있는 학생만 1부터 빈틈없이 부여, 점수 없는 학생은 0
    - 점수 없는 학생도 결과에 포함 (표시 방법은 화면에서 결정)
    """
    evaluated = _evaluate_all(students, marks, subjects)
    evaluated.sort(key=lambda pair: (not pair[1].has_marks, -pair[1].ratio, str(pair[0].roll_number), pair[0].id))

    results: List[StudentResult] = []
    rank = 0
    for student, ev in evaluated:
        if ev.has_marks:
            rank += 1
        results.append(StudentResult(
            id=student.id,
            name=student.name,
            roll_number=student.roll_number,
            total_marks=ev.total_marks,
            max_possible_marks=ev.max_possible_marks,
            percentage=float(round_half_up(ev.ratio, 2)),
            status=ev.status,
            rank=rank if ev.has_marks else 0,
            subject_count=ev.subject_count,
        ))
    return results


def compute_stats(students: Iterable, marks: Iterable, subjects: Iterable) -> ResultStats:
    """전체 통계: 합격률/평균 백분율은 점수가 있는 학생만 대상으로 계산"""
    students = list(students)
    subjects = list(subjects)
    evaluations = [ev for _, ev in _evaluate_all(students, marks, subjects) if ev.has_marks]

    pass_rate = 0
    avg_percentage = 0
    if evaluations:
        count = Decimal(len(evaluations))
        pass_count = sum(1 for ev in evaluations if ev.passed)
        pass_rate = int(round_half_up(Decimal(pass_count) * 100 / count))
        avg_percentage = int(round_half_up(sum((ev.ratio for ev in evaluations), Decimal(0)) / count))

    return ResultStats(
        total_students=len(students),
        total_subjects=len(subjects),
        pass_rate=pass_rate,
        avg_percentage=avg_percentage,
    )


def filter_results(results: Iterable[StudentResult], term: Optional[str]) -> List[StudentResult]:
    """이름 또는 학번 부분 일치 검색 (대소문자 무시)"""
    results = list(results)
    if not term or not term.strip():
        return results
    needle = term.strip().lower()
    return [r for r in results if needle in r.name.lower() or needle in r.roll_number.lower()]
