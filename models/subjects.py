from sqlalchemy import Column, Integer, String, CheckConstraint
from database.db import Base

class Subject(Base):
    __tablename__ = "subjects"  # 과목 정보 테이블

    id = Column(Integer, primary_key=True, index=True)         # 과목 고유 ID (Primary Key)
    name = Column(String(100), nullable=False, unique=True)   # 과목 이름 (예: 수학, 과학)
    max_marks = Column(Integer, nullable=False, default=100)  # 만점
    passing_marks = Column(Integer, nullable=False, default=35)  # 통과 기준 점수

    __table_args__ = (
        CheckConstraint("max_marks > 0", name="ck_subject_max_positive"),
        CheckConstraint("passing_marks >= 0 AND passing_marks <= max_marks", name="ck_subject_passing_range"),
    )

    def __repr__(self):
        return f"<Subject {self.name}>"
