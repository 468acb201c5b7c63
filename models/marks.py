from sqlalchemy import Column, Integer, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from database.db import Base

class Mark(Base):
    __tablename__ = "marks"  # 학생별/과목별 점수 테이블

    id = Column(Integer, primary_key=True, index=True)                               # 점수 고유 ID
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)  # 학생 ID
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False)          # 과목 ID
    marks_obtained = Column(Integer, nullable=False)                                 # 취득 점수

    # (학생, 과목) 당 점수는 하나만 존재 → 재입력 시 덮어쓰기
    __table_args__ = (
        UniqueConstraint("student_id", "subject_id", name="uq_marks_student_subject"),
    )

    student = relationship("Student", back_populates="marks")
    subject = relationship("Subject")

    def __repr__(self):
        return f"<Mark student={self.student_id} subject={self.subject_id}>"
