from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from database.db import Base

class Student(Base):
    __tablename__ = "students"  # 학생 기본 정보 테이블

    id = Column(Integer, primary_key=True, index=True)                    # 고유 학생 ID (Primary Key)
    name = Column(String(100), nullable=False)                           # 학생 이름
    roll_number = Column(String(50), nullable=False, unique=True)        # 학번 (화면 표시용, 중복 불가)

    marks = relationship("Mark", back_populates="student")

    def __repr__(self):
        return f"<Student {self.roll_number}>"
