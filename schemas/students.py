from pydantic import BaseModel, ConfigDict, field_validator

# ✅ 입력용 (POST)
class StudentCreate(BaseModel):
    name: str                                # 학생 이름
    roll_number: str                         # 학번

    @field_validator("name", "roll_number")
    @classmethod
    def _strip_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("빈 값은 입력할 수 없습니다")
        return v

# ✅ 전체 출력용 (GET, 상세조회 등)
class Student(BaseModel):
    id: int
    name: str
    roll_number: str

    model_config = ConfigDict(from_attributes=True)
