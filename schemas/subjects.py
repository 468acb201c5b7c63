from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

# ✅ 입력용: POST 요청에서 사용할 스키마
class SubjectCreate(BaseModel):
    name: str                                        # 과목 이름
    max_marks: int = Field(100, gt=0)                # 만점
    passing_marks: int = Field(35, ge=0)             # 통과 기준 점수

    @field_validator("name")
    @classmethod
    def _strip_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("과목 이름을 입력해 주세요")
        return v

    @model_validator(mode="after")
    def _passing_within_max(self):
        if self.passing_marks > self.max_marks:
            raise ValueError("통과 기준 점수는 만점을 넘을 수 없습니다")
        return self

# ✅ 출력용: GET, POST 응답 등에서 사용할 스키마
class Subject(BaseModel):
    id: int                                  # 고유 과목 ID
    name: str                                # 과목 이름
    max_marks: int                           # 만점
    passing_marks: int                       # 통과 기준 점수

    model_config = ConfigDict(from_attributes=True)
