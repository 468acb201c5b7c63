from pydantic import BaseModel, ConfigDict, Field

# ✅ 입력용: 점수 입력/수정 (학생+과목 기준 upsert)
class MarkUpsert(BaseModel):
    student_id: int                          # 학생 ID
    subject_id: int                          # 과목 ID
    marks_obtained: int = Field(..., ge=0)   # 취득 점수 (상한은 과목 만점 기준으로 저장 시 검증)

# ✅ 출력용
class Mark(BaseModel):
    id: int                                  # 점수 고유 ID
    student_id: int                          # 학생 ID
    subject_id: int                          # 과목 ID
    marks_obtained: int                      # 취득 점수

    model_config = ConfigDict(from_attributes=True)
