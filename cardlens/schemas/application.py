"""
신청서 스키마
심사 대상 신용카드 신청서를 구조화합니다.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class CreditCardApplication(BaseModel):
    """
    신용카드 신청서

    모든 필드에 기본값이 있으므로 빈 신청서도 생성할 수 있습니다.
    심사 중에는 변경되지 않도록 frozen 모델로 둡니다.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "gross_annual_income": 45000,
                "age": 42,
                "frequent_flyer_number": "y",
            }
        }
    )

    gross_annual_income: float = Field(
        default=0,
        ge=0,
        description="연간 총소득",
        examples=[45000]
    )
    age: int = Field(
        default=0,
        ge=0,
        description="신청자 나이",
        examples=[42]
    )
    frequent_flyer_number: Optional[str] = Field(
        default=None,
        description="마일리지 회원번호 (없으면 None)",
        examples=["y"]
    )
