"""
결과 스키마
심사 결정과 검증 서비스 메타데이터를 정의합니다.
"""

from enum import Enum
from pydantic import BaseModel, Field, ConfigDict, StrictBool


class Decision(str, Enum):
    """심사 결정"""
    AUTO_ACCEPTED = "자동승인"
    AUTO_DECLINED = "자동거절"
    REFERRED_TO_HUMAN = "심사역검토"
    REFERRED_TO_HUMAN_FRAUD_RISK = "사기위험검토"


class ValidationMode(str, Enum):
    """회원번호 조회 방식 (검증 서비스 API 값)"""
    QUICK = "quick"
    DETAILED = "detailed"


class LicenseData(BaseModel):
    """검증 서비스 라이선스 정보"""
    key: str = Field(description="라이선스 키", examples=["OK", "EXPIRED"])


class ServiceInformation(BaseModel):
    """
    검증 서비스 메타데이터
    GET /service-info 응답 형식과 같습니다.
    """
    license: LicenseData


class ValidationResult(BaseModel):
    """
    회원번호 조회 결과
    GET /validate 응답 형식과 같습니다. valid는 JSON boolean만 허용합니다.
    """
    valid: StrictBool


class ReviewReport(BaseModel):
    """
    일괄 심사 결과
    입력 순서대로의 결정과 결정별 건수를 포함합니다.
    """
    model_config = ConfigDict(use_enum_values=True)

    total_count: int = Field(default=0, description="심사한 신청서 수")
    decisions: list[Decision] = Field(
        default_factory=list,
        description="신청서별 결정 (입력 순서)"
    )
    decision_counts: dict[str, int] = Field(
        default_factory=dict,
        description="결정별 건수",
        examples=[{"자동승인": 3, "심사역검토": 1}]
    )
    lookup_count: int = Field(
        default=0,
        description="심사 종료 시점의 회원번호 조회 누적 횟수"
    )
