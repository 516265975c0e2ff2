"""
CardLens 스키마 패키지
심사 엔진의 입출력 스키마를 정의합니다.
"""

from .application import CreditCardApplication
from .results import (
    Decision,
    ValidationMode,
    LicenseData,
    ServiceInformation,
    ValidationResult,
    ReviewReport,
)

__all__ = [
    "CreditCardApplication",
    "Decision",
    "ValidationMode",
    "LicenseData",
    "ServiceInformation",
    "ValidationResult",
    "ReviewReport",
]
