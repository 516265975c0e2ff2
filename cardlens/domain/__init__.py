"""
CardLens 도메인 로직 패키지
규칙 기반 심사 결정과 외부 협력자 계약을 담당합니다.
"""

from .contracts import FrequentFlyerNumberValidator, FraudLookup
from .evaluator import CreditCardApplicationEvaluator

__all__ = [
    "FrequentFlyerNumberValidator",
    "FraudLookup",
    "CreditCardApplicationEvaluator",
]
