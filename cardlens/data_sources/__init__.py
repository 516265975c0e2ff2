"""
데이터 소스 모듈
"""

from .validator_api import FrequentFlyerApiValidator, ValidatorUnavailableError

__all__ = [
    "FrequentFlyerApiValidator",
    "ValidatorUnavailableError",
]
