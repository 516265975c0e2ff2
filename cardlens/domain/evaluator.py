"""
심사 엔진
규칙 기반으로 신용카드 신청서를 자동승인/자동거절/심사역검토로 분류합니다.
"""

import threading
from typing import Optional
from loguru import logger

from cardlens.domain.contracts import FrequentFlyerNumberValidator, FraudLookup
from cardlens.schemas.application import CreditCardApplication
from cardlens.schemas.results import Decision, ValidationMode


class CreditCardApplicationEvaluator:
    """
    신용카드 신청서 심사 엔진

    규칙은 아래 순서로 평가되며, 먼저 결정된 단계에서 종료합니다.
    1. 사기 위험 (fraud_lookup이 있을 때만)
    2. 고소득 자동승인
    3. 저연령 심사역 검토
    4. 라이선스 만료 확인 (조회 방식 설정 후)
    5. 회원번호 조회
    6. 소득 기준 최종 결정 (저소득은 자동거절, 그 외 심사역 검토)

    검증기의 조회 알림 횟수를 lookup_count로 누적합니다.
    """

    AUTO_DECISION_MIN_AGE = 20
    HIGH_INCOME_THRESHOLD = 100_000
    LOW_INCOME_THRESHOLD = 20_000
    DETAILED_LOOKUP_MIN_AGE = 30
    EXPIRED_LICENSE_KEY = "EXPIRED"

    def __init__(
        self,
        validator: FrequentFlyerNumberValidator,
        fraud_lookup: Optional[FraudLookup] = None,
    ):
        if validator is None:
            raise ValueError("CreditCardApplicationEvaluator: validator가 None입니다.")

        self.validator = validator
        self.fraud_lookup = fraud_lookup
        self._lookup_count = 0
        self._lock = threading.Lock()
        self.logger = logger.bind(component="Evaluator")

        self.validator.add_lookup_listener(self._on_lookup_performed)

    @property
    def lookup_count(self) -> int:
        """검증기가 알린 회원번호 조회 누적 횟수"""
        return self._lookup_count

    def _on_lookup_performed(self) -> None:
        with self._lock:
            self._lookup_count += 1

    def evaluate(self, application: CreditCardApplication) -> Decision:
        """
        신청서를 심사합니다.

        Args:
            application: 신용카드 신청서

        Returns:
            Decision: 심사 결정

        Raises:
            라이선스 키 조회나 사기 위험 조회에서 발생한 예외는 그대로 전파됩니다.
        """
        if self.fraud_lookup is not None and self.fraud_lookup.is_fraud_risk(application):
            return self._decide(Decision.REFERRED_TO_HUMAN_FRAUD_RISK, "fraud risk")

        if application.gross_annual_income >= self.HIGH_INCOME_THRESHOLD:
            return self._decide(Decision.AUTO_ACCEPTED, "high income")

        if application.age < self.AUTO_DECISION_MIN_AGE:
            return self._decide(Decision.REFERRED_TO_HUMAN, "young applicant")

        self.validator.mode = (
            ValidationMode.DETAILED
            if application.age >= self.DETAILED_LOOKUP_MIN_AGE
            else ValidationMode.QUICK
        )

        try:
            license_key = self.validator.license_key
        except Exception as e:
            self.logger.error(f"License key read failed: {e}")
            raise

        if license_key == self.EXPIRED_LICENSE_KEY:
            return self._decide(Decision.REFERRED_TO_HUMAN, "license expired")

        try:
            is_valid = self.validator.is_valid(application.frequent_flyer_number)
        except Exception as e:
            # 검증 서비스 장애는 심사역 검토로 처리 (재시도 없음)
            self.logger.warning(f"Frequent flyer lookup failed: {e}")
            return self._decide(Decision.REFERRED_TO_HUMAN, "lookup error")

        if not is_valid:
            return self._decide(Decision.REFERRED_TO_HUMAN, "invalid frequent flyer number")

        if application.gross_annual_income < self.LOW_INCOME_THRESHOLD:
            return self._decide(Decision.AUTO_DECLINED, "low income")

        return self._decide(Decision.REFERRED_TO_HUMAN, "mid income")

    def _decide(self, decision: Decision, reason: str) -> Decision:
        self.logger.debug(f"Decision: {decision.name} ({reason})")
        return decision
