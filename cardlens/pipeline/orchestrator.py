"""
Review Pipeline
여러 신청서를 순서대로 심사하고 결과를 집계합니다.
"""

from typing import Iterable, Optional
from loguru import logger

from cardlens.domain.contracts import FrequentFlyerNumberValidator, FraudLookup
from cardlens.domain.evaluator import CreditCardApplicationEvaluator
from cardlens.schemas.application import CreditCardApplication
from cardlens.schemas.results import ReviewReport


class ReviewPipeline:
    """
    일괄 심사 파이프라인

    신청서를 입력 순서대로 하나씩 심사합니다 (병렬 처리 없음).
    검증기 하나당 파이프라인 하나를 사용하세요.
    라이선스 조회/사기 위험 조회 오류는 배치 전체를 중단시킵니다.
    """

    def __init__(
        self,
        validator: FrequentFlyerNumberValidator,
        fraud_lookup: Optional[FraudLookup] = None,
    ):
        self.evaluator = CreditCardApplicationEvaluator(validator, fraud_lookup)
        self.logger = logger.bind(component="Pipeline")

    def run(self, applications: Iterable[CreditCardApplication]) -> ReviewReport:
        """
        일괄 심사 실행

        Raises:
            TypeError: CreditCardApplication이 아닌 입력
        """
        decisions = []
        counts: dict[str, int] = {}

        for index, application in enumerate(applications):
            if not isinstance(application, CreditCardApplication):
                raise TypeError(
                    f"#{index}: CreditCardApplication이 아닙니다 ({type(application).__name__})"
                )

            try:
                decision = self.evaluator.evaluate(application)
            except Exception as e:
                self.logger.error(f"Review aborted at application #{index}: {e}")
                raise

            decisions.append(decision)
            counts[decision.value] = counts.get(decision.value, 0) + 1

        report = ReviewReport(
            total_count=len(decisions),
            decisions=decisions,
            decision_counts=counts,
            lookup_count=self.evaluator.lookup_count,
        )

        self.logger.info(
            f"Reviewed {report.total_count} applications "
            f"({report.lookup_count} lookups): {counts}"
        )
        return report
