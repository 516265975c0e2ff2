"""
마일리지 회원번호 검증 API 클라이언트
심사 엔진의 회원번호 조회와 라이선스 확인에 사용합니다.
"""

from typing import Optional
from loguru import logger

from cardlens.config import settings
from cardlens.domain.contracts import FrequentFlyerNumberValidator
from cardlens.schemas.results import ServiceInformation, ValidationResult
import httpx


class ValidatorUnavailableError(Exception):
    """검증 서비스 응답 오류"""
    pass


class FrequentFlyerApiValidator(FrequentFlyerNumberValidator):
    """
    HTTP 기반 회원번호 검증기

    엔드포인트:
    - GET /service-info: {"license": {"key": "..."}}
    - GET /validate?number=...&mode=quick|detailed: {"valid": true}

    환경변수:
    - VALIDATOR_BASE_URL: 검증 서비스 주소
    - VALIDATOR_API_KEY: API 키 (X-Api-Key 헤더로 전송)

    응답은 캐시하지 않습니다. 매 조회마다 서비스를 호출합니다.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ):
        super().__init__()
        self.base_url = (base_url or settings.VALIDATOR_BASE_URL).rstrip("/")
        self.api_key = api_key or settings.VALIDATOR_API_KEY
        self.logger = logger.bind(source="ValidatorAPI")

        headers = {"X-Api-Key": self.api_key} if self.api_key else {}
        self.client = client or httpx.Client(timeout=settings.VALIDATOR_TIMEOUT)
        self.client.headers.update(headers)

        if not self.api_key:
            self.logger.warning("검증 서비스 API 키가 없습니다. VALIDATOR_API_KEY 환경변수를 설정하세요.")

    @property
    def service_information(self) -> ServiceInformation:
        response = self.client.get(f"{self.base_url}/service-info")

        if response.status_code != 200:
            self.logger.error(f"Service info error: {response.status_code}")
            raise ValidatorUnavailableError(
                f"service-info 응답 오류: {response.status_code}"
            )

        return ServiceInformation.model_validate(response.json())

    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        """
        회원번호 유효성 조회

        Args:
            frequent_flyer_number: 회원번호 (None이면 number 파라미터 없이 조회)

        Returns:
            유효 여부

        Raises:
            ValidatorUnavailableError: 200 이외의 응답
            pydantic.ValidationError: valid가 boolean이 아닌 응답
            httpx.HTTPError: 네트워크 오류
        """
        params = {"mode": self.mode.value}
        if frequent_flyer_number is not None:
            params["number"] = frequent_flyer_number

        try:
            response = self.client.get(f"{self.base_url}/validate", params=params)
        finally:
            # 성공/실패와 무관하게 조회 1회로 알림
            self._notify_lookup_performed()

        if response.status_code != 200:
            self.logger.error(f"Validate error: {response.status_code}")
            raise ValidatorUnavailableError(f"validate 응답 오류: {response.status_code}")

        result = ValidationResult.model_validate(response.json())
        self.logger.debug(f"Lookup ({self.mode.value}): valid={result.valid}")
        return result.valid

    def close(self):
        """클라이언트 종료"""
        self.client.close()
