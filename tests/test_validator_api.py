"""
CardLens 테스트 - 회원번호 검증 API 클라이언트
"""

import httpx
import pytest
from pydantic import ValidationError

from cardlens.data_sources.validator_api import (
    FrequentFlyerApiValidator,
    ValidatorUnavailableError,
)
from cardlens.domain.evaluator import CreditCardApplicationEvaluator
from cardlens.schemas.application import CreditCardApplication
from cardlens.schemas.results import Decision, ValidationMode


class TestFrequentFlyerApiValidator:
    """httpx.MockTransport로 검증 서비스를 대체한 테스트"""

    def setup_method(self):
        self.requests: list[httpx.Request] = []
        self.license_key = "OK"
        self.validate_status = 200
        self.valid = True
        self.validate_body = None

    def _handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path.endswith("/service-info"):
            return httpx.Response(200, json={"license": {"key": self.license_key}})
        if request.url.path.endswith("/validate"):
            if self.validate_status != 200:
                return httpx.Response(self.validate_status, json={"error": "unavailable"})
            if self.validate_body is not None:
                return httpx.Response(200, json=self.validate_body)
            return httpx.Response(200, json={"valid": self.valid})
        return httpx.Response(404)

    def _validator(self, api_key: str = "test-key") -> FrequentFlyerApiValidator:
        client = httpx.Client(transport=httpx.MockTransport(self._handler))
        return FrequentFlyerApiValidator(
            base_url="http://validator.test/api/v1/",
            api_key=api_key,
            client=client,
        )

    def test_license_key(self):
        self.license_key = "EXPIRED"
        validator = self._validator()

        assert validator.license_key == "EXPIRED"
        assert validator.service_information.license.key == "EXPIRED"
        assert str(self.requests[0].url) == "http://validator.test/api/v1/service-info"

    def test_license_not_cached(self):
        validator = self._validator()

        assert validator.license_key == "OK"
        self.license_key = "EXPIRED"
        assert validator.license_key == "EXPIRED"
        assert len(self.requests) == 2

    def test_is_valid_sends_number_and_mode(self):
        validator = self._validator()
        validator.mode = ValidationMode.DETAILED

        assert validator.is_valid("y") is True

        request = self.requests[0]
        assert request.url.params["number"] == "y"
        assert request.url.params["mode"] == "detailed"
        assert request.headers["X-Api-Key"] == "test-key"

    def test_is_valid_false(self):
        self.valid = False
        validator = self._validator()

        assert validator.is_valid("y") is False

    @pytest.mark.parametrize("body", [{"valid": "false"}, {"valid": "true"}, {"valid": 1}, {}])
    def test_malformed_validate_response(self, body):
        """valid가 boolean이 아니거나 없으면 오류"""
        self.validate_body = body
        validator = self._validator()

        with pytest.raises(ValidationError):
            validator.is_valid("y")

    def test_malformed_response_referred(self):
        """잘못된 응답은 심사역 검토로 처리"""
        self.validate_body = {"valid": "false"}
        sut = CreditCardApplicationEvaluator(self._validator())
        application = CreditCardApplication(
            gross_annual_income=19_999,
            age=42,
            frequent_flyer_number="y",
        )

        assert sut.evaluate(application) == Decision.REFERRED_TO_HUMAN
        assert sut.lookup_count == 1

    def test_missing_number_omitted(self):
        validator = self._validator()

        validator.is_valid(None)

        assert "number" not in self.requests[0].url.params
        assert self.requests[0].url.params["mode"] == "quick"

    def test_error_status_raises(self):
        self.validate_status = 503
        validator = self._validator()

        with pytest.raises(ValidatorUnavailableError):
            validator.is_valid("y")

    def test_lookup_notification(self):
        """성공/실패 모두 조회 1회로 알림"""
        validator = self._validator()
        notified = []
        validator.add_lookup_listener(lambda: notified.append(1))

        validator.is_valid("y")
        self.validate_status = 500
        with pytest.raises(ValidatorUnavailableError):
            validator.is_valid("y")
        validator.license_key

        assert len(notified) == 2

    def test_listener_error_propagates(self):
        validator = self._validator()

        def failing_listener():
            raise RuntimeError("listener failed")

        validator.add_lookup_listener(failing_listener)

        with pytest.raises(RuntimeError, match="listener failed"):
            validator.is_valid("y")
        assert len(self.requests) == 1

    def test_transport_error_notifies_and_propagates(self):
        def broken(request):
            raise httpx.ConnectError("refused", request=request)

        validator = FrequentFlyerApiValidator(
            base_url="http://validator.test",
            api_key="k",
            client=httpx.Client(transport=httpx.MockTransport(broken)),
        )
        notified = []
        validator.add_lookup_listener(lambda: notified.append(1))

        with pytest.raises(httpx.ConnectError):
            validator.is_valid("y")
        assert notified == [1]

    def test_remove_listener(self):
        validator = self._validator()
        notified = []
        listener = lambda: notified.append(1)  # noqa: E731

        validator.add_lookup_listener(listener)
        validator.remove_lookup_listener(listener)
        validator.is_valid("y")

        assert notified == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
