"""
외부 협력자 계약
심사 엔진이 호출하는 회원번호 검증 서비스와 사기 위험 조회의 인터페이스입니다.
"""

import inspect
import weakref
from abc import ABC, abstractmethod
from typing import Callable, Optional

from cardlens.schemas.application import CreditCardApplication
from cardlens.schemas.results import ServiceInformation, ValidationMode

LookupListener = Callable[[], None]


class FrequentFlyerNumberValidator(ABC):
    """
    마일리지 회원번호 검증기

    - mode: 다음 조회에 사용할 방식 (심사 엔진이 조회 전에 설정)
    - service_information.license.key: 라이선스 키
    - is_valid(): 회원번호 유효성 조회 (실패 시 예외 발생 가능)

    구현체는 실제로 조회를 수행할 때마다 _notify_lookup_performed()를 호출해야 합니다.

    등록된 모든 리스너가 모든 조회 알림을 받으므로, 검증기 하나는 심사 엔진
    하나에만 연결하세요. 바운드 메서드 리스너는 약한 참조로 보관하므로
    심사 엔진이 해제되면 구독도 함께 사라집니다.
    """

    def __init__(self):
        self._mode = ValidationMode.QUICK
        self._lookup_listeners: list[Callable[[], Optional[LookupListener]]] = []

    @property
    def mode(self) -> ValidationMode:
        return self._mode

    @mode.setter
    def mode(self, value: ValidationMode) -> None:
        self._mode = value

    @property
    @abstractmethod
    def service_information(self) -> ServiceInformation:
        """검증 서비스 메타데이터"""
        pass

    @property
    def license_key(self) -> str:
        return self.service_information.license.key

    @abstractmethod
    def is_valid(self, frequent_flyer_number: Optional[str]) -> bool:
        """
        회원번호가 유효한지 조회합니다.

        Args:
            frequent_flyer_number: 회원번호 (없으면 None 그대로 전달)

        Returns:
            유효 여부
        """
        pass

    @property
    def lookup_listener_count(self) -> int:
        """살아 있는 리스너 수"""
        return sum(1 for ref in self._lookup_listeners if ref() is not None)

    def add_lookup_listener(self, listener: LookupListener) -> None:
        if inspect.ismethod(listener):
            self._lookup_listeners.append(weakref.WeakMethod(listener))
        else:
            self._lookup_listeners.append(lambda: listener)

    def remove_lookup_listener(self, listener: LookupListener) -> None:
        for ref in self._lookup_listeners:
            if ref() == listener:
                self._lookup_listeners.remove(ref)
                return
        raise ValueError("등록되지 않은 리스너입니다.")

    def _notify_lookup_performed(self) -> None:
        listeners = [ref() for ref in self._lookup_listeners]
        if None in listeners:
            self._lookup_listeners = [
                ref for ref, listener in zip(self._lookup_listeners, listeners)
                if listener is not None
            ]
        for listener in listeners:
            if listener is not None:
                listener()


class FraudLookup(ABC):
    """사기 위험 조회"""

    @abstractmethod
    def is_fraud_risk(self, application: CreditCardApplication) -> bool:
        pass
