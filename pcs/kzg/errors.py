"""
KZG 오류 종류
==============

모든 오류는 호출자 입력 오류이며, 암호 연산을 시작하기 전에 즉시 검출된다.
같은 입력으로 재시도해도 성공할 수 없으므로 현재 연산에 치명적이다.

검증 실패는 오류가 아니다: verify()는 잘못된 증명에 대해 False를 반환할 뿐이다.

ValueError를 상속하므로 `except ValueError`로 잡아도 동작한다.
"""


class KZGError(ValueError):
    """KZG 모듈의 모든 호출자 입력 오류의 기반 클래스."""

    kind = "KZGError"


class InvalidDegree(KZGError):
    """최대 차수가 0 이하이거나 운영 상한을 초과할 때."""

    kind = "InvalidDegree"


class InsufficientParameters(KZGError):
    """SRS가 다항식/질의를 처리하기에 너무 짧을 때."""

    kind = "InsufficientParameters"


class MalformedInput(KZGError):
    """숫자가 아니거나 해석할 수 없는 입력 (차수, 점, 배치 길이 불일치)."""

    kind = "MalformedInput"
