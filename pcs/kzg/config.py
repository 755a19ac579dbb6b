"""
KZG 운영 설정값
================

프로토콜 요구사항이 아닌 운영상의 보호 장치들이다.
Flask 앱은 웹 관련 값을 app.config로 복사하므로 테스트에서 덮어쓸 수 있다.
"""

import logging

# SRS.generate가 허용하는 최대 차수 (메모리/시간 상한)
MAX_DEGREE_LIMIT = 1_000_000

# CLI 데모에서 무작위로 뽑는 평가 점 개수 범위
MIN_QUERY_POINTS = 1
MAX_QUERY_POINTS = 3

# 웹 데모는 순수 파이썬 타원곡선 연산이므로 훨씬 작은 상한을 둔다
WEB_MAX_DEGREE = 32

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LOG_LEVEL = logging.INFO
