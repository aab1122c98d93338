"""
핵심 모듈: 설정, 로깅, 예외, 컨테이너 접근
"""
