"""
핵심 설정 모듈
환경 변수 기반 설정 관리
"""

from functools import lru_cache
from typing import List
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """라이브러리 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    app_name: str = Field(default="basekit", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Profile Settings
    active_profiles: str = Field(default="", alias="ACTIVE_PROFILES")
    production_profile: str = Field(default="production", alias="PRODUCTION_PROFILE")

    @property
    def active_profiles_list(self) -> List[str]:
        """활성 프로파일 리스트 반환 (빈 항목 제외)"""
        return [name.strip() for name in self.active_profiles.split(",") if name.strip()]


@lru_cache()
def get_settings() -> Settings:
    """캐시된 설정 인스턴스 반환"""
    return Settings()


# 전역 설정 인스턴스
settings = get_settings()
