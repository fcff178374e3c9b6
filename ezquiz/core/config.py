from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")

    quiz_title_prefix: str = Field(default="###", alias="QUIZ_TITLE_PREFIX")
    quiz_question_keyword: str = Field(default="Câu", alias="QUIZ_QUESTION_KEYWORD")
    quiz_answer_keyword: str = Field(default="Đáp án đúng", alias="QUIZ_ANSWER_KEYWORD")
    quiz_option_labels: str = Field(default="ABCD", alias="QUIZ_OPTION_LABELS")
    quiz_fallback_title_suffixes: str = Field(
        default=".txt",
        alias="QUIZ_FALLBACK_TITLE_SUFFIXES",
    )
    quiz_require_questions: bool = Field(default=False, alias="QUIZ_REQUIRE_QUESTIONS")

    @property
    def fallback_title_suffixes(self) -> tuple[str, ...]:
        return tuple(
            suffix.strip() for suffix in self.quiz_fallback_title_suffixes.split(",") if suffix.strip()
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
