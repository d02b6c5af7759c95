from pydantic_settings import BaseSettings

DEFAULT_LLM_MODEL = "claude-sonnet-4-20250514"


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    scraper_api_key: str
    scraper_api_url: str = "http://api.scraperapi.com"
    scraper_timeout: float = 30.0
    scraper_render_js: bool = True
    scrape_cache_ttl: float = 0.0
    scrape_cache_max_entries: int = 256
    anthropic_api_key: str = ""
    llm_model: str = DEFAULT_LLM_MODEL
    mock_hotel_fallback: bool = True
    mock_hotel_count: int = 10
    log_level: str = "INFO"
