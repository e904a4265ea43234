from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # Affordability
    default_policy: str = "absolute_headroom"  # or "ratio"
    recommended_savings_rate: float = 0.2  # Share of monthly salary
    low_burden_ratio: float = 0.3  # Of disposable income
    moderate_burden_ratio: float = 0.5

    # App
    debug: bool = False
    log_level: str = "INFO"
    dashboard_port: int = 8050


settings = Settings()
