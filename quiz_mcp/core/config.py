"""
Application configuration settings
FILE: quiz_mcp/core/config.py
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Server settings loaded from environment variables"""
    
    # Server identity reported during the MCP handshake
    server_name: str = "quiz-mcp-server"
    server_version: str = "1.0.0"
    
    # Logging Configuration (always written to stderr)
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    
    class Config:
        env_file = ".env"
        env_prefix = "QUIZ_MCP_"
        case_sensitive = False
        extra = "ignore"


settings = Settings()
