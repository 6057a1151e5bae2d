"""Client handle configuration settings."""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from dbclients.constants.client import ErrorFormat
from dbclients.constants.secrets import READ_ONLY_URL_SECRET, READ_WRITE_URL_SECRET
from .base import DBBaseSettings


class ClientSettings(DBBaseSettings):
    """Configuration for the read and write client handles.
    
    The secret name fields name the keys fetched from the secret
    provider; the write URL is always fetched before the read URL.
    """
    
    model_config = SettingsConfigDict(
        env_prefix="CLIENT_",
        case_sensitive=False
    )
    
    error_format: ErrorFormat = Field(
        default=ErrorFormat.MINIMAL,
        description="Error formatting mode of both client handles"
    )
    read_write_url_secret_name: str = Field(
        default=READ_WRITE_URL_SECRET,
        min_length=1,
        description="Secret name of the read-write (primary) connection string"
    )
    read_only_url_secret_name: str = Field(
        default=READ_ONLY_URL_SECRET,
        min_length=1,
        description="Secret name of the read-only (replica) connection string"
    )
