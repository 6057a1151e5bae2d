"""Factory for creating data-access client handles."""
from typing import Union

from dbclients.constants.client import AccessMode, ErrorFormat
from dbclients.logging import get_logger
from .models import DataClient, DataClients, DataSources

logger = get_logger(__name__)


class ClientFactory:
    """Simple factory for creating client handles.
    
    Construction is pure and never fails for a string connection value.
    """
    
    @staticmethod
    def create(
        db: str,
        error_format: Union[ErrorFormat, str] = ErrorFormat.MINIMAL,
        access_mode: AccessMode = AccessMode.WRITE,
    ) -> DataClient:
        """Create a client handle for a connection string.
        
        Args:
            db: Connection string of the data source
            error_format: Error formatting mode of the handle
            access_mode: Access the handle is configured for (logging only)
            
        Returns:
            DataClient instance
        """
        logger.debug(f"Creating {AccessMode(access_mode).value} client")
        return DataClient(
            error_format=ErrorFormat(error_format),
            datasources=DataSources(db=db),
        )
    
    @staticmethod
    def create_write_client(
        db: str,
        error_format: Union[ErrorFormat, str] = ErrorFormat.MINIMAL,
    ) -> DataClient:
        """Create a client handle configured for read-write access."""
        return ClientFactory.create(db, error_format, AccessMode.WRITE)
    
    @staticmethod
    def create_read_client(
        db: str,
        error_format: Union[ErrorFormat, str] = ErrorFormat.MINIMAL,
    ) -> DataClient:
        """Create a client handle configured for read-only access."""
        return ClientFactory.create(db, error_format, AccessMode.READ)
    
    @staticmethod
    def create_pair(
        read_write_url: str,
        read_only_url: str,
        error_format: Union[ErrorFormat, str] = ErrorFormat.MINIMAL,
    ) -> DataClients:
        """Create both handles from their resolved connection strings.
        
        Args:
            read_write_url: Connection string of the write handle
            read_only_url: Connection string of the read handle
            error_format: Error formatting mode of both handles
            
        Returns:
            DataClients with ``read`` and ``write`` handles
        """
        return DataClients(
            write=ClientFactory.create_write_client(read_write_url, error_format),
            read=ClientFactory.create_read_client(read_only_url, error_format),
        )
