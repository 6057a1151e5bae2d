"""Client handle value objects."""

from pydantic import Field

from dbclients.constants.client import ErrorFormat
from dbclients.types.base import DBBaseModel


class DataSources(DBBaseModel):
    """Data-source descriptor of a client handle."""
    
    db: str = Field(..., description="Connection string of the database")


class DataClient(DBBaseModel):
    """Immutable data-access client handle.
    
    A handle only carries configuration; it is built once from resolved
    secret values and held for the process lifetime.
    
    Attributes:
        error_format: Error formatting mode ("minimal" or "pretty")
        datasources: Data-source descriptor holding the connection string
    """
    
    error_format: ErrorFormat = Field(
        default=ErrorFormat.MINIMAL,
        description="Error formatting mode"
    )
    datasources: DataSources
    
    @property
    def db(self) -> str:
        """Connection string of the underlying data source."""
        return self.datasources.db


class DataClients(DBBaseModel):
    """The read and write client handles produced by client resolution."""
    
    read: DataClient
    write: DataClient
