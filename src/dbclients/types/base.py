"""Base model class for all dbclients models with serialization support."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class DBBaseModel(BaseModel):
    """Base model for all dbclients value objects.
    
    Provides common functionality for all models including:
    - Serialization to dictionary via to_dict()
    - Consistent configuration
    - Immutability; instances are never mutated after construction
    """
    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        use_enum_values=True,
        frozen=True
    )
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary for serialization.
        
        Nested models are dumped recursively and enums are reduced to
        their values by ``use_enum_values``.
        
        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return self.model_dump(by_alias=False, exclude_none=True)
