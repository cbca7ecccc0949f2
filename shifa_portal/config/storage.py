"""
Storage configuration.
"""

from pydantic import BaseModel


class StorageConfig(BaseModel):
    """Key-value store configuration settings."""

    path: str = "shifa_portal.db"
    namespace: str = "shifa"
    connection_timeout: float = 5.0

    def key_for(self, name: str) -> str:
        """Get the namespaced storage key for a collection name."""
        if not self.namespace:
            return name
        return f"{self.namespace}_{name}"

    def key_prefix(self) -> str:
        """Get the prefix shared by every key in this namespace."""
        return f"{self.namespace}_" if self.namespace else ""
