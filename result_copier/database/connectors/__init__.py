from .sync_connector import SyncDatabaseConnector


__all__ = ["SyncDatabaseConnector"]
