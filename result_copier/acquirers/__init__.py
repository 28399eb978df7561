from .acquirer_protocol import Resource, ResourceAcquirerProtocol
from .database_acquirer import DatabaseResourceAcquirer


__all__ = ["DatabaseResourceAcquirer", "Resource", "ResourceAcquirerProtocol"]
