from typing import Any, Protocol


class Resource(Protocol):
    def close(self) -> Any: ...


class ResourceAcquirerProtocol(Protocol):
    def acquire_connection(self) -> Resource | None: ...

    def acquire_writer(self, file_name: str) -> Resource | None: ...

    def copy_rows(self, connection: Resource | None, query: str, writer: Resource | None) -> Any: ...
