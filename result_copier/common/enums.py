import enum


class ReleasePolicy(enum.StrEnum):
    SCOPED = "scoped"
    MANUAL = "manual"


class ErrorKind(enum.StrEnum):
    CONNECTION = "connection_error"
    WRITER = "writer_error"
    COPY = "copy_error"
    CLOSE = "close_error"


class CopyState(enum.StrEnum):
    INIT = "init"
    CONNECTION_ACQUIRED = "connection_acquired"
    WRITER_ACQUIRED = "writer_acquired"
    COPIED = "copied"
    CONNECTION_RELEASED = "connection_released"
    WRITER_RELEASED = "writer_released"
    DONE = "done"
