from .base_copier import ResultSetCopier
from .manual_copier import ManualResultSetCopier
from .scoped_copier import ScopedResultSetCopier


__all__ = ["ManualResultSetCopier", "ResultSetCopier", "ScopedResultSetCopier"]
