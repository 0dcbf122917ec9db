# Record store implementations
from .store import StoreUnavailable, TransactionStore, get_store, STORE_EXTENSION_KEY
from .memory_store import InMemoryTransactionStore
from .sql_store import SqlTransactionStore, build_conditions
