"""Connection operations the engine does not offer."""

from typing import Any, NoReturn

from liteconn.exceptions import UnsupportedOperationError
from liteconn.types import Capability


def unsupported(capability: Capability, message: str) -> NoReturn:
    raise UnsupportedOperationError(message, capability=capability)


class UnsupportedCapabilities:
    """Standard connection operations with no SQLite counterpart.

    Every method raises ``UnsupportedOperationError`` tagged with the
    ``Capability`` it stands for, so callers can tell which feature is
    missing without parsing messages.
    """

    UNSUPPORTED: frozenset[Capability] = frozenset(Capability)

    def supports(self, capability: Capability) -> bool:
        return capability not in self.UNSUPPORTED

    def prepare_call(self, sql: str) -> NoReturn:
        unsupported(
            Capability.STORED_PROCEDURES, "SQLite does not support Stored Procedures"
        )

    def get_type_map(self) -> NoReturn:
        unsupported(Capability.TYPE_MAP, "type maps are not supported")

    def set_type_map(self, type_map: dict[str, type]) -> NoReturn:
        unsupported(Capability.TYPE_MAP, "type maps are not supported")

    def create_clob(self) -> NoReturn:
        unsupported(Capability.CLOB, "CLOB values are not supported")

    def create_blob(self) -> NoReturn:
        unsupported(Capability.BLOB, "BLOB objects are not supported")

    def create_nclob(self) -> NoReturn:
        unsupported(Capability.NCLOB, "NCLOB values are not supported")

    def create_sqlxml(self) -> NoReturn:
        unsupported(Capability.SQLXML, "SQLXML values are not supported")

    def create_array_of(self, type_name: str, elements: list[Any]) -> NoReturn:
        unsupported(Capability.ARRAY, "array values are not supported")

    def create_struct(self, type_name: str, attributes: list[Any]) -> NoReturn:
        unsupported(Capability.STRUCT, "struct values are not supported")

    def get_client_info(self, name: str | None = None) -> NoReturn:
        unsupported(Capability.CLIENT_INFO, "client info is not supported")

    def set_client_info(self, name: str, value: str) -> NoReturn:
        unsupported(Capability.CLIENT_INFO, "client info is not supported")

    def prepare_statement_returning_keys(
        self, sql: str, columns: list[int] | list[str] | None = None
    ) -> NoReturn:
        unsupported(
            Capability.GENERATED_KEYS, "generated key retrieval is not supported"
        )

    def unwrap(self, interface: type) -> NoReturn:
        unsupported(Capability.UNWRAP, "Not a wrapper")
