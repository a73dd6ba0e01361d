# dynamic_value/core/types/protocols.py

"""Protocol definitions for the collaborators that move values in and out."""

# Standard library imports
from collections.abc import Mapping
from typing import Protocol
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    # Local imports
    from dynamic_value.core.domain.value import Value


# Type alias for a row handed to a csv writer
type CSVRow = list[str]

# Request headers accepted by HTTP collaborators
type Headers = Mapping[str, str]


# ============================================================================
# External Library Protocols
# ============================================================================


class CSVWriter(Protocol):
    """Protocol for CSV writer objects."""

    def writerow(self, row: CSVRow) -> object: ...
    def writerows(self, rows: list[CSVRow]) -> None: ...


# ============================================================================
# Collaborator Protocols
# ============================================================================


class HttpTransport(Protocol):
    """Protocol for anything able to fetch text over HTTP.

    Code that needs network access takes one of these as an argument instead
    of reaching for module-level helpers.
    """

    def get(self, url: "Value | str", headers: Headers | None = None) -> str: ...

    def post(self, url: "Value | str", body: str, headers: Headers | None = None) -> str: ...


__all__ = ["CSVRow", "CSVWriter", "Headers", "HttpTransport"]
