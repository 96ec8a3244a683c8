"""Shared constants: divisions, error messages, statuses and customer categories."""

from types import MappingProxyType

ORTOPEDI = "Ortopedi"
RADIOLOGI = "Radiologi"


def _failure(kind: str, number: int) -> str:
    return f"Gagal Eksekusi {kind} {number}"


(
    ERR_QUERY_1,
    ERR_QUERY_2,
    ERR_QUERY_3,
    ERR_QUERY_4,
    ERR_QUERY_5,
    ERR_QUERY_6,
) = (_failure("Query", n) for n in range(1, 7))

(
    ERR_SCAN_1,
    ERR_SCAN_2,
    ERR_SCAN_3,
    ERR_SCAN_4,
    ERR_SCAN_5,
    ERR_SCAN_6,
) = (_failure("Scan", n) for n in range(1, 7))

ERR_COMMIT = "Gagal Commit Ke Database"

# Two of the status names point at each other's words; stored data depends on it.
_ACCEPTED, _IN_PROGRESS, _REJECTED = "DITERIMA", "DIPROSES", "DITOLAK"
DITERIMA = _ACCEPTED
DITOLAK = _IN_PROGRESS
DIPROSES = _REJECTED

CUSTOMER_RS, CUSTOMER_NON_RS, CUSTOMER_AS_SUPPLIER = (str(n) for n in range(1, 4))

_ROMAN_NUMERALS = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII")

ROMAN_MONTHS = MappingProxyType(
    {f"{month:02d}": numeral for month, numeral in enumerate(_ROMAN_NUMERALS, start=1)}
)