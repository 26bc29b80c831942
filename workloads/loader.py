"""
Workload file loader.

A workload is a plain text file, one transaction per line, eight
whitespace-separated fields:

    account_id target_id amount type fee arrival_time complexity account_tier

- type is a numeric code: 0 = deposit, 1 = withdraw, 2 = transfer
- arrival_time is Unix epoch seconds
- blank lines and lines starting with '#' are ignored

Lines that don't parse are skipped (with a warning) rather than aborting
the whole load — one bad record shouldn't sink a benchmark run.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from models.enums import TransactionType
from scheduler.base import Transaction

logger = logging.getLogger(__name__)

_TYPE_CODES = {
    0: TransactionType.DEPOSIT,
    1: TransactionType.WITHDRAW,
    2: TransactionType.TRANSFER,
}


def parse_line(line: str) -> Optional[Transaction]:
    """
    Parse one workload line.

    Returns None for blank/comment lines. Raises ValueError for lines that
    look like records but can't be parsed.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    fields = stripped.split()
    if len(fields) < 8:
        raise ValueError(f"expected 8 fields, got {len(fields)}")

    type_code = int(fields[3])
    if type_code not in _TYPE_CODES:
        raise ValueError(f"unknown transaction type code: {type_code}")

    return Transaction(
        account_id=int(fields[0]),
        target_id=int(fields[1]),
        amount=float(fields[2]),
        type=_TYPE_CODES[type_code],
        fee=float(fields[4]),
        arrival_time=float(fields[5]),
        complexity=int(fields[6]),
        account_tier=int(fields[7]),
    )


def load_workload(path: Union[str, Path]) -> list[Transaction]:
    """
    Read every transaction from a workload file.

    Raises:
        FileNotFoundError: the file doesn't exist.
    """
    path = Path(path)
    if not path.is_file():
        logger.error(f"Couldn't open workload file {path}")
        raise FileNotFoundError(f"Workload file not found: {path}")

    transactions = []
    # Undecodable bytes become U+FFFD and the line fails to parse below
    with path.open(encoding="utf-8", errors="replace") as f:
        for lineno, line in enumerate(f, start=1):
            try:
                txn = parse_line(line)
            except ValueError as e:
                logger.warning(f"{path}:{lineno}: skipping malformed line ({e})")
                continue
            if txn is not None:
                transactions.append(txn)

    logger.info(f"Loaded {len(transactions)} transactions from {path}")
    return transactions
