import hashlib

from algopy import arc4

CREATION_ROUND = 1_000
# Comfortably above the box minimum balance of any valid record.
STORAGE_FUNDING = 1_000_000


def tag_list(*labels: str) -> arc4.DynamicArray[arc4.String]:
    return arc4.DynamicArray[arc4.String](*(arc4.String(label) for label in labels))


def event_selector(signature: str) -> bytes:
    """ARC-28 selector: first four bytes of SHA-512/256 of the event signature."""
    return hashlib.new("sha512_256", signature.encode()).digest()[:4]


def logs_of(txn) -> list[bytes]:
    logs = [txn.logs(index) for index in range(txn.num_logs.value)]
    return [log if isinstance(log, bytes) else log.value for log in logs]
