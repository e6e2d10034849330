"""
Field rules applied before any write to the registry.

Every mutating entry point (create, register, update) and the read-only
``validate_submission`` check runs the same ``check_submission`` subroutine,
so a submission accepted by one is accepted by all of them.

Lengths count characters (UTF-8 code points), not bytes.
"""

import typing

from algopy import String, UInt64, arc4, ensure_budget, op, subroutine, urange

from smart_contracts.artifact_registry.errors import (
    DIMENSIONAL_CONSTRAINT,
    NOMENCLATURE_VIOLATION,
)

TITLE_MAX_LENGTH: typing.Final = 80
ABSTRACT_MAX_LENGTH: typing.Final = 256
TAG_MAX_LENGTH: typing.Final = 40
TAG_MAX_COUNT: typing.Final = 8
# Exclusive upper bound.
SIZE_LIMIT: typing.Final = 2_000_000_000

# Opcode budget per scanned byte.
SCAN_COST_PER_BYTE: typing.Final = 12


@subroutine
def char_count_within(text: String, limit: UInt64) -> bool:
    """True when ``text`` holds between 1 and ``limit`` characters."""
    data = text.bytes
    if data.length == 0:
        return False
    # Every character takes at least one byte and at most four.
    if data.length <= limit:
        return True
    if data.length > limit * 4:
        return False

    ensure_budget(data.length * SCAN_COST_PER_BYTE)
    count = UInt64(0)
    for index in urange(data.length):
        # 10xxxxxx continues the previous character
        if (op.getbyte(data, index) & 0xC0) != 0x80:
            count += 1
    return count <= limit


@subroutine
def check_title(title: String) -> None:
    assert char_count_within(title, UInt64(TITLE_MAX_LENGTH)), NOMENCLATURE_VIOLATION


@subroutine
def check_size(size: UInt64) -> None:
    assert size > 0 and size < SIZE_LIMIT, DIMENSIONAL_CONSTRAINT


@subroutine
def check_abstract(abstract: String) -> None:
    assert char_count_within(abstract, UInt64(ABSTRACT_MAX_LENGTH)), NOMENCLATURE_VIOLATION


@subroutine
def check_tags(tags: arc4.DynamicArray[arc4.String]) -> None:
    assert tags.length > 0 and tags.length <= TAG_MAX_COUNT, NOMENCLATURE_VIOLATION
    for tag in tags:
        assert char_count_within(tag.native, UInt64(TAG_MAX_LENGTH)), NOMENCLATURE_VIOLATION


@subroutine
def check_submission(
    title: String,
    size: UInt64,
    abstract: String,
    tags: arc4.DynamicArray[arc4.String],
) -> None:
    """Fail on the first broken rule, in field order."""
    check_title(title)
    check_size(size)
    check_abstract(abstract)
    check_tags(tags)
