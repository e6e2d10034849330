"""
Box layout constants shared by the contract and the off-chain helpers.

Box minimum balance: 2500 + 400 × (key_length + value_length) microALGO.
"""

import typing

BOX_FLAT_MBR: typing.Final = 2_500
BOX_BYTE_MBR: typing.Final = 400

# "a" prefix + uint64 id
RECORD_KEY_LENGTH: typing.Final = 1 + 8
# ARC-4 head of ArtifactRecord: three 2-byte offsets, owner, size, created_at
RECORD_HEAD_LENGTH: typing.Final = 2 + 32 + 8 + 2 + 2 + 8
# "o" prefix + uint64 id + 32-byte public key
SOVEREIGNTY_KEY_LENGTH: typing.Final = 1 + 8 + 32
SOVEREIGNTY_VALUE_LENGTH: typing.Final = 1
