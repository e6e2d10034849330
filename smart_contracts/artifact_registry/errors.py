"""
Rejection codes for the ArtifactRegistry contract.

Each constant is used verbatim as an ``assert`` message, so a rejected
transaction carries the code in its error output.
"""

import typing

# Reserved for guardian-only actions. No method raises it yet.
INSUFFICIENT_PRIVILEGES: typing.Final = "InsufficientPrivileges"

ARTIFACT_VOID: typing.Final = "ArtifactVoid"

# Reserved for explicit-id registration. Minted ids never collide.
ARTIFACT_COLLISION: typing.Final = "ArtifactCollision"

NOMENCLATURE_VIOLATION: typing.Final = "NomenclatureViolation"
DIMENSIONAL_CONSTRAINT: typing.Final = "DimensionalConstraint"
SOVEREIGNTY_BREACH: typing.Final = "SovereigntyBreach"

# Storage payment missing, sent elsewhere, or below the box minimum balance.
STORAGE_UNFUNDED: typing.Final = "StorageUnfunded"
