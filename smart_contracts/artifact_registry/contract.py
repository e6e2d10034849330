# =============================================================================
#  ArtifactRegistry — Algorand Smart Contract
#  -----------------------------------------------------------------------------
#  Standard  : ARC-4  (typed ABI), ARC-28 events
#  Language  : Algorand Python  →  compiled to AVM bytecode via PuyaPy
# =============================================================================
#
#  PURPOSE
#  -------
#  A shared registry of scholarly artifacts (papers, datasets and similar
#  contributions). Each record carries its author, descriptive metadata and a
#  creation round. Only the author may revise or remove a record; anyone may
#  read it.
#
#  STORAGE MODEL
#  -------------
#    GlobalState  sequence : uint64        — last minted artifact id
#
#    BoxMap<uint64, ArtifactRecord>   prefix "a"
#    │
#    ├── Key   : artifact id (8 bytes)
#    └── Value : ARC-4 encoded ArtifactRecord
#
#    BoxMap<bytes, bool>              prefix "o"
#    │
#    ├── Key   : itob(artifact id) ‖ 32-byte owner public key
#    └── Value : ownership confirmed
#
#  Box minimum balance is paid by the caller: create and update take a
#  payment to the application account in the same atomic group, covering
#  2500 + 400 × (key_length + value_length) microALGO for every new box
#  and 400 microALGO for every byte a record grows by.
#
#  ATOMICITY
#  ---------
#  Every check is an `assert`. A failed assert rejects the whole application
#  call, so a method either applies all of its writes or none of them.
#
# =============================================================================

import typing

from algopy import (
    Account,
    ARC4Contract,
    BoxMap,
    Bytes,
    Global,
    String,
    Txn,
    UInt64,
    arc4,
    gtxn,
    op,
    subroutine,
)

from smart_contracts.artifact_registry.errors import (
    ARTIFACT_VOID,
    SOVEREIGNTY_BREACH,
    STORAGE_UNFUNDED,
)
from smart_contracts.artifact_registry.storage import (
    BOX_BYTE_MBR,
    BOX_FLAT_MBR,
    RECORD_KEY_LENGTH,
    SOVEREIGNTY_KEY_LENGTH,
    SOVEREIGNTY_VALUE_LENGTH,
)
from smart_contracts.artifact_registry.validation import check_submission

SECTION_LABEL: typing.Final = "Scholarly Artifact"


class ArtifactRecord(arc4.Struct):
    title: arc4.String
    owner: arc4.Address
    size: arc4.UInt64
    abstract: arc4.String
    tags: arc4.DynamicArray[arc4.String]
    created_at: arc4.UInt64


# ── Read projections ──────────────────────────────────────────────────────────


class Signature(arc4.Struct):
    title: arc4.String
    owner: arc4.Address


class Essentials(arc4.Struct):
    title: arc4.String
    owner: arc4.Address
    size: arc4.UInt64


class Profile(arc4.Struct):
    title: arc4.String
    creator: arc4.Address
    size: arc4.UInt64
    abstract: arc4.String
    labels: arc4.DynamicArray[arc4.String]


class DisplayView(arc4.Struct):
    section: arc4.String
    profile: Profile


# ── ARC-28 events ─────────────────────────────────────────────────────────────


class ArtifactMinted(arc4.Struct):
    artifact_id: arc4.UInt64
    owner: arc4.Address
    created_at: arc4.UInt64


class ArtifactRevised(arc4.Struct):
    artifact_id: arc4.UInt64
    owner: arc4.Address


class ArtifactRetired(arc4.Struct):
    artifact_id: arc4.UInt64
    owner: arc4.Address


@subroutine
def sovereignty_key(artifact_id: UInt64, principal: Account) -> Bytes:
    return op.itob(artifact_id) + principal.bytes


@subroutine
def box_mbr(key_length: UInt64, value_length: UInt64) -> UInt64:
    return BOX_FLAT_MBR + BOX_BYTE_MBR * (key_length + value_length)


@subroutine
def check_storage_payment(pay: gtxn.PaymentTransaction, required: UInt64) -> None:
    assert pay.receiver == Global.current_application_address, STORAGE_UNFUNDED
    assert pay.amount >= required, STORAGE_UNFUNDED


class ArtifactRegistry(ARC4Contract):
    """
    On-chain registry of scholarly artifacts with owner-only mutation.

    Ids are minted from a monotonic counter and never reused. The caller of
    a create becomes the record's permanent owner.
    """

    def __init__(self) -> None:
        self.sequence = UInt64(0)
        self.artifacts = BoxMap(UInt64, ArtifactRecord, key_prefix=b"a")
        self.sovereignty = BoxMap(Bytes, arc4.Bool, key_prefix=b"o")

    # ── Mutations ─────────────────────────────────────────────────────────────

    @arc4.abimethod
    def create_artifact(
        self,
        pay: gtxn.PaymentTransaction,
        title: String,
        size: UInt64,
        abstract: String,
        tags: arc4.DynamicArray[arc4.String],
    ) -> UInt64:
        """
        Register a new artifact owned by the caller.

        Returns
        -------
        The freshly minted artifact id (previous sequence value + 1).

        `pay` must send the application account at least the minimum balance
        of the record box and the ownership box.

        Rejects with NomenclatureViolation or DimensionalConstraint when a
        field breaks its bounds, then StorageUnfunded when `pay` falls short;
        nothing is written in either case.
        """
        return self._mint(pay, title, size, abstract, tags)

    @arc4.abimethod
    def register_artifact(
        self,
        pay: gtxn.PaymentTransaction,
        title: String,
        size: UInt64,
        abstract: String,
        tags: arc4.DynamicArray[arc4.String],
    ) -> UInt64:
        """Alias of create_artifact kept for existing clients."""
        return self._mint(pay, title, size, abstract, tags)

    @arc4.abimethod
    def update_artifact(
        self,
        pay: gtxn.PaymentTransaction,
        artifact_id: UInt64,
        title: String,
        size: UInt64,
        abstract: String,
        tags: arc4.DynamicArray[arc4.String],
    ) -> bool:
        """
        Replace the mutable fields of an artifact the caller owns.

        Owner and creation round are carried over unchanged. Checks run in
        order: existence (ArtifactVoid), ownership (SovereigntyBreach), field
        rules, then storage (StorageUnfunded). `pay` must cover 400 microALGO
        per byte the record grows by; it may be zero otherwise.
        """
        record = self._load_owned(artifact_id)
        check_submission(title, size, abstract, tags)

        revised = ArtifactRecord(
            title=arc4.String(title),
            owner=arc4.Address(record.owner.native),
            size=arc4.UInt64(size),
            abstract=arc4.String(abstract),
            tags=tags.copy(),
            created_at=record.created_at,
        )
        growth = UInt64(0)
        if revised.bytes.length > record.bytes.length:
            growth = revised.bytes.length - record.bytes.length
        check_storage_payment(pay, BOX_BYTE_MBR * growth)

        # Box size follows the encoded record, so drop and re-create it.
        del self.artifacts[artifact_id]
        self.artifacts[artifact_id] = revised.copy()
        arc4.emit(
            ArtifactRevised(
                artifact_id=arc4.UInt64(artifact_id),
                owner=arc4.Address(Txn.sender),
            )
        )
        return True

    @arc4.abimethod
    def delete_artifact(self, artifact_id: UInt64) -> bool:
        """
        Remove an artifact the caller owns, together with its ownership entry.
        """
        record = self._load_owned(artifact_id)

        del self.artifacts[artifact_id]
        del self.sovereignty[sovereignty_key(artifact_id, record.owner.native)]
        arc4.emit(
            ArtifactRetired(
                artifact_id=arc4.UInt64(artifact_id),
                owner=arc4.Address(Txn.sender),
            )
        )
        return True

    # ── Views ─────────────────────────────────────────────────────────────────

    @arc4.abimethod(readonly=True)
    def get_signature(self, artifact_id: UInt64) -> Signature:
        record = self._load(artifact_id)
        return Signature(
            title=record.title,
            owner=arc4.Address(record.owner.native),
        )

    @arc4.abimethod(readonly=True)
    def get_abstract(self, artifact_id: UInt64) -> String:
        return self._load(artifact_id).abstract.native

    @arc4.abimethod(readonly=True)
    def get_essentials(self, artifact_id: UInt64) -> Essentials:
        record = self._load(artifact_id)
        return Essentials(
            title=record.title,
            owner=arc4.Address(record.owner.native),
            size=record.size,
        )

    @arc4.abimethod(readonly=True)
    def get_full_profile(self, artifact_id: UInt64) -> Profile:
        return self._profile(self._load(artifact_id))

    @arc4.abimethod(readonly=True)
    def get_display_view(self, artifact_id: UInt64) -> DisplayView:
        """Full profile under a fixed section heading, for presentation clients."""
        profile = self._profile(self._load(artifact_id))
        return DisplayView(section=arc4.String(SECTION_LABEL), profile=profile.copy())

    @arc4.abimethod(readonly=True)
    def get_created_at(self, artifact_id: UInt64) -> UInt64:
        return self._load(artifact_id).created_at.native

    @arc4.abimethod(readonly=True)
    def get_sequence(self) -> UInt64:
        return self.sequence

    @arc4.abimethod(readonly=True)
    def is_sovereign(self, artifact_id: UInt64, principal: arc4.Address) -> bool:
        key = sovereignty_key(artifact_id, principal.native)
        return self.sovereignty.get(key, default=arc4.Bool(False)).native

    @arc4.abimethod(readonly=True)
    def validate_submission(
        self,
        title: String,
        size: UInt64,
        abstract: String,
        tags: arc4.DynamicArray[arc4.String],
    ) -> bool:
        """
        Dry-run the field rules used by create and update. Writes nothing.

        Clients simulate this call before submitting a real one.
        """
        check_submission(title, size, abstract, tags)
        return True

    # ── Internals ─────────────────────────────────────────────────────────────

    @subroutine
    def _mint(
        self,
        pay: gtxn.PaymentTransaction,
        title: String,
        size: UInt64,
        abstract: String,
        tags: arc4.DynamicArray[arc4.String],
    ) -> UInt64:
        check_submission(title, size, abstract, tags)

        new_id = self.sequence + 1
        record = ArtifactRecord(
            title=arc4.String(title),
            owner=arc4.Address(Txn.sender),
            size=arc4.UInt64(size),
            abstract=arc4.String(abstract),
            tags=tags.copy(),
            created_at=arc4.UInt64(Global.round),
        )
        check_storage_payment(
            pay,
            box_mbr(UInt64(RECORD_KEY_LENGTH), record.bytes.length)
            + box_mbr(UInt64(SOVEREIGNTY_KEY_LENGTH), UInt64(SOVEREIGNTY_VALUE_LENGTH)),
        )

        self.artifacts[new_id] = record.copy()
        self.sovereignty[sovereignty_key(new_id, Txn.sender)] = arc4.Bool(True)
        self.sequence = new_id

        arc4.emit(
            ArtifactMinted(
                artifact_id=arc4.UInt64(new_id),
                owner=arc4.Address(Txn.sender),
                created_at=arc4.UInt64(Global.round),
            )
        )
        return new_id

    @subroutine
    def _load(self, artifact_id: UInt64) -> ArtifactRecord:
        assert artifact_id in self.artifacts, ARTIFACT_VOID
        return self.artifacts[artifact_id].copy()

    @subroutine
    def _load_owned(self, artifact_id: UInt64) -> ArtifactRecord:
        record = self._load(artifact_id)
        assert record.owner.native == Txn.sender, SOVEREIGNTY_BREACH
        return record

    @subroutine
    def _profile(self, record: ArtifactRecord) -> Profile:
        return Profile(
            title=record.title,
            creator=arc4.Address(record.owner.native),
            size=record.size,
            abstract=record.abstract,
            labels=record.tags.copy(),
        )
