"""Shared test fixtures for the artifact registry."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from algopy import Account, String, UInt64, gtxn
from algopy_testing import AlgopyTestContext, algopy_testing_context

from smart_contracts.artifact_registry.contract import ArtifactRegistry
from smart_contracts.artifact_registry.deploy_config import artifact_mbr
from tests.helpers import CREATION_ROUND, STORAGE_FUNDING, tag_list


@pytest.fixture
def context() -> Iterator[AlgopyTestContext]:
    """Provide an emulated AVM with a fixed current round."""
    with algopy_testing_context() as ctx:
        ctx.ledger.patch_global_fields(round=UInt64(CREATION_ROUND))
        yield ctx


@pytest.fixture
def registry(context: AlgopyTestContext) -> ArtifactRegistry:
    return ArtifactRegistry()


@pytest.fixture
def app_address(context: AlgopyTestContext, registry: ArtifactRegistry) -> Account:
    return context.ledger.get_app(registry).address


@pytest.fixture
def author(context: AlgopyTestContext) -> Account:
    return context.default_sender


@pytest.fixture
def stranger(context: AlgopyTestContext) -> Account:
    return context.any.account()


@pytest.fixture
def as_sender(context: AlgopyTestContext) -> Callable:
    """Return a context manager factory that runs calls as a given account."""

    def _as_sender(account: Account):
        return context.txn.create_group(active_txn_overrides={"sender": account})

    return _as_sender


@pytest.fixture
def pay(
    context: AlgopyTestContext, app_address: Account
) -> Callable[..., gtxn.PaymentTransaction]:
    """Build the storage payment that accompanies create and update calls."""

    def _pay(
        amount: int = STORAGE_FUNDING, receiver: Account | None = None
    ) -> gtxn.PaymentTransaction:
        return context.any.txn.payment(
            receiver=app_address if receiver is None else receiver,
            amount=UInt64(amount),
        )

    return _pay


@pytest.fixture
def mint(registry: ArtifactRegistry, pay: Callable) -> Callable[..., UInt64]:
    """Create an artifact with valid defaults, paying exactly the box minimum balance."""

    def _mint(
        title: str = "Graph Theory Notes",
        size: int = 120,
        abstract: str = "Intro to graphs",
        tags: tuple[str, ...] = ("math", "graph"),
    ) -> UInt64:
        return registry.create_artifact(
            pay(artifact_mbr(title, abstract, tags)),
            String(title),
            UInt64(size),
            String(abstract),
            tag_list(*tags),
        )

    return _mint
