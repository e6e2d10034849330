from __future__ import annotations

import logging
from collections.abc import Sequence

import algokit_utils

from smart_contracts.artifact_registry.storage import (
    BOX_BYTE_MBR,
    BOX_FLAT_MBR,
    RECORD_HEAD_LENGTH,
    RECORD_KEY_LENGTH,
    SOVEREIGNTY_KEY_LENGTH,
    SOVEREIGNTY_VALUE_LENGTH,
)

logger = logging.getLogger(__name__)


def box_mbr(key_length: int, value_length: int) -> int:
    return BOX_FLAT_MBR + BOX_BYTE_MBR * (key_length + value_length)


def record_box_mbr(title: str, abstract: str, tags: Sequence[str]) -> int:
    """Minimum balance locked by one ArtifactRecord box."""
    value_length = (
        RECORD_HEAD_LENGTH
        + 2 + len(title.encode())
        + 2 + len(abstract.encode())
        # array length, then one offset and one length prefix per tag
        + 2 + sum(4 + len(tag.encode()) for tag in tags)
    )
    return box_mbr(RECORD_KEY_LENGTH, value_length)


def sovereignty_box_mbr() -> int:
    return box_mbr(SOVEREIGNTY_KEY_LENGTH, SOVEREIGNTY_VALUE_LENGTH)


def artifact_mbr(title: str, abstract: str, tags: Sequence[str]) -> int:
    """Payment a client attaches to create_artifact for the boxes it writes."""
    return record_box_mbr(title, abstract, tags) + sovereignty_box_mbr()


def deploy(
    algorand: algokit_utils.AlgorandClient,
    deployer: algokit_utils.SigningAccount,
    app_spec: str,
    funding_algo: int = 1,
) -> algokit_utils.AppClient:
    app_factory = algorand.client.get_app_factory(
        app_spec=app_spec,
        default_sender=deployer.address,
        default_signer=deployer.signer,
    )

    # Deploy the registry, appending a new app on any breaking change
    app_client, result = app_factory.deploy(
        on_schema_break=algokit_utils.OnSchemaBreak.AppendApp,
        on_update=algokit_utils.OnUpdate.AppendApp,
    )

    if result.operation_performed in (
        algokit_utils.OperationPerformed.Create,
        algokit_utils.OperationPerformed.Replace,
    ):
        # Base account minimum balance; each call pays for its own boxes
        algorand.send.payment(
            algokit_utils.PaymentParams(
                amount=algokit_utils.AlgoAmount(algo=funding_algo),
                sender=deployer.address,
                receiver=app_client.app_address,
            )
        )
        logger.info(f"Funded app account {app_client.app_address} with {funding_algo} ALGO")

    logger.info(f"Artifact Registry deployed ({result.operation_performed.name})")
    logger.info(f"App ID: {app_client.app_id}")
    return app_client
