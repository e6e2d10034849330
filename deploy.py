"""
Deploy ArtifactRegistry to the network described by the environment.

Usage:
    algokit compile py smart_contracts/artifact_registry/contract.py \
        --out-dir smart_contracts/artifacts/artifact_registry
    python3 deploy.py                                   # LocalNet
    ALGOD_SERVER=https://testnet-api.algonode.cloud \
    DEPLOYER_MNEMONIC="word1 word2 ..." python3 deploy.py
"""
import logging
import os
import sys
from pathlib import Path

from algokit_utils import AlgorandClient
from dotenv import load_dotenv

from smart_contracts.artifact_registry.deploy_config import deploy

# Load .env from the same directory as this file, regardless of cwd
load_dotenv(Path(__file__).parent / ".env")

DEFAULT_ARC56_PATH = (
    Path(__file__).parent / "smart_contracts/artifacts/artifact_registry/ArtifactRegistry.arc56.json"
)

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    # LocalNet deployers come from KMD; any other network needs a mnemonic
    if os.environ.get("ALGOD_SERVER") and not os.environ.get("DEPLOYER_MNEMONIC", "").strip():
        logger.error("Set DEPLOYER_MNEMONIC to your 25-word mnemonic when ALGOD_SERVER is set.")
        sys.exit(1)

    arc56_path = Path(os.environ.get("ARC56_PATH", DEFAULT_ARC56_PATH))
    if not arc56_path.is_file():
        logger.error(f"App spec not found at {arc56_path}; compile the contract first.")
        sys.exit(1)

    algorand = AlgorandClient.from_environment()
    deployer = algorand.account.from_environment("DEPLOYER")
    logger.info(f"Deployer: {deployer.address}")

    app_client = deploy(
        algorand,
        deployer,
        arc56_path.read_text(),
        funding_algo=int(os.environ.get("APP_FUNDING_ALGO", "1")),
    )

    print()
    print("=" * 55)
    print("  ARTIFACT REGISTRY DEPLOYED")
    print(f"      App ID      : {app_client.app_id}")
    print(f"      App account : {app_client.app_address}")
    print("=" * 55)
    print()


if __name__ == "__main__":
    main()
