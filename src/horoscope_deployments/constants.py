"""Configuration constants for horoscope-deployments library."""

# Environment variable names read by the configuration assembler
POLYGON_RPC_ENV = "API_URL_KEY"
AMOY_RPC_ENV = "API_TESTNET_URL_KEY"
POLYGONSCAN_API_KEY_ENV = "POLYGONSCAN_API_KEY"
PRIVATE_KEY_ENV = "PRIVATE_KEY"

DEFAULT_NETWORK = "localhost"

# Compiler settings
SOLIDITY_VERSION = "0.8.24"
OPTIMIZER_ENABLED = False
OPTIMIZER_RUNS = 200

SOURCIFY_ENABLED = True
GAS_REPORTER_ENABLED = True

# Network configuration based on ethereum-lists/chains
NETWORK_CONFIG = {
    "polygon": {
        "chain_id": 137,
        "chain_name": "Polygon Mainnet",
        "short_name": "pol",  # EIP-3770
        "block_explorer_url": "https://polygonscan.com",
        "rpc_env": POLYGON_RPC_ENV,
    },
    "amoy": {
        "chain_id": 80002,
        "chain_name": "Polygon Amoy",
        "short_name": "polygonamoy",  # EIP-3770
        "block_explorer_url": "https://amoy.polygonscan.com",
        "rpc_env": AMOY_RPC_ENV,
    },
}

# Deployment parameter defaults shared by the module descriptors
DAPP_SIGNER_ADDRESS = "0x78b1792Fd8773D5cB9f601B7AbE50D1390440631"
WHITELIST_UMBRELLA_CORP_ADDRESS = "0x03C82eef6FaE9c14B224e056c127a4155F47D404"
UMBRELLA_MAX_ADDRESSES = 20
QUIZZ_MAX_ADDRESSES = 80

# Key of the parameters-file section applied to every module
GLOBAL_PARAMETERS_KEY = "$global"
