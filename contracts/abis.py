"""
Contract ABI Definitions

Minimal ABIs for the contracts a Functions request touches:
  - FunctionsRouter: coordinator lookup, subscriptions, request events
  - FunctionsCoordinator: cost estimation and the DON public key
  - FunctionsConsumer: the deployed consumer that sends requests

Only includes the functions and events used by the scripts.
"""

# FunctionsRouter

FUNCTIONS_ROUTER_ABI = [
    # getContractById(bytes32) -> address
    {
        "inputs": [{"internalType": "bytes32", "name": "id", "type": "bytes32"}],
        "name": "getContractById",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    # getSubscription(uint64) -> Subscription
    {
        "inputs": [{"internalType": "uint64", "name": "subscriptionId", "type": "uint64"}],
        "name": "getSubscription",
        "outputs": [
            {
                "components": [
                    {"internalType": "uint96", "name": "balance", "type": "uint96"},
                    {"internalType": "address", "name": "owner", "type": "address"},
                    {"internalType": "uint96", "name": "blockedBalance", "type": "uint96"},
                    {"internalType": "address", "name": "proposedOwner", "type": "address"},
                    {"internalType": "address[]", "name": "consumers", "type": "address[]"},
                    {"internalType": "bytes32", "name": "flags", "type": "bytes32"},
                ],
                "internalType": "struct IFunctionsSubscriptions.Subscription",
                "name": "",
                "type": "tuple",
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
    # RequestStart(bytes32 indexed, bytes32 indexed, uint64 indexed, ...)
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "bytes32", "name": "requestId", "type": "bytes32"},
            {"indexed": True, "internalType": "bytes32", "name": "donId", "type": "bytes32"},
            {"indexed": True, "internalType": "uint64", "name": "subscriptionId", "type": "uint64"},
            {"indexed": False, "internalType": "address", "name": "subscriptionOwner", "type": "address"},
            {"indexed": False, "internalType": "address", "name": "requestingContract", "type": "address"},
            {"indexed": False, "internalType": "address", "name": "requestInitiator", "type": "address"},
            {"indexed": False, "internalType": "bytes", "name": "data", "type": "bytes"},
            {"indexed": False, "internalType": "uint16", "name": "dataVersion", "type": "uint16"},
            {"indexed": False, "internalType": "uint32", "name": "callbackGasLimit", "type": "uint32"},
            {"indexed": False, "internalType": "uint96", "name": "estimatedTotalCostJuels", "type": "uint96"},
        ],
        "name": "RequestStart",
        "type": "event",
    },
    # RequestProcessed(bytes32 indexed, uint64 indexed, ...)
    {
        "anonymous": False,
        "inputs": [
            {"indexed": True, "internalType": "bytes32", "name": "requestId", "type": "bytes32"},
            {"indexed": True, "internalType": "uint64", "name": "subscriptionId", "type": "uint64"},
            {"indexed": False, "internalType": "uint96", "name": "totalCostJuels", "type": "uint96"},
            {"indexed": False, "internalType": "address", "name": "transmitter", "type": "address"},
            {"indexed": False, "internalType": "enum FunctionsResponse.FulfillResult", "name": "resultCode", "type": "uint8"},
            {"indexed": False, "internalType": "bytes", "name": "response", "type": "bytes"},
            {"indexed": False, "internalType": "bytes", "name": "err", "type": "bytes"},
            {"indexed": False, "internalType": "bytes", "name": "callbackReturnData", "type": "bytes"},
        ],
        "name": "RequestProcessed",
        "type": "event",
    },
]

# FunctionsCoordinator

FUNCTIONS_COORDINATOR_ABI = [
    # estimateCost(uint64, bytes, uint32, uint256) -> uint96
    {
        "inputs": [
            {"internalType": "uint64", "name": "subscriptionId", "type": "uint64"},
            {"internalType": "bytes", "name": "data", "type": "bytes"},
            {"internalType": "uint32", "name": "callbackGasLimit", "type": "uint32"},
            {"internalType": "uint256", "name": "gasPriceWei", "type": "uint256"},
        ],
        "name": "estimateCost",
        "outputs": [{"internalType": "uint96", "name": "", "type": "uint96"}],
        "stateMutability": "view",
        "type": "function",
    },
    # getDONPublicKey() -> bytes
    {
        "inputs": [],
        "name": "getDONPublicKey",
        "outputs": [{"internalType": "bytes", "name": "", "type": "bytes"}],
        "stateMutability": "view",
        "type": "function",
    },
]

# FunctionsConsumer (ProfileNFTContract / BaseCase)

FUNCTIONS_CONSUMER_ABI = [
    # mintRequest(string, bytes, string[], uint64)
    {
        "inputs": [
            {"internalType": "string", "name": "source", "type": "string"},
            {"internalType": "bytes", "name": "encryptedSecretsUrls", "type": "bytes"},
            {"internalType": "string[]", "name": "args", "type": "string[]"},
            {"internalType": "uint64", "name": "subscriptionId", "type": "uint64"},
        ],
        "name": "mintRequest",
        "outputs": [{"internalType": "bytes32", "name": "requestId", "type": "bytes32"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
    # sendRequest(string, bytes, uint8, uint64, string[], bytes[], uint64, uint32, bytes32)
    {
        "inputs": [
            {"internalType": "string", "name": "source", "type": "string"},
            {"internalType": "bytes", "name": "encryptedSecretsUrls", "type": "bytes"},
            {"internalType": "uint8", "name": "donHostedSecretsSlotID", "type": "uint8"},
            {"internalType": "uint64", "name": "donHostedSecretsVersion", "type": "uint64"},
            {"internalType": "string[]", "name": "args", "type": "string[]"},
            {"internalType": "bytes[]", "name": "bytesArgs", "type": "bytes[]"},
            {"internalType": "uint64", "name": "subscriptionId", "type": "uint64"},
            {"internalType": "uint32", "name": "gasLimit", "type": "uint32"},
            {"internalType": "bytes32", "name": "donID", "type": "bytes32"},
        ],
        "name": "sendRequest",
        "outputs": [{"internalType": "bytes32", "name": "requestId", "type": "bytes32"}],
        "stateMutability": "nonpayable",
        "type": "function",
    },
]
