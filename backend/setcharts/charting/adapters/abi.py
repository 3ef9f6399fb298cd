ERC20_DECIMALS_ABI = [
    {
        "constant": True,
        "inputs": [],
        "name": "decimals",
        "outputs": [{"name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
]

# SetToken.getPositions() returns ISetToken.Position[]
SET_TOKEN_ABI = [
    {
        "inputs": [],
        "name": "getPositions",
        "outputs": [
            {
                "components": [
                    {"internalType": "address", "name": "component", "type": "address"},
                    {"internalType": "address", "name": "module", "type": "address"},
                    {"internalType": "int256", "name": "unit", "type": "int256"},
                    {"internalType": "uint8", "name": "positionState", "type": "uint8"},
                    {"internalType": "bytes", "name": "data", "type": "bytes"},
                ],
                "internalType": "struct ISetToken.Position[]",
                "name": "",
                "type": "tuple[]",
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
]
