from httpx import HTTPStatusError, Request, Response


def raise_http_status_error_404(_):
    raise HTTPStatusError(
        "mocked http status error",
        request=Request("post", "http://"),
        response=Response(404),
    )


class MockResponse:
    status_code = None
    text = ""

    def raise_for_status(self):
        pass

    @staticmethod
    def json():
        return None


async def return_mocked_resp(*_, **__):
    return MockResponse()


class FakeCall:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.kwargs = {}

    async def call(self, **kwargs):
        self.kwargs = kwargs
        if self.error is not None:
            raise self.error
        return self.result


class FakeFunctions:
    def __init__(self, calls: dict[str, FakeCall]):
        self._calls = calls

    def __getattr__(self, name):
        return lambda: self._calls[name]


class FakeContract:
    def __init__(self, address: str, calls: dict[str, FakeCall]):
        self.address = address
        self.functions = FakeFunctions(calls)


class FakeEth:
    def __init__(self, blocks=None, calls=None):
        self.blocks = blocks or {}
        self.calls = calls or {}
        self.contracts: list[FakeContract] = []

    async def get_block(self, block):
        result = self.blocks[block]
        if isinstance(result, Exception):
            raise result
        return result

    def contract(self, address, abi):  # pylint: disable=unused-argument
        contract = FakeContract(address, self.calls)
        self.contracts.append(contract)
        return contract


class FakeWeb3:
    def __init__(self, blocks=None, calls=None):
        self.eth = FakeEth(blocks, calls)


history_response = [
    {"symbol": "0x7ceb23fd6bc0add59e62ac25578270cff1b9f619", "prices": [2987.12]},
    {"symbol": "0x1bfd67037b42cf73acf2047067bd4f2c47d9bfd6", "prices": [40112.5]},
]
