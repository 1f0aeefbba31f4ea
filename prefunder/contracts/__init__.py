import json
from functools import lru_cache
from importlib.resources import files


@lru_cache(maxsize=None)
def load_abi(contract_name: str) -> list:
    """
    Returns the ABI shipped in `abis/<contract_name>.json`.
    Parsed once per name; callers must not mutate the result.
    """
    if not contract_name.endswith(".json"):
        contract_name += ".json"

    artifact = files(__package__) / "abis" / contract_name
    return json.loads(artifact.read_text(encoding="utf-8"))["abi"]
