import os
from dataclasses import dataclass
from typing import Mapping, Tuple

# Setup your own account here or export COMMIT_ACCOUNT_ID
DEFAULT_ACCOUNT_ID = "0xD3776b414F5Ec37a1dd2FDD49BBb502b60A516E3"
DEFAULT_CHOICE = 0  # HEADS=0, TAILS=1

DEFAULT_SERVICE_HOST = "127.0.0.1"
DEFAULT_SERVICE_PORT = 5003

@dataclass
class CommitConfig:
    account_id: str
    choice: int

def parse_choice(raw) -> int:
    """Accept an int or a decimal string. Floats are refused rather than truncated."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise ValueError(f"Choice must be an integer, got {raw!r}")

def load_config(environ: Mapping[str, str] = os.environ) -> CommitConfig:
    return CommitConfig(
        account_id=environ.get("COMMIT_ACCOUNT_ID", DEFAULT_ACCOUNT_ID),
        choice=parse_choice(environ.get("COMMIT_CHOICE", DEFAULT_CHOICE)),
    )

def service_address(environ: Mapping[str, str] = os.environ) -> Tuple[str, int]:
    raw_port = environ.get("COMMIT_SERVICE_PORT", str(DEFAULT_SERVICE_PORT))
    try:
        port = int(raw_port)
    except ValueError:
        raise ValueError(f"COMMIT_SERVICE_PORT must be an integer, got {raw_port!r}") from None
    return environ.get("COMMIT_SERVICE_HOST", DEFAULT_SERVICE_HOST), port
