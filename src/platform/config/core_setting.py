from decimal import Decimal
import json
from pathlib import Path
from typing import Annotated, List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Appsisted Parking'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # granian server (python -m src.main or the appsisted-parking script)
    SERVER_HOST: str = '0.0.0.0'
    SERVER_PORT: int = 8100
    SERVER_WORKERS: int = 1

    # ScyllaDB Configuration
    # Comma list ("node1,node2") or a JSON array
    SCYLLA_CONTACT_POINTS: Annotated[List[str], NoDecode] = ['localhost']
    SCYLLA_PORT: int = 9042
    SCYLLA_KEYSPACE: str = 'appsisted'
    SCYLLA_REPLICATION_FACTOR: int = 3
    SCYLLA_USERNAME: str = 'cassandra'  # Default username in developer mode
    SCYLLA_PASSWORD: SecretStr = SecretStr('cassandra')  # Default password in developer mode
    SCYLLA_CONNECT_TIMEOUT: int = 10  # Connection timeout (seconds)
    SCYLLA_CONTROL_TIMEOUT: int = 10  # Control connection timeout (seconds)
    SCYLLA_REQUEST_TIMEOUT: float = 10.0  # Per-statement timeout (seconds)

    # Consistency levels by name (cassandra.ConsistencyLevel attribute names)
    SCYLLA_READ_CONSISTENCY: str = 'LOCAL_QUORUM'
    SCYLLA_WRITE_CONSISTENCY: str = 'LOCAL_QUORUM'
    SCYLLA_SERIAL_CONSISTENCY: str = 'SERIAL'

    @field_validator('SCYLLA_CONTACT_POINTS', mode='before')
    @classmethod
    def assemble_scylla_contact_points(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str):
            v = json.loads(v) if v.lstrip().startswith('[') else v.split(',')
        hosts = [str(host).strip() for host in v if str(host).strip()]
        return hosts or ['localhost']

    @field_validator(
        'SCYLLA_READ_CONSISTENCY',
        'SCYLLA_WRITE_CONSISTENCY',
        'SCYLLA_SERIAL_CONSISTENCY',
        mode='after',
    )
    @classmethod
    def normalize_consistency_name(cls, v: str) -> str:
        return v.strip().upper()

    # Compare-and-swap retry budgets
    RESERVE_MAX_RETRIES: int = 256
    CHARGE_MAX_RETRIES: int = 16

    # Balance policy: when False a charge that would go below zero is rejected
    ALLOW_NEGATIVE_BALANCE: bool = True

    # bcrypt cost factor (log2 rounds)
    BCRYPT_ROUNDS: int = 12

    # Price applied to seeded sites
    DEFAULT_SITE_PRICE: Decimal = Decimal('2.50')


settings = Settings()  # type: ignore
