"""Settings from environment variables (and a .env file if present)"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

DEFAULT_SAMPLE_LIMIT = 1000
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _get_int(name: str, default: int) -> int:
    value = os.getenv(name, '')
    try:
        return int(value)
    except ValueError:
        return default


@dataclass
class Settings:
    sample_limit: int = DEFAULT_SAMPLE_LIMIT    # rows scanned per guess
    log_level: str = 'WARNING'
    csv_encoding: str = 'utf-8'

    @classmethod
    def from_env(cls) -> 'Settings':
        sample_limit = _get_int('MODELWARP_SAMPLE_LIMIT', DEFAULT_SAMPLE_LIMIT)
        log_level = os.getenv('MODELWARP_LOG_LEVEL', 'WARNING').upper()
        return cls(
            sample_limit=sample_limit if sample_limit >= 0 else DEFAULT_SAMPLE_LIMIT,
            log_level=log_level if log_level in LOG_LEVELS else 'WARNING',
            csv_encoding=os.getenv('MODELWARP_CSV_ENCODING', 'utf-8'),
        )
