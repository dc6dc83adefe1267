import binascii
import logging
import random
import secrets
import string
import time
from typing import Optional

import pyotp

logger = logging.getLogger(__name__)

TOTP_DIGITS = 6
TOTP_PERIOD = 30

ID_ALPHABET = string.ascii_uppercase + string.ascii_lowercase
FILE_ID_LENGTH = 5
DEFAULT_NAME_LENGTH = 22

API_KEY_BYTES = 16
API_KEY_ID_PREFIX = "0x"


def otp_timestamp(skew_ms: int = 30000, now: Optional[float] = None) -> int:
    """Момент проверки OTP в миллисекундах: текущее время плюс смещение вперед"""
    if now is None:
        now = time.time()
    return int(now * 1000) + skew_ms


def verify_otp(secret: str, token: Optional[str], timestamp_ms: int, window: int = 1) -> bool:
    """Проверка TOTP-токена на момент timestamp_ms; никогда не бросает исключений"""
    if not secret:
        logger.error("TOTP secret is not configured")
        return False

    if not token or len(token) != TOTP_DIGITS or not (token.isascii() and token.isdigit()):
        return False

    totp = pyotp.TOTP(secret, digits=TOTP_DIGITS, interval=TOTP_PERIOD)
    try:
        return totp.verify(token, for_time=timestamp_ms // 1000, valid_window=window)
    except (binascii.Error, ValueError, TypeError):
        logger.error("TOTP secret is not valid base32")
        return False


def generate_random_id(length: int) -> str:
    """Случайная строка из латинских букв (не для секретов)"""
    return "".join(random.choices(ID_ALPHABET, k=length))


def generate_file_id() -> str:
    return generate_random_id(FILE_ID_LENGTH)


def generate_default_name() -> str:
    return generate_random_id(DEFAULT_NAME_LENGTH)


def generate_api_key() -> str:
    """Секрет API-ключа: 16 криптостойких байт в hex"""
    return secrets.token_hex(API_KEY_BYTES)


def generate_api_key_id() -> str:
    """Идентификатор API-ключа вида 0x00a1b2"""
    return f"{API_KEY_ID_PREFIX}{secrets.randbelow(0x1000000):06x}"
