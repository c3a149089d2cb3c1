"""
Encryption of secrets URLs with the DON public key.

The envelope is ECIES over secp256k1: an ephemeral ECDH shared secret is
hashed with SHA-512 into an AES-256-CBC key and an HMAC-SHA256 key. The
result is serialized as iv (16) | compressed ephemeral key (33) | mac (32) |
ciphertext, hex encoded with a 0x prefix.
"""

import os
import hmac
import hashlib
import logging
from typing import Any, List, Optional
from urllib.parse import urlparse

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat
from web3 import Web3

from contracts.abis import FUNCTIONS_ROUTER_ABI
from scripts.chain import get_coordinator

logger = logging.getLogger(__name__)


def _load_public_key(public_key: bytes) -> ec.EllipticCurvePublicKey:
    # The coordinator stores the raw 64 byte point without the 0x04 prefix
    if len(public_key) == 64:
        public_key = b'\x04' + public_key
    return ec.EllipticCurvePublicKey.from_encoded_point(ec.SECP256K1(), public_key)


def encrypt_with_public_key(
    public_key: bytes,
    message: str,
    ephemeral_key: Optional[ec.EllipticCurvePrivateKey] = None,
    iv: Optional[bytes] = None,
) -> str:
    recipient = _load_public_key(public_key)
    ephemeral_key = ephemeral_key or ec.generate_private_key(ec.SECP256K1())
    iv = iv or os.urandom(16)

    shared_x = ephemeral_key.exchange(ec.ECDH(), recipient)
    digest = hashlib.sha512(shared_x).digest()
    encryption_key, mac_key = digest[:32], digest[32:]

    padder = padding.PKCS7(128).padder()
    padded = padder.update(message.encode('utf-8')) + padder.finalize()
    encryptor = Cipher(algorithms.AES(encryption_key), modes.CBC(iv)).encryptor()
    ciphertext = encryptor.update(padded) + encryptor.finalize()

    ephemeral_public = ephemeral_key.public_key()
    uncompressed = ephemeral_public.public_bytes(Encoding.X962, PublicFormat.UncompressedPoint)
    compressed = ephemeral_public.public_bytes(Encoding.X962, PublicFormat.CompressedPoint)
    mac = hmac.new(mac_key, iv + uncompressed + ciphertext, hashlib.sha256).digest()

    return '0x' + (iv + compressed + mac + ciphertext).hex()


def validate_secrets_urls(secrets_urls: List[str]):
    if not secrets_urls:
        raise ValueError("Must provide an array of secrets URLs")
    for url in secrets_urls:
        parsed = urlparse(url or '')
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ValueError(f"Invalid secrets URL: {url!r}")


class SecretsManager:
    def __init__(self, w3: Web3, account: Any, functions_router_address: str, don_id: str):
        self.w3 = w3
        self.account = account
        self.functions_router_address = Web3.to_checksum_address(functions_router_address)
        self.don_id = don_id
        self.router = None
        self.coordinator = None

    def initialize(self):
        self.router = self.w3.eth.contract(address=self.functions_router_address, abi=FUNCTIONS_ROUTER_ABI)
        self.coordinator = get_coordinator(self.w3, self.router, self.don_id)
        logger.debug(f"SecretsManager bound to coordinator {self.coordinator.address}")

    def fetch_don_public_key(self) -> bytes:
        if self.coordinator is None:
            raise RuntimeError("SecretsManager not initialized. Call initialize() first.")
        return bytes(self.coordinator.functions.getDONPublicKey().call())

    def encrypt_secrets_urls(self, secrets_urls: List[str]) -> str:
        """Encrypt space-joined secrets URLs for the DON."""
        validate_secrets_urls(secrets_urls)
        return encrypt_with_public_key(self.fetch_don_public_key(), ' '.join(secrets_urls))
