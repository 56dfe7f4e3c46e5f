# beancomp.cache.serializer - MessagePack index serialization
"""
Serializes and deserializes per-document index results using MessagePack.
"""
from pathlib import Path
from typing import Optional

import msgpack
from loguru import logger

from beancomp.knowledge.base import DocumentData


class IndexSerializer:
    """
    Serializes/deserializes DocumentData using MessagePack.

    Files start with a magic header followed by a versioned envelope.
    """

    # Magic bytes to identify beancomp cache files
    MAGIC = b"BCIX"
    VERSION = 1

    def serialize(self, data: DocumentData) -> bytes:
        """
        Serialize DocumentData to bytes.

        Args:
            data: Index result to serialize

        Returns:
            MessagePack encoded bytes
        """
        envelope = {
            "version": self.VERSION,
            "data": data.to_dict(),
        }
        packed = msgpack.packb(envelope, use_bin_type=True)
        return self.MAGIC + packed

    def deserialize(self, raw: bytes) -> Optional[DocumentData]:
        """
        Deserialize bytes to DocumentData.

        Args:
            raw: MessagePack encoded bytes

        Returns:
            DocumentData or None if invalid
        """
        if not raw.startswith(self.MAGIC):
            return None

        try:
            envelope = msgpack.unpackb(raw[len(self.MAGIC):], raw=False)
        except (msgpack.UnpackException, ValueError) as e:
            logger.warning(f"corrupt index cache entry: {e}")
            return None

        if not isinstance(envelope, dict):
            return None
        if envelope.get("version", 0) != self.VERSION:
            return None

        payload = envelope.get("data")
        if not self._valid_payload(payload):
            logger.warning("index cache entry has an unexpected shape")
            return None
        return DocumentData.from_dict(payload)

    @staticmethod
    def _valid_payload(payload) -> bool:
        """Check the payload holds string lists under accounts and strings."""
        if not isinstance(payload, dict):
            return False
        for key in ("accounts", "strings"):
            values = payload.get(key, [])
            if not isinstance(values, list):
                return False
            if not all(isinstance(v, str) for v in values):
                return False
        return True

    def save(self, data: DocumentData, path: Path) -> bool:
        """
        Save index result to a file.

        Returns:
            True if successful
        """
        try:
            path.write_bytes(self.serialize(data))
            return True
        except OSError as e:
            logger.warning(f"cannot write cache file {path}: {e}")
            return False

    def load(self, path: Path) -> Optional[DocumentData]:
        """
        Load index result from a file.

        Returns:
            DocumentData or None if failed
        """
        try:
            raw = path.read_bytes()
        except OSError as e:
            logger.warning(f"cannot read cache file {path}: {e}")
            return None
        return self.deserialize(raw)
