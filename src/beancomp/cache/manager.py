# beancomp.cache.manager - Cache management
"""
Manages cached index files keyed by document content hash.
"""
from pathlib import Path
from typing import Optional
import time

from loguru import logger

from beancomp.cache.serializer import IndexSerializer
from beancomp.knowledge.base import DocumentData


class CacheManager:
    """
    Manages index cache files.

    Cache files are stored as:
    - {cache_dir}/{source_hash}.bcidx

    A changed document has a new hash, so stale entries are never read;
    they are removed by the cleanup methods.
    """

    EXTENSION = ".bcidx"

    def __init__(self, cache_dir: Optional[Path] = None):
        """
        Initialize cache manager.

        Args:
            cache_dir: Directory for cache files. Defaults to ~/.cache/beancomp
        """
        if cache_dir is None:
            cache_dir = Path.home() / ".cache" / "beancomp"

        self.cache_dir = cache_dir
        self.cache_dir.mkdir(parents=True, exist_ok=True)

        self.serializer = IndexSerializer()

    def _get_cache_path(self, source_hash: str) -> Path:
        return self.cache_dir / f"{source_hash}{self.EXTENSION}"

    def _cache_files(self) -> list[Path]:
        return list(self.cache_dir.glob(f"*{self.EXTENSION}"))

    def get(self, source_hash: str) -> Optional[DocumentData]:
        """
        Get cached index by source hash.

        Args:
            source_hash: SHA256 hash of document text

        Returns:
            DocumentData or None if not cached
        """
        cache_path = self._get_cache_path(source_hash)

        if not cache_path.exists():
            return None

        data = self.serializer.load(cache_path)
        if data is None:
            # Invalid cache file, remove it
            self._unlink(cache_path)

        return data

    def put(self, source_hash: str, data: DocumentData) -> bool:
        """
        Store index in cache.

        Returns:
            True if successful
        """
        return self.serializer.save(data, self._get_cache_path(source_hash))

    def clear(self) -> int:
        """
        Clear all cache files.

        Returns:
            Number of files removed
        """
        return sum(1 for path in self._cache_files() if self._unlink(path))

    def get_stats(self) -> dict:
        """
        Get cache statistics.

        Returns:
            Dictionary with file count and size info
        """
        total_size = 0
        file_count = 0
        for path in self._cache_files():
            try:
                total_size += path.stat().st_size
                file_count += 1
            except OSError:
                continue

        return {
            "file_count": file_count,
            "total_size_bytes": total_size,
            "total_size_mb": round(total_size / (1024 * 1024), 2),
        }

    def cleanup_old(self, max_age_days: int = 30) -> int:
        """
        Remove cache files older than max_age_days.

        Returns:
            Number of files removed
        """
        cutoff = time.time() - (max_age_days * 24 * 60 * 60)
        count = 0
        for path in self._cache_files():
            try:
                expired = path.stat().st_mtime < cutoff
            except OSError:
                continue
            if expired and self._unlink(path):
                count += 1
        return count

    def cleanup_by_size(self, max_size_mb: int = 100) -> int:
        """
        Remove oldest cache files to stay under size limit.

        Returns:
            Number of files removed
        """
        max_bytes = max_size_mb * 1024 * 1024

        files = []
        for path in self._cache_files():
            try:
                stat = path.stat()
            except OSError:
                continue
            files.append((stat.st_mtime, stat.st_size, path))

        # Oldest first
        files.sort(key=lambda f: f[0])
        total_size = sum(size for _, size, _ in files)

        count = 0
        while total_size > max_bytes and files:
            _, size, path = files.pop(0)
            if self._unlink(path):
                total_size -= size
                count += 1
        return count

    def _unlink(self, path: Path) -> bool:
        try:
            path.unlink()
            return True
        except OSError as e:
            logger.warning(f"cannot remove cache file {path}: {e}")
            return False
