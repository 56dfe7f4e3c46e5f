# beancomp.cache - Index cache module
from beancomp.cache.manager import CacheManager
from beancomp.cache.serializer import IndexSerializer

__all__ = [
    "CacheManager",
    "IndexSerializer",
]
