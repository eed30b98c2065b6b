from bloomcheck.filter.bloom_filter import (
    BloomFilter,
    hash_index,
    optimal_hash_count,
    optimal_size,
)

__all__ = ["BloomFilter", "hash_index", "optimal_hash_count", "optimal_size"]
