from .generator import PoolGenerator, generate_pool, ALPHABET, MAX_POOL_LENGTH

__all__ = ["PoolGenerator", "generate_pool", "ALPHABET", "MAX_POOL_LENGTH"]
