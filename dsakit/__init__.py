"""Small generic data structures: stacks, a ring buffer, fixed-width bit sets and an adaptive leaky bucket."""

__version__ = "0.1.0"

__all__ = ["abstract", "array_list", "stack_list", "bitset", "ring_buffer", "bucket"]