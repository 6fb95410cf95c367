"""Search strategies for finding the highest-scoring board."""
