"""Ranking strategies for evaluated populations."""

from front_rank.rankers.nsga2 import fast_non_dominated_sort, nsga2_ranker
from front_rank.rankers.simple import simple_ranker
from front_rank.registry import RankerRegistry

# Register built-in rankers
RankerRegistry.register("nsga2", nsga2_ranker)
RankerRegistry.register("simple", simple_ranker)

__all__ = ["fast_non_dominated_sort", "nsga2_ranker", "simple_ranker"]
