from collections.abc import Iterable


def rank[T](scored: Iterable[tuple[T, int]], limit: int) -> list[T]:
    """Drop non-positive scores, order by score descending and cut to `limit`.

    The sort is stable, so equal scores keep their fetch order.
    """
    if limit <= 0:
        return []
    kept = [(item, score) for item, score in scored if score > 0]
    kept.sort(key=lambda pair: pair[1], reverse=True)
    return [item for item, _ in kept[:limit]]
