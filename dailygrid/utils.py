def truncate(value: str, max_len: int) -> str:
    """Cut to `max_len` characters, marking the cut with an ellipsis."""
    if len(value) <= max_len:
        return value
    return value[:max_len] + "..."
