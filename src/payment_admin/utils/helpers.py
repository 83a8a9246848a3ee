from typing import List, Sequence, TypeVar

T = TypeVar("T")


def paginate(items: Sequence[T], page_index: int, page_size: int) -> List[T]:
    """
    Return one page of `items` as a contiguous, order-preserving slice.

    A non-positive page size, a negative page index or a page past the end
    all give an empty page.
    """
    if page_size <= 0 or page_index < 0:
        return []
    skip = page_index * page_size
    return list(items[skip:skip + page_size])


def join_url(base: str, *parts: str) -> str:
    if not base.endswith("/"):
        base += "/"
    return base + "/".join(part.strip("/") for part in parts)
