import math

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


def positive_int(value, default, cutoff=None):
    """
    Coerce a query-string value to a positive int.

    Anything unparsable or below 1 falls back to ``default``; values above
    ``cutoff`` are clamped.
    """
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < 1:
        return default
    if cutoff is not None:
        return min(number, cutoff)
    return number


class OffsetPaginator:
    """
    Offset/limit pagination over a queryset.

    ``page`` and ``limit`` are taken from the query params the way the task
    list receives them; results for a page past the end are simply empty.
    """

    page_query_param = 'page'
    page_size_query_param = 'limit'

    def __init__(self, page_size=DEFAULT_PAGE_SIZE, max_page_size=MAX_PAGE_SIZE):
        self.page_size = page_size
        self.max_page_size = max_page_size

    def get_page_number(self, params):
        return positive_int(params.get(self.page_query_param), DEFAULT_PAGE)

    def get_page_size(self, params):
        return positive_int(params.get(self.page_size_query_param), self.page_size, self.max_page_size)

    def paginate(self, queryset, params):
        page = self.get_page_number(params)
        limit = self.get_page_size(params)
        offset = (page - 1) * limit

        total = queryset.count()
        # a page past the last row never reaches the database, whatever its offset
        items = list(queryset[offset:offset + limit]) if offset < total else []

        return items, {
            'page': page,
            'limit': limit,
            'total': total,
            'pages': math.ceil(total / limit),
        }
