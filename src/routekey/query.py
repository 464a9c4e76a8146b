"""Query string parsing and normalization.

Templates and candidates compare query parameters in normalized form: one
string per key, whatever order its values arrived in.
"""

from urllib.parse import parse_qs

# Joins the values of a repeated key in normalized form
VALUE_SEPARATOR = ","


class QueryParams:
    """Parsed query string parameters.

    Attributes:
        _data: Parsed query string as field name -> list of values.
    """

    _data: dict[str, list[str]]

    __slots__ = ("_data",)

    def __init__(self, query_string: str | bytes = "") -> None:
        if isinstance(query_string, bytes):
            query_string = query_string.decode("latin-1")
        self._data = parse_qs(query_string, keep_blank_values=True)

    def normalized(self) -> dict[str, str]:
        """Return one string per key: all values, sorted descending, comma-joined.

        Two query strings carrying the same set of values for a key normalize
        identically regardless of the order the values appeared in::

            >>> QueryParams("tag=a&tag=b").normalized()
            {'tag': 'b,a'}
        """
        return {
            key: VALUE_SEPARATOR.join(sorted(values, reverse=True))
            for key, values in self._data.items()
        }
