"""
Two-way binding between the search form and the URL query string.
"""
from typing import Callable, Mapping, Optional, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit

from models.search_filter import FILTER_PARAMS, SearchFilter


def parse_route(route: str) -> Tuple[str, dict]:
    """Split a route like "/admin?hall=A" into ("/admin", {"hall": "A"})."""
    parts = urlsplit(route or "/")
    return parts.path or "/", dict(parse_qsl(parts.query, keep_blank_values=True))


def build_route(path: str, params: Mapping) -> str:
    query = urlencode({key: value for key, value in params.items() if value is not None})
    return f"{path}?{query}" if query else path


def filter_query(params: Mapping) -> dict:
    """Only the search parameters, in their canonical order."""
    return {key: params[key] for key in FILTER_PARAMS if params.get(key) is not None}


class QueryParamSynchronizer:
    """
    Keeps `form` (the search inputs) and the URL query in step.

    navigate(params)        writes the given query parameters to the URL
    on_search(filter)       runs a search for an explicit submit/clear
    on_url_change(filter)   runs when the URL's query changed under us
                            (first load, back/forward, shared link)
    """

    def __init__(
        self,
        navigate: Callable[[dict], None],
        on_search: Callable[[SearchFilter], None],
        on_url_change: Optional[Callable[[SearchFilter], None]] = None,
    ):
        self.navigate = navigate
        self.on_search = on_search
        self.on_url_change = on_url_change
        self.form = {key: "" for key in FILTER_PARAMS}
        self._query = None

    @property
    def query(self) -> dict:
        return dict(self._query or {})

    @property
    def has_params(self) -> bool:
        return bool(self._query)

    def set_field(self, key: str, value: str):
        if key not in self.form:
            raise KeyError(key)
        self.form[key] = value or ""

    def on_navigate(self, params: Mapping):
        """Read the URL into the form; fire on_url_change when the query moved."""
        query = filter_query(params)
        if query == self._query:
            return
        self._query = query
        self.form = {key: query.get(key, "") for key in FILTER_PARAMS}
        if self.on_url_change:
            self.on_url_change(SearchFilter.from_params(query))

    def submit(self):
        # navigate may re-enter on_navigate before returning
        submitted = SearchFilter(**self.form)
        cleaned = submitted.to_query()
        self._query = cleaned
        self.navigate(cleaned)
        self.on_search(submitted)

    def clear(self):
        self.form = {key: "" for key in FILTER_PARAMS}
        self._query = {}
        self.navigate({})
        self.on_search(SearchFilter())
