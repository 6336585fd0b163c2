from pydantic import BaseModel


class SearchRequest(BaseModel):
    query: str = ""

    model_config = {"frozen": True}

    def query_value(self) -> str:
        """Query with surrounding whitespace removed. Nothing else is normalized."""
        return self.query.strip()


def new_search_request(query: str) -> SearchRequest:
    return SearchRequest(query=query)
