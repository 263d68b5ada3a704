"""
Web search result model.

Dependencies: pydantic
System role: Normalized search record returned by the search adapter
"""

from pydantic import BaseModel


class SearchResult(BaseModel):
    """One search hit reduced to the fields shown to students."""

    title: str = ""
    link: str = ""
    snippet: str = ""
    source: str = ""
