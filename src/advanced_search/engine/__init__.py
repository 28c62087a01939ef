"""Engine – evaluating a SearchConfig against in-memory records."""
from advanced_search.engine.in_memory import InMemorySearchEngine, SearchEngine, matches_condition
from advanced_search.engine.result import SearchResult

__all__ = ["InMemorySearchEngine", "SearchEngine", "SearchResult", "matches_condition"]
