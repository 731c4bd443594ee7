from __future__ import annotations

from wordsuggest.api.suggest_service import perform_suggest, perform_switch
from wordsuggest.spellcheck.errors import NoActiveDictionary, SourceUnreadable

try:
    from fastmcp import FastMCP
except ImportError as exc:  # pragma: no cover - runtime dependency guard
    raise RuntimeError(
        "FastMCP is required to run the MCP server. Install the package dependencies."
    ) from exc


SERVER_TITLE = "WordSuggest"
SERVER_INSTRUCTIONS = (
    "Use use_dictionary to pick a word list, then suggest_words to get words "
    "close to a token, listed alphabetically."
)

mcp = FastMCP(
    name=SERVER_TITLE,
    instructions=SERVER_INSTRUCTIONS,
)


def _bounded(limit: int) -> int:
    return max(1, min(limit, 100))


def suggest_words(query: str, limit: int = 10) -> str:
    """Suggest dictionary words similar to a token."""
    try:
        suggestions = perform_suggest(q=query, limit=_bounded(limit))
    except NoActiveDictionary:
        return "No dictionary is active. Call use_dictionary first."
    return "\n".join(suggestions)


def use_dictionary(name: str, force_rebuild: bool = False) -> str:
    """Switch the active dictionary, building its index if needed."""
    try:
        active = perform_switch(name=name, force_rebuild=force_rebuild)
    except SourceUnreadable as exc:
        return str(exc)
    return f"Using dictionary {active.name} ({len(active.index)} words)."


mcp.tool(name="suggest_words", description="Suggest words similar to a token.")(suggest_words)
mcp.tool(name="use_dictionary", description="Select the dictionary used for suggestions.")(use_dictionary)


if __name__ == "__main__":
    mcp.run("http")
