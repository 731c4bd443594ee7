from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from wordsuggest.api.suggest_service import ActiveDictionary, perform_suggest, perform_switch, suggest_service
from wordsuggest.spellcheck.errors import NoActiveDictionary, SourceUnreadable

app = FastAPI(title="Word Suggestion API")


class SuggestResponse(BaseModel):
    dictionary: str
    query: str
    suggestions: list[str]


class DictionarySwitchRequest(BaseModel):
    name: str = Field(..., min_length=1)
    force_rebuild: bool = False


class DictionaryResponse(BaseModel):
    name: str
    words: int
    buckets: int


def _dictionary_response(active: ActiveDictionary) -> DictionaryResponse:
    return DictionaryResponse(
        name=active.name,
        words=len(active.index),
        buckets=len(active.index.buckets),
    )


@app.get("/suggest", response_model=SuggestResponse)
def suggest(
    q: str = Query(..., min_length=1),
    limit: int | None = Query(None, ge=1, le=1000),
    window: int | None = Query(None, ge=0, le=32),
) -> SuggestResponse:
    try:
        suggestions = perform_suggest(q=q, limit=limit, window=window)
    except NoActiveDictionary as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    return SuggestResponse(
        dictionary=suggest_service.active.name,
        query=q,
        suggestions=suggestions,
    )


@app.get("/dictionary", response_model=DictionaryResponse)
def current_dictionary() -> DictionaryResponse:
    active = suggest_service.active
    if active is None:
        raise HTTPException(status_code=404, detail="no dictionary is active")
    return _dictionary_response(active)


@app.put("/dictionary", response_model=DictionaryResponse)
def switch_dictionary(request: DictionarySwitchRequest) -> DictionaryResponse:
    try:
        active = perform_switch(name=request.name, force_rebuild=request.force_rebuild)
    except SourceUnreadable as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _dictionary_response(active)
