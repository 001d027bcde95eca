# core/llm_answerer.py
from typing import Any, Dict, Sequence
import httpx
from pydantic import ValidationError
from config.settings import settings
from model.answer import Answer
from model.document import RetrievableUnit
from util.errors import MalformedAnswerError
import logging
from util.timing import timed

logger = logging.getLogger(__name__)

CONTEXT_SEP = "\n\n---\n\n"


async def _post_json(
    url: str, headers: Dict[str, str], payload: Dict[str, Any], timeout: float
) -> Dict[str, Any]:
    """
    JSON POST to `url`. Raises httpx.HTTPStatusError for non-2xx.
    A 2xx body that is not JSON comes back as {} and fails later as malformed.
    """
    async with httpx.AsyncClient(timeout=timeout) as client:
        r = await client.post(url, headers=headers, json=payload)
        r.raise_for_status()
        try:
            return r.json()
        except ValueError:
            return {}


def build_context(units: Sequence[RetrievableUnit]) -> str:
    return CONTEXT_SEP.join(f"Page {u.page}:\n{u.text}" for u in units)


def _user_prompt(question: str, units: Sequence[RetrievableUnit]) -> str:
    context = build_context(units) or "(no context)"
    return f"Question: {question}\n\nContext:\n\n{context}"


def _first_text_block(data: Dict[str, Any]) -> str:
    content = data.get("content") if isinstance(data, dict) else None
    if isinstance(content, list):
        for node in content:
            if isinstance(node, dict) and node.get("type") == "text":
                return node.get("text") or ""
    return ""


def parse_candidate(raw: str) -> Answer:
    """
    Parse the model's JSON reply into an Answer.
    Raises MalformedAnswerError when the reply is empty, not JSON, or not shaped
    like {"answer": str, "citations": [{page, quote, confidence}]}.
    """
    text = (raw or "").strip()
    if text.startswith("```"):
        text = text.strip("`").strip()
        if text.startswith("json"):
            text = text[4:].strip()
    if not text:
        raise MalformedAnswerError("model returned empty response")
    try:
        return Answer.model_validate_json(text)
    except ValidationError as e:
        raise MalformedAnswerError(
            f"model response failed shape check ({e.error_count()} errors)"
        ) from e


async def answer_question(
    *,
    api_key: str,
    model: str,
    api_url: str,
    question: str,
    units: Sequence[RetrievableUnit],
    timeout: float = 60.0,
) -> Answer:
    """
    Ask Anthropic to answer `question` from the retrieved units.
    The returned citations are NOT yet grounded; run them through the validator.
    """
    headers = {
        "x-api-key": api_key,
        "anthropic-version": settings.ANTHROPIC_VERSION,
        "content-type": "application/json",
    }
    payload = {
        "model": model,
        "max_tokens": settings.ANSWER_MAX_TOKENS,
        "system": settings.ANSWER_SYSTEM_PROMPT,
        "messages": [{"role": "user", "content": _user_prompt(question, units)}],
        "temperature": 0.0,
    }
    with timed(logger, "ai.answer", model=model, k=len(units)):
        data = await _post_json(api_url, headers, payload, timeout=timeout)

    candidate = parse_candidate(_first_text_block(data))
    logger.info("ai.answer.candidate citations=%d", len(candidate.citations))
    return candidate
